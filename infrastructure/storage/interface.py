"""
Object storage contract
=======================

Product photos and boutique banners are written through this interface
only; ``StorageFactory`` picks the concrete backend from
``settings.INFRASTRUCTURE["STORAGE_BACKEND"]``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StorageFile:
    """What an upload hands back: ``key`` and ``url`` end up in the API response."""

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    @abstractmethod
    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        """
        Write ``file`` at ``path`` and return where it landed.

        The backend may alter ``path`` to keep keys unique; callers must use
        the returned ``key``. Failures surface as StorageException.
        """


class StorageException(Exception):
    """Raised by adapters when the object store rejects or loses a transfer."""
