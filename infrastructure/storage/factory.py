"""
Storage Factory
===============

Builds the storage backend named by ``settings.INFRASTRUCTURE["STORAGE_BACKEND"]``.
"""

import logging
from typing import Optional

from django.conf import settings

from .interface import StorageInterface
from .local_adapter import LocalStorageAdapter
from .s3_adapter import S3StorageAdapter

logger = logging.getLogger(__name__)

BACKENDS = {
    "s3": S3StorageAdapter,
    "local": LocalStorageAdapter,
}


class StorageFactory:
    """
    Usage:
        storage = StorageFactory.create()
        storage = StorageFactory.create("local")
    """

    @staticmethod
    def create(backend: Optional[str] = None) -> StorageInterface:
        backend = backend or getattr(settings, "INFRASTRUCTURE", {}).get("STORAGE_BACKEND", "s3")
        try:
            adapter_class = BACKENDS[backend]
        except KeyError:
            raise ValueError(f"Unknown storage backend: {backend!r}") from None

        logger.info(f"Creating {backend} storage backend")
        return adapter_class()
