"""
Local Storage Adapter
=====================

In-memory StorageInterface for development and tests. Objects are kept in
a dict; URLs are built from ``MEDIA_URL``.
"""

import logging
from typing import BinaryIO, Dict

from django.conf import settings

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageInterface):
    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.content_types: Dict[str, str] = {}

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        if path in self.files:
            raise StorageException(f"Key already exists: {path}")

        data = file.read()
        self.files[path] = data
        self.content_types[path] = content_type
        logger.info(f"Local storage: stored {path} ({len(data)} bytes)")

        return StorageFile(
            key=path,
            url=f"{settings.MEDIA_URL.rstrip('/')}/{path}",
            size=len(data),
            content_type=content_type,
            bucket="local",
        )
