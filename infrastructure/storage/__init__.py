"""
Storage Abstraction Layer
==========================

Unified interface for image storage (S3/MinIO or in-memory).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .local_adapter import LocalStorageAdapter
from .s3_adapter import S3StorageAdapter

__all__ = [
    "LocalStorageAdapter",
    "S3StorageAdapter",
    "StorageException",
    "StorageFactory",
    "StorageFile",
    "StorageInterface",
]
