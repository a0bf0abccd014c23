"""
S3 Storage Adapter
==================

StorageInterface backed by S3 (or any S3-compatible store such as MinIO)
through django-storages.
"""

import logging
from typing import BinaryIO

from django.conf import settings
from storages.backends.s3boto3 import S3Boto3Storage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class S3StorageAdapter(StorageInterface):
    """
    Configuration (in settings.py):
        AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY: credentials
        AWS_STORAGE_BUCKET_NAME: bucket name
        AWS_S3_REGION_NAME: region
        AWS_S3_ENDPOINT_URL: custom endpoint for MinIO (optional)
    """

    def __init__(self):
        self.storage = S3Boto3Storage()
        self._bucket_name = getattr(settings, "AWS_STORAGE_BUCKET_NAME", "ivoirestore")

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            saved_path = self.storage.save(path, file)
            size = self.storage.size(saved_path)
            url = self.storage.url(saved_path)
        except Exception as e:
            logger.error(f"Failed to upload file to S3: {path}. Error: {str(e)}")
            raise StorageException(f"S3 upload failed: {str(e)}") from e

        logger.info(f"Uploaded file to S3: {saved_path} ({size} bytes)")
        return StorageFile(
            key=saved_path,
            url=url,
            size=size,
            content_type=content_type,
            bucket=self._bucket_name,
        )
