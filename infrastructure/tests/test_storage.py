"""
Storage abstraction tests: S3 adapter (django-storages mocked), in-memory
adapter and the backend factory.
"""

from io import BytesIO
from unittest.mock import MagicMock, patch

from django.test import TestCase, override_settings

from infrastructure.storage import (
    LocalStorageAdapter,
    S3StorageAdapter,
    StorageException,
    StorageFactory,
    StorageFile,
    StorageInterface,
)


class StorageInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            StorageInterface()


@override_settings(AWS_STORAGE_BUCKET_NAME="ivoirestore-test")
class S3StorageAdapterTest(TestCase):
    def setUp(self):
        patcher = patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
        self.mock_storage_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.mock_storage = MagicMock()
        self.mock_storage_class.return_value = self.mock_storage
        self.adapter = S3StorageAdapter()

    def test_upload(self):
        self.mock_storage.save.return_value = "products/abc.jpg"
        self.mock_storage.size.return_value = 2048
        self.mock_storage.url.return_value = "https://ivoirestore-test.s3.amazonaws.com/products/abc.jpg"

        result = self.adapter.upload(BytesIO(b"jpeg"), "products/abc.jpg", "image/jpeg")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "products/abc.jpg")
        self.assertEqual(result.size, 2048)
        self.assertEqual(result.content_type, "image/jpeg")
        self.assertEqual(result.bucket, "ivoirestore-test")
        self.mock_storage.save.assert_called_once()

    def test_upload_failure_raises_storage_exception(self):
        self.mock_storage.save.side_effect = Exception("AccessDenied")

        with self.assertRaises(StorageException) as ctx:
            self.adapter.upload(BytesIO(b"jpeg"), "products/abc.jpg", "image/jpeg")

        self.assertIn("AccessDenied", str(ctx.exception))


class LocalStorageAdapterTest(TestCase):
    def setUp(self):
        self.storage = LocalStorageAdapter()

    def test_upload_and_url(self):
        result = self.storage.upload(BytesIO(b"png-bytes"), "boutiques/banner.png", "image/png")

        self.assertEqual(result.url, "/media/boutiques/banner.png")
        self.assertEqual(result.size, 9)
        self.assertEqual(result.bucket, "local")
        self.assertEqual(self.storage.files["boutiques/banner.png"], b"png-bytes")
        self.assertEqual(self.storage.content_types["boutiques/banner.png"], "image/png")

    def test_duplicate_key_rejected(self):
        self.storage.upload(BytesIO(b"a"), "products/x.jpg", "image/jpeg")

        with self.assertRaises(StorageException):
            self.storage.upload(BytesIO(b"b"), "products/x.jpg", "image/jpeg")


class StorageFactoryTest(TestCase):
    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "local"})
    def test_local_from_settings(self):
        self.assertIsInstance(StorageFactory.create(), LocalStorageAdapter)

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_explicit_s3(self, mock_storage_class):
        self.assertIsInstance(StorageFactory.create("s3"), S3StorageAdapter)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("ftp")
