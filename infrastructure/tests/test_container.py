"""
Service container tests.
"""

from unittest.mock import patch

from django.test import TestCase, override_settings

from infrastructure.container import ServiceContainer, container
from infrastructure.storage import LocalStorageAdapter, S3StorageAdapter
from marketplace.catalog.domain.services import BoutiqueService, CatalogService, ImageService, ReviewService
from marketplace.ordering.domain.services.order_service import OrderService
from marketplace.services import StatsService


class ServiceContainerTest(TestCase):
    def setUp(self):
        container.reset()

    def tearDown(self):
        container.reset()

    def test_container_is_singleton(self):
        self.assertIs(ServiceContainer(), ServiceContainer())
        self.assertIs(ServiceContainer(), container)

    def test_storage_uses_configured_backend(self):
        # Test settings select the in-memory backend
        self.assertIsInstance(container.storage(), LocalStorageAdapter)
        self.assertIs(container.storage(), container.storage())

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "s3"})
    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_storage_s3(self, mock_storage_class):
        self.assertIsInstance(container.storage(), S3StorageAdapter)

    def test_services_are_cached(self):
        self.assertIsInstance(container.order_service(), OrderService)
        self.assertIsInstance(container.catalog_service(), CatalogService)
        self.assertIsInstance(container.boutique_service(), BoutiqueService)
        self.assertIsInstance(container.review_service(), ReviewService)
        self.assertIsInstance(container.stats_service(), StatsService)
        self.assertIs(container.order_service(), container.order_service())

    def test_image_service_shares_storage(self):
        self.assertIsInstance(container.image_service(), ImageService)
        self.assertIs(container.image_service().storage, container.storage())

    def test_reset_drops_instances(self):
        storage = container.storage()
        orders = container.order_service()

        container.reset()

        self.assertIsNot(container.storage(), storage)
        self.assertIsNot(container.order_service(), orders)
