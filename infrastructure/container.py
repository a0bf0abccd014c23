"""
Dependency Injection Container
================================

Service locator for infrastructure and domain services.

Usage:
    from infrastructure.container import container

    storage = container.storage()
    orders = container.order_service()
"""

import logging
from typing import Optional

from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Lazily builds and caches service instances.

    Singleton: every ``ServiceContainer()`` call returns the same object.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.reset()
            self._initialized = True

    def storage(self) -> StorageInterface:
        """Object store configured by ``INFRASTRUCTURE["STORAGE_BACKEND"]`` (cached)."""
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def order_service(self):
        if self._order_service is None:
            from marketplace.ordering.domain.services.order_service import OrderService

            self._order_service = OrderService()
        return self._order_service

    def catalog_service(self):
        if self._catalog_service is None:
            from marketplace.catalog.domain.services.catalog_service import CatalogService

            self._catalog_service = CatalogService()
        return self._catalog_service

    def boutique_service(self):
        if self._boutique_service is None:
            from marketplace.catalog.domain.services.boutique_service import BoutiqueService

            self._boutique_service = BoutiqueService()
        return self._boutique_service

    def review_service(self):
        if self._review_service is None:
            from marketplace.catalog.domain.services.review_service import ReviewService

            self._review_service = ReviewService()
        return self._review_service

    def image_service(self):
        """ImageService bound to the current storage backend."""
        if self._image_service is None:
            from marketplace.catalog.domain.services.image_service import ImageService

            self._image_service = ImageService(storage=self.storage())
        return self._image_service

    def stats_service(self):
        if self._stats_service is None:
            from marketplace.services.stats_service import StatsService

            self._stats_service = StatsService()
        return self._stats_service

    def reset(self):
        """Drop every cached instance (tests, settings changes)."""
        self._storage: Optional[StorageInterface] = None
        self._order_service = None
        self._catalog_service = None
        self._boutique_service = None
        self._review_service = None
        self._image_service = None
        self._stats_service = None
        logger.debug("Service container reset")


# Global singleton instance
container = ServiceContainer()
