"""
Marketplace Service Layer

Business logic lives in domain services that return ``ServiceResult``
values instead of raising for expected failures.

Services:
- CatalogService: Product listing and CRUD
- BoutiqueService: Boutique listing and CRUD
- ReviewService: Customer avis
- ImageService: Image validation, resizing and storage
- OrderService: Order creation, status updates, listing
- StatsService: Back-office dashboard

Usage:
    from infrastructure.container import container

    result = container.catalog_service().list_products(filters={"search": "pagne"})
    if result.ok:
        page = result.value
    else:
        error = result.error
"""

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .stats_service import StatsService


__all__ = [
    "BaseService",
    "ErrorCodes",
    "ServiceResult",
    "StatsService",
    "service_err",
    "service_ok",
]
