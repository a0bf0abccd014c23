"""
CatalogService - Product CRUD & listing.

Products are browsed publicly and managed by admins holding the
``manage_catalog`` capability (enforced by the views).
"""

from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import Q

from marketplace.catalog.domain.models import Boutique, Product
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.pagination import paginate

EDITABLE_FIELDS = ("name", "price", "description", "images", "stock", "is_active")


class CatalogService(BaseService):
    """
    Service for product catalog operations.

    Responsibilities:
    - List products with search, filters and pagination
    - Get product details
    - Create, update and delete products
    """

    def _products(self):
        return Product.objects.select_related("boutique")

    @BaseService.log_performance
    def list_products(
        self, filters: Optional[Dict[str, Any]] = None, page: int = 1, page_size: int = 10
    ) -> ServiceResult[Dict[str, Any]]:
        """
        List products, newest first.

        Args:
            filters: Optional filters
                - search: case-insensitive substring of name or description
                - boutique: boutique id
                - min_price / max_price: inclusive price bounds
                - is_active: False includes inactive products (default: active only)
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            ServiceResult with the ``utils.pagination.paginate`` dict

        Example:
            >>> result = catalog_service.list_products({"search": "pagne", "max_price": 15000})
            >>> result.value["total"]
            3
        """
        filters = filters or {}
        queryset = self._products()

        if filters.get("is_active", True):
            queryset = queryset.filter(is_active=True)

        search = filters.get("search")
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(description__icontains=search))

        if filters.get("boutique"):
            queryset = queryset.filter(boutique_id=filters["boutique"])

        if filters.get("min_price") is not None:
            queryset = queryset.filter(price__gte=filters["min_price"])

        if filters.get("max_price") is not None:
            queryset = queryset.filter(price__lte=filters["max_price"])

        return service_ok(paginate(queryset.order_by("-created_at"), page, page_size))

    def get_product(self, product_id) -> ServiceResult[Product]:
        product = self._products().filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found.")
        return service_ok(product)

    @BaseService.log_performance
    def create_product(self, data: Dict[str, Any]) -> ServiceResult[Product]:
        """
        Create a product in an existing boutique.

        Args:
            data: Validated product fields; ``boutique`` is the boutique id

        Returns:
            ServiceResult with the created Product
        """
        boutique = Boutique.objects.filter(pk=data["boutique"]).first()
        if boutique is None:
            return service_err(ErrorCodes.BOUTIQUE_NOT_FOUND, "Boutique not found. Check the boutique id.")

        fields = {field: data[field] for field in EDITABLE_FIELDS if field in data}
        product = Product.objects.create(boutique=boutique, **fields)

        self.logger.info(f"Created product: {product.name} (id={product.id}) in boutique {boutique.name}")
        return self.get_product(product.pk)

    @BaseService.log_performance
    @transaction.atomic
    def update_product(self, product_id, data: Dict[str, Any]) -> ServiceResult[Product]:
        """Partial update; only the fields present in ``data`` change."""
        product = Product.objects.select_for_update().filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found.")

        updated_fields = []
        if "boutique" in data:
            boutique = Boutique.objects.filter(pk=data["boutique"]).first()
            if boutique is None:
                return service_err(ErrorCodes.BOUTIQUE_NOT_FOUND, "Boutique not found. Check the boutique id.")
            product.boutique = boutique
            updated_fields.append("boutique")

        for field in EDITABLE_FIELDS:
            if field in data:
                setattr(product, field, data[field])
                updated_fields.append(field)

        if updated_fields:
            product.save(update_fields=updated_fields + ["updated_at"])

        self.logger.info(f"Updated product: {product.name} (id={product_id}), fields={updated_fields}")
        return self.get_product(product.pk)

    @BaseService.log_performance
    def delete_product(self, product_id) -> ServiceResult[bool]:
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found.")

        product_name = product.name
        product.delete()
        self.logger.warning(f"Deleted product: {product_name} (id={product_id})")
        return service_ok(True)
