"""
OrderService - cash-on-delivery order workflow.

Creates orders against a single product, fixes their price and commission
at creation time, and lets admins move them through the status enum.
"""

from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from marketplace.catalog.domain.models import Product
from marketplace.ordering.domain.models.order import Order
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.pagination import paginate

from .commission_service import calculate_commission

VALID_STATUSES = frozenset(choice for choice, _ in Order.STATUS_CHOICES)


def _insufficient_stock(available: int) -> ServiceResult:
    return service_err(ErrorCodes.INSUFFICIENT_STOCK, f"Insufficient stock. Available stock: {available}")


class OrderService(BaseService):
    """
    Service for the order lifecycle.

    Responsibilities:
    - Create an order, decrementing stock atomically
    - Overwrite an order's status
    - List orders for the back office
    """

    def _orders(self):
        return Order.objects.select_related("product", "boutique")

    def get_order(self, order_id) -> ServiceResult[Order]:
        order = self._orders().filter(pk=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found.")
        return service_ok(order)

    @BaseService.log_performance
    def create_order(
        self,
        customer_name: str,
        customer_phone: str,
        customer_location: str,
        product_id,
        quantity: int = 1,
    ) -> ServiceResult[Order]:
        """
        Place an order for ``quantity`` units of a product.

        Business Logic:
        1. Product must exist and still be sellable (active, boutique present)
        2. Stock must cover the quantity
        3. Total price and commission are computed once and stored
        4. Stock is decremented with a conditional UPDATE in the same
           transaction as the order insert; if a concurrent order drained the
           stock first nothing is written

        Returns:
            ServiceResult with the created order (product and boutique joined)
        """
        product = Product.objects.select_related("boutique").filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found.")

        if not product.is_available:
            return service_err(ErrorCodes.PRODUCT_UNAVAILABLE, "This product is no longer available.")

        if product.stock < quantity:
            return _insufficient_stock(product.stock)

        boutique = product.boutique
        total_price = product.price * quantity
        commission_amount = calculate_commission(total_price, boutique.commission_rate)

        with transaction.atomic():
            updated = Product.objects.filter(
                pk=product.pk,
                is_active=True,
                boutique__isnull=False,
                stock__gte=quantity,
            ).update(stock=F("stock") - quantity)

            if not updated:
                available = Product.objects.filter(pk=product.pk).values_list("stock", flat=True).first() or 0
                self.logger.warning(
                    f"Stock race lost for product {product.pk}: requested={quantity} available={available}"
                )
                return _insufficient_stock(available)

            order = Order.objects.create(
                customer_name=customer_name,
                customer_phone=customer_phone,
                customer_location=customer_location,
                product=product,
                boutique=boutique,
                quantity=quantity,
                total_price=total_price,
                commission_amount=commission_amount,
                status=Order.STATUS_PENDING,
            )

        self.logger.info(
            f"New order {order.id} - customer={customer_name} product={product.name} "
            f"quantity={quantity} commission={commission_amount}"
        )
        return self.get_order(order.pk)

    @BaseService.log_performance
    def update_status(self, order_id, status: str) -> ServiceResult[Order]:
        """Overwrite an order's status with any value of the enum."""
        if status not in VALID_STATUSES:
            return service_err(
                ErrorCodes.INVALID_STATUS,
                f"Invalid status. Accepted values: {', '.join(choice for choice, _ in Order.STATUS_CHOICES)}",
            )

        updated = Order.objects.filter(pk=order_id).update(status=status, updated_at=timezone.now())
        if not updated:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found.")

        self.logger.info(f"Order {order_id} status set to {status}")
        return self.get_order(order_id)

    def list_orders(
        self, filters: Optional[Dict[str, Any]] = None, page: int = 1, page_size: int = 10
    ) -> ServiceResult[Dict[str, Any]]:
        """Newest orders first, optionally filtered by ``status`` and ``boutique``."""
        filters = filters or {}
        queryset = self._orders().order_by("-created_at")

        if filters.get("status"):
            queryset = queryset.filter(status=filters["status"])
        if filters.get("boutique"):
            queryset = queryset.filter(boutique_id=filters["boutique"])

        return service_ok(paginate(queryset, page, page_size))
