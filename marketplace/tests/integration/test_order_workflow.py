from decimal import Decimal
from unittest.mock import patch

import pytest

from marketplace.models import Order, Product
from marketplace.ordering.domain.services.commission_service import calculate_commission
from marketplace.ordering.domain.services.order_service import OrderService
from marketplace.services import ErrorCodes
from marketplace.tests.factories import BoutiqueFactory, OrderFactory, ProductFactory

CUSTOMER = {
    "customer_name": "Kouassi Jean",
    "customer_phone": "+225 07 11 22 33 44",
    "customer_location": "Yopougon, Abidjan",
}


@pytest.fixture
def order_service():
    return OrderService()


@pytest.mark.django_db
class TestCreateOrder:
    def test_success_computes_totals_and_decrements_stock(self, order_service):
        boutique = BoutiqueFactory(commission_rate=Decimal("15.00"))
        product = ProductFactory(boutique=boutique, price=Decimal("7500.00"), stock=4)

        result = order_service.create_order(product_id=product.id, quantity=3, **CUSTOMER)

        assert result.ok is True
        order = result.value
        assert order.total_price == Decimal("22500.00")
        assert order.commission_amount == 3375
        assert order.status == Order.STATUS_PENDING
        assert order.boutique_id == boutique.id
        product.refresh_from_db()
        assert product.stock == 1

    def test_unknown_product(self, order_service):
        result = order_service.create_order(product_id="3fa85f64-5717-4562-b3fc-2c963f66afa6", **CUSTOMER)

        assert result.ok is False
        assert result.error == ErrorCodes.PRODUCT_NOT_FOUND
        assert Order.objects.count() == 0

    def test_inactive_product(self, order_service):
        product = ProductFactory(is_active=False)

        result = order_service.create_order(product_id=product.id, **CUSTOMER)

        assert result.error == ErrorCodes.PRODUCT_UNAVAILABLE
        assert result.error_detail == "This product is no longer available."

    def test_product_without_boutique(self, order_service):
        product = ProductFactory()
        Product.objects.filter(pk=product.pk).update(boutique=None)

        result = order_service.create_order(product_id=product.id, **CUSTOMER)

        assert result.error == ErrorCodes.PRODUCT_UNAVAILABLE

    def test_insufficient_stock(self, order_service):
        product = ProductFactory(stock=2)

        result = order_service.create_order(product_id=product.id, quantity=3, **CUSTOMER)

        assert result.error == ErrorCodes.INSUFFICIENT_STOCK
        assert result.error_detail == "Insufficient stock. Available stock: 2"
        product.refresh_from_db()
        assert product.stock == 2
        assert Order.objects.count() == 0

    def test_exact_stock_goes_to_zero(self, order_service):
        product = ProductFactory(stock=2)

        result = order_service.create_order(product_id=product.id, quantity=2, **CUSTOMER)

        assert result.ok is True
        product.refresh_from_db()
        assert product.stock == 0

    def test_concurrent_drain_writes_nothing(self, order_service):
        product = ProductFactory(stock=3)

        def drain_then_compute(total, rate):
            # Another order takes the stock between the check and the decrement
            Product.objects.filter(pk=product.pk).update(stock=1)
            return calculate_commission(total, rate)

        with patch(
            "marketplace.ordering.domain.services.order_service.calculate_commission",
            side_effect=drain_then_compute,
        ):
            result = order_service.create_order(product_id=product.id, quantity=2, **CUSTOMER)

        assert result.error == ErrorCodes.INSUFFICIENT_STOCK
        assert result.error_detail == "Insufficient stock. Available stock: 1"
        assert Order.objects.count() == 0
        product.refresh_from_db()
        assert product.stock == 1

    def test_zero_commission_rate(self, order_service):
        product = ProductFactory(boutique=BoutiqueFactory(commission_rate=Decimal("0")))

        result = order_service.create_order(product_id=product.id, **CUSTOMER)

        assert result.value.commission_amount == 0


@pytest.mark.django_db
class TestUpdateStatus:
    def test_any_transition_allowed(self, order_service):
        order = OrderFactory(status=Order.STATUS_COMMISSION_PAID)

        result = order_service.update_status(order.id, Order.STATUS_PENDING)

        assert result.ok is True
        assert result.value.status == Order.STATUS_PENDING

    def test_invalid_status_leaves_order_unchanged(self, order_service):
        order = OrderFactory(status=Order.STATUS_TRANSMITTED)

        result = order_service.update_status(order.id, "shipped")

        assert result.error == ErrorCodes.INVALID_STATUS
        order.refresh_from_db()
        assert order.status == Order.STATUS_TRANSMITTED

    def test_unknown_order(self, order_service):
        result = order_service.update_status("3fa85f64-5717-4562-b3fc-2c963f66afa6", Order.STATUS_DELIVERED)
        assert result.error == ErrorCodes.ORDER_NOT_FOUND

    def test_totals_survive_status_change(self, order_service):
        order = OrderFactory(total_price=Decimal("10000.00"), commission_amount=1000)

        order_service.update_status(order.id, Order.STATUS_DELIVERED)

        order.refresh_from_db()
        assert order.total_price == Decimal("10000.00")
        assert order.commission_amount == 1000


@pytest.mark.django_db
def test_list_orders_filters(order_service):
    boutique = BoutiqueFactory()
    OrderFactory(product=ProductFactory(boutique=boutique), status=Order.STATUS_DELIVERED)
    OrderFactory(status=Order.STATUS_DELIVERED)
    OrderFactory(status=Order.STATUS_PENDING)

    delivered = order_service.list_orders({"status": Order.STATUS_DELIVERED}).value
    assert delivered["total"] == 2

    mine = order_service.list_orders({"boutique": boutique.id}).value
    assert mine["total"] == 1
    assert mine["results"][0].boutique_id == boutique.id


@pytest.mark.django_db
def test_orders_survive_product_deletion():
    order = OrderFactory()
    order.product.delete()

    order.refresh_from_db()
    assert order.product_id is None
    assert order.boutique_id is not None
