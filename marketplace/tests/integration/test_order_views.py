from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Order
from marketplace.tests.factories import AdminFactory, BoutiqueFactory, OrderFactory, ProductFactory


class OrderViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.boutique = BoutiqueFactory(name="Pagne Chic", phone="+225 07 12 34 56 78", commission_rate=Decimal("10"))
        self.product = ProductFactory(boutique=self.boutique, price=Decimal("10000.00"), stock=5)

        self.list_url = reverse("marketplace:order-list")
        self.payload = {
            "customer_name": "Kouassi Jean",
            "customer_phone": "+225 05 44 33 22 11",
            "customer_location": "Cocody, Abidjan",
            "product": str(self.product.id),
            "quantity": 2,
        }

    def status_url(self, order_id):
        return reverse("marketplace:order-update-status", kwargs={"pk": order_id})

    def test_create_order_anonymous(self):
        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Order placed successfully. Payment on delivery.")
        data = response.data["data"]
        self.assertEqual(data["total_price"], "20000.00")
        self.assertEqual(data["commission_amount"], 2000)
        self.assertEqual(data["status"], "pending")
        self.assertEqual(data["product"], {"id": str(self.product.id), "name": self.product.name, "price": "10000.00"})
        self.assertEqual(data["boutique"]["phone"], "+225 07 12 34 56 78")

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 3)

    def test_create_with_bad_token_still_works(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer expired.or.garbage")
        response = self.client.post(self.list_url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_quantity_defaults_to_one(self):
        del self.payload["quantity"]

        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.data["data"]["quantity"], 1)
        self.assertEqual(response.data["data"]["total_price"], "10000.00")

    def test_missing_fields(self):
        response = self.client.post(self.list_url, {"quantity": 0}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        fields = {error["field"] for error in response.data["errors"]}
        self.assertEqual(fields, {"customer_name", "customer_phone", "customer_location", "product", "quantity"})

    def test_insufficient_stock(self):
        self.payload["quantity"] = 6

        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Insufficient stock. Available stock: 5")
        self.assertEqual(Order.objects.count(), 0)

    def test_unavailable_product(self):
        self.product.is_active = False
        self.product.save()

        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "This product is no longer available.")

    def test_unknown_product(self):
        self.payload["product"] = "3fa85f64-5717-4562-b3fc-2c963f66afa6"

        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Product not found.")

    def test_list_requires_admin(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_with_filters(self):
        self.client.force_authenticate(user=self.admin)
        OrderFactory(product=self.product, status=Order.STATUS_DELIVERED)
        OrderFactory(status=Order.STATUS_PENDING)

        response = self.client.get(self.list_url)
        self.assertEqual(response.data["total"], 2)

        response = self.client.get(self.list_url, {"status": "delivered"})
        self.assertEqual(response.data["total"], 1)

        response = self.client.get(self.list_url, {"boutique": str(self.boutique.id)})
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["data"][0]["boutique"]["id"], str(self.boutique.id))

    def test_update_status(self):
        self.client.force_authenticate(user=self.admin)
        order = OrderFactory(product=self.product)

        response = self.client.put(self.status_url(order.id), {"status": "transmitted"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], "transmitted")
        order.refresh_from_db()
        self.assertEqual(order.status, Order.STATUS_TRANSMITTED)

    def test_update_status_invalid_value(self):
        self.client.force_authenticate(user=self.admin)
        order = OrderFactory(product=self.product)

        response = self.client.put(self.status_url(order.id), {"status": "shipped"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"][0]["message"],
            "Invalid status. Accepted values: pending, transmitted, delivered, commission_paid",
        )
        order.refresh_from_db()
        self.assertEqual(order.status, Order.STATUS_PENDING)

    def test_update_status_unknown_order(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            self.status_url("3fa85f64-5717-4562-b3fc-2c963f66afa6"), {"status": "delivered"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_status_requires_admin(self):
        order = OrderFactory(product=self.product)
        response = self.client.put(self.status_url(order.id), {"status": "delivered"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
