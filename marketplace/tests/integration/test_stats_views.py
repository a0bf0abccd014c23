from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Order
from marketplace.tests.factories import AdminFactory, BoutiqueFactory, OrderFactory, ProductFactory


class AdminStatsViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.url = reverse("marketplace:admin-stats")

    def test_requires_authentication(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_empty_dashboard_is_zero_filled(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["orders"]["total"], 0)
        self.assertEqual(
            data["orders"]["by_status"],
            {"pending": 0, "transmitted": 0, "delivered": 0, "commission_paid": 0},
        )
        self.assertEqual(data["commission_revenue"], "0 FCFA")
        self.assertEqual(data["admins"]["total"], 1)

    def test_dashboard_figures(self):
        self.client.force_authenticate(user=self.admin)
        verified = BoutiqueFactory(is_verified=True)
        BoutiqueFactory(is_verified=False)
        product = ProductFactory(boutique=verified, price=Decimal("50000.00"))
        ProductFactory(boutique=verified, is_active=False)

        OrderFactory(product=product, status=Order.STATUS_DELIVERED, commission_amount=5000)
        OrderFactory(product=product, status=Order.STATUS_COMMISSION_PAID, commission_amount=7500)
        OrderFactory(product=product, status=Order.STATUS_PENDING, commission_amount=1000)

        data = self.client.get(self.url).data["data"]

        self.assertEqual(data["orders"]["total"], 3)
        self.assertEqual(data["orders"]["by_status"]["delivered"], 1)
        self.assertEqual(data["commission_revenue_raw"], 12500)
        self.assertEqual(data["commission_revenue"], "12 500 FCFA")
        self.assertEqual(data["products"]["total"], 1)
        self.assertEqual(data["boutiques"], {"total": 2, "verified": 1, "unverified": 1})
