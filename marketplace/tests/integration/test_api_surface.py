from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import ProductFactory


class ApiSurfaceTest(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_welcome(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Welcome to the IvoireStore API")
        self.assertEqual(response.data["version"], "1.0.0")
        self.assertIn("timestamp", response.data)

    def test_unknown_route_is_json_404(self):
        response = self.client.get("/api/nothing-here")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(
            response.json(), {"success": False, "message": "Route not found: GET /api/nothing-here"}
        )

    def test_trailing_slash_is_optional(self):
        product = ProductFactory()

        without_slash = self.client.get(f"/api/products/{product.id}")
        with_slash = self.client.get(f"/api/products/{product.id}/")

        self.assertEqual(without_slash.status_code, status.HTTP_200_OK)
        self.assertEqual(with_slash.status_code, status.HTTP_200_OK)

    def test_operator_keys_never_reach_validation(self):
        response = self.client.post(
            reverse("marketplace:avis-list"),
            {"name": "Aya", "text": "Bien", "rating": 4, "$where": "1 == 1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_oversized_json_body_is_413(self):
        response = self.client.post(
            reverse("marketplace:avis-list"),
            {"name": "Aya", "text": "x" * 20000, "rating": 4},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
        self.assertEqual(response.data["message"], "Request body too large.")

    def test_request_log_reports_the_socket_address(self):
        with self.assertLogs("ivoirestore.requests", level="INFO") as logs:
            self.client.get(reverse("marketplace:avis-list"), HTTP_X_FORWARDED_FOR="6.6.6.6")

        self.assertIn("- 127.0.0.1", logs.output[-1])
        self.assertNotIn("6.6.6.6", logs.output[-1])

    def test_global_rate_limit(self):
        url = reverse("marketplace:avis-list")
        for _ in range(500):
            self.client.get(url)

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertFalse(response.data["success"])

    def test_schema(self):
        response = self.client.get(reverse("schema"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
