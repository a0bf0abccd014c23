from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Avis
from marketplace.tests.factories import AvisFactory


class AvisViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("marketplace:avis-list")

    def test_create(self):
        response = self.client.post(
            self.url, {"name": "Aya", "text": "Très bon service", "rating": 5}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Thank you for your review!")
        self.assertEqual(Avis.objects.get().rating, 5)

    def test_text_is_sanitized(self):
        self.client.post(self.url, {"name": " Aya ", "text": "<script>x</script>", "rating": 4}, format="json")

        avis = Avis.objects.get()
        self.assertEqual(avis.name, "Aya")
        self.assertEqual(avis.text, "&lt;script&gt;x&lt;/script&gt;")

    def test_rating_out_of_range(self):
        for rating in (0, 6):
            response = self.client.post(self.url, {"name": "Aya", "text": "Bien", "rating": rating}, format="json")

            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["errors"][0]["field"], "rating")
        self.assertEqual(Avis.objects.count(), 0)

    def test_text_too_long(self):
        response = self.client.post(self.url, {"name": "Aya", "text": "x" * 501, "rating": 3}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_defaults_to_twenty_per_page(self):
        AvisFactory.create_batch(25)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 20)
        self.assertEqual(response.data["total"], 25)
        self.assertEqual(response.data["total_pages"], 2)

    def test_token_is_ignored(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
