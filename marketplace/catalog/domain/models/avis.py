import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Avis(models.Model):
    """Free-standing customer testimonial, not tied to a product or boutique."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    text = models.TextField(max_length=500)
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        verbose_name_plural = "avis"

    def __str__(self):
        return f"{self.name} ({self.rating}/5)"
