import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from .boutique import Boutique


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])
    description = models.TextField(max_length=1000, blank=True)
    images = models.JSONField(default=list, blank=True)  # ordered image URLs
    # Nullable so products outlive a deleted boutique (they are deactivated instead)
    boutique = models.ForeignKey(
        Boutique, on_delete=models.SET_NULL, null=True, blank=True, related_name="products"
    )
    stock = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["is_active", "-created_at"], name="product_active_created_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def is_available(self):
        return self.is_active and self.boutique_id is not None
