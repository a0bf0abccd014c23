import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from marketplace.catalog.domain.models.boutique import Boutique
from marketplace.catalog.domain.models.product import Product


class Order(models.Model):
    """Cash-on-delivery order for a single product."""

    STATUS_PENDING = "pending"
    STATUS_TRANSMITTED = "transmitted"
    STATUS_DELIVERED = "delivered"
    STATUS_COMMISSION_PAID = "commission_paid"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),  # Default on creation
        (STATUS_TRANSMITTED, "Transmitted"),  # Forwarded to the boutique
        (STATUS_DELIVERED, "Delivered"),  # Customer paid on delivery
        (STATUS_COMMISSION_PAID, "Commission paid"),  # Boutique settled the commission
    ]

    # Statuses whose commission counts as earned revenue
    EARNED_STATUSES = (STATUS_DELIVERED, STATUS_COMMISSION_PAID)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_name = models.CharField(max_length=100)
    customer_phone = models.CharField(max_length=30)
    customer_location = models.CharField(max_length=255)

    # Rows survive catalog deletions so commission history is kept
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True, related_name="orders")
    boutique = models.ForeignKey(Boutique, on_delete=models.SET_NULL, null=True, related_name="orders")

    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    total_price = models.DecimalField(max_digits=14, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])
    commission_amount = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["status", "-created_at"], name="order_status_created_idx"),
        ]

    def __str__(self):
        return f"Order {str(self.id)[:8]} - {self.customer_name}"
