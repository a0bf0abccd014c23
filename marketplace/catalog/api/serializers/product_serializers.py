from decimal import Decimal

from rest_framework import serializers

from marketplace.catalog.domain.models import Product

from .boutique_serializers import BoutiqueSummarySerializer


class ProductSerializer(serializers.ModelSerializer):
    boutique = BoutiqueSummarySerializer(read_only=True)

    class Meta:
        model = Product
        fields = (
            "id",
            "name",
            "price",
            "description",
            "images",
            "stock",
            "is_active",
            "boutique",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """
    Create/update payload.

    ``boutique`` is validated for shape here; its existence is checked by
    CatalogService (404 when missing).
    """

    name = serializers.CharField(max_length=200, error_messages={"blank": "Product name is required."})
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0"),
        error_messages={"min_value": "Price must be a positive number."},
    )
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.CharField(max_length=500), required=False)
    boutique = serializers.UUIDField(error_messages={"invalid": "Invalid boutique id."})
    stock = serializers.IntegerField(
        min_value=0, required=False, error_messages={"min_value": "Stock must be a positive integer."}
    )
    is_active = serializers.BooleanField(required=False)
