from rest_framework import serializers

from marketplace.catalog.domain.models import Boutique, Product
from marketplace.ordering.domain.models import Order


class OrderProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ("id", "name", "price")


class OrderBoutiqueSerializer(serializers.ModelSerializer):
    """The customer gets the boutique's phone so delivery can be arranged."""

    class Meta:
        model = Boutique
        fields = ("id", "name", "phone")


class OrderSerializer(serializers.ModelSerializer):
    product = OrderProductSerializer(read_only=True)
    boutique = OrderBoutiqueSerializer(read_only=True)

    class Meta:
        model = Order
        fields = (
            "id",
            "customer_name",
            "customer_phone",
            "customer_location",
            "product",
            "boutique",
            "quantity",
            "total_price",
            "commission_amount",
            "status",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=100, error_messages={"blank": "Customer name is required."})
    customer_phone = serializers.CharField(max_length=30, error_messages={"blank": "Customer phone is required."})
    customer_location = serializers.CharField(
        max_length=255, error_messages={"blank": "Customer location is required."}
    )
    product = serializers.UUIDField(error_messages={"invalid": "Invalid product id."})
    quantity = serializers.IntegerField(
        min_value=1, default=1, error_messages={"min_value": "Quantity must be at least 1."}
    )


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Order.STATUS_CHOICES,
        error_messages={
            "invalid_choice": "Invalid status. Accepted values: pending, transmitted, delivered, commission_paid"
        },
    )
