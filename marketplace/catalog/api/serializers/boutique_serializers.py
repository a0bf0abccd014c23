from rest_framework import serializers

from marketplace.catalog.domain.models import Boutique
from utils.rbac import is_admin


class PhoneRedactionMixin:
    """Drop ``phone`` from the output unless the request comes from an admin."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get("request")
        if not is_admin(getattr(request, "user", None)):
            data.pop("phone", None)
        return data


class BoutiqueSerializer(PhoneRedactionMixin, serializers.ModelSerializer):
    class Meta:
        model = Boutique
        fields = (
            "id",
            "name",
            "phone",
            "address",
            "description",
            "banner",
            "is_verified",
            "commission_rate",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class BoutiqueSummarySerializer(PhoneRedactionMixin, serializers.ModelSerializer):
    """Boutique as embedded in product responses."""

    class Meta:
        model = Boutique
        fields = ("id", "name", "phone", "address", "is_verified")
        read_only_fields = fields


class BoutiqueWriteSerializer(serializers.ModelSerializer):
    """Create/update payload. Range checks come from the model validators."""

    class Meta:
        model = Boutique
        fields = ("name", "phone", "address", "description", "banner", "is_verified", "commission_rate")
        extra_kwargs = {
            "name": {"error_messages": {"blank": "Boutique name is required."}},
            "phone": {"error_messages": {"blank": "Phone number is required."}},
            "address": {"error_messages": {"blank": "Address is required."}},
        }
