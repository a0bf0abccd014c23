from rest_framework import serializers

from marketplace.catalog.domain.models import Avis


class AvisSerializer(serializers.ModelSerializer):
    class Meta:
        model = Avis
        fields = ("id", "name", "text", "rating", "created_at")
        read_only_fields = ("id", "created_at")
        extra_kwargs = {
            "name": {"error_messages": {"blank": "Name is required."}},
            "text": {"error_messages": {"blank": "Comment is required."}},
            "rating": {
                "error_messages": {
                    "min_value": "Rating must be between 1 and 5.",
                    "max_value": "Rating must be between 1 and 5.",
                }
            },
        }
