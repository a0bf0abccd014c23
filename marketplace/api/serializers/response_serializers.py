"""
Documentation-only response envelopes used in ``extend_schema``.
"""

from rest_framework import serializers


class FieldErrorSerializer(serializers.Serializer):
    field = serializers.CharField(allow_null=True)
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    message = serializers.CharField()
    errors = FieldErrorSerializer(many=True, required=False)


class StatsSerializer(serializers.Serializer):
    orders = serializers.DictField()
    commission_revenue = serializers.CharField()
    commission_revenue_raw = serializers.IntegerField()
    products = serializers.DictField()
    boutiques = serializers.DictField()
    admins = serializers.DictField()
