from rest_framework import serializers


class ImageUploadSerializer(serializers.Serializer):
    """Documentation-only: multipart body with a single ``image`` file."""

    image = serializers.FileField()


class ImageUploadResultSerializer(serializers.Serializer):
    url = serializers.CharField()
    key = serializers.CharField()
    width = serializers.IntegerField()
    height = serializers.IntegerField()
    size = serializers.IntegerField()
