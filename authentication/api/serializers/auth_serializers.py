from rest_framework import serializers

from authentication.models import Admin


class AdminSerializer(serializers.ModelSerializer):
    """Public admin profile; the password hash is never serialized."""

    capabilities = serializers.SerializerMethodField()

    class Meta:
        model = Admin
        fields = ("id", "name", "email", "role", "capabilities", "created_at", "updated_at")
        read_only_fields = fields

    def get_capabilities(self, obj):
        return sorted(obj.capabilities)


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, error_messages={"blank": "Name is required."})
    email = serializers.EmailField(error_messages={"invalid": "Invalid email address."})
    password = serializers.CharField(
        min_length=8,
        write_only=True,
        trim_whitespace=False,
        error_messages={"min_length": "Password must be at least 8 characters long."},
    )
    role = serializers.ChoiceField(choices=Admin.ROLE_CHOICES, required=False)

    def validate_email(self, value):
        return value.strip().lower()


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Invalid email address."})
    password = serializers.CharField(
        write_only=True, trim_whitespace=False, error_messages={"blank": "Password is required."}
    )

    def validate_email(self, value):
        return value.strip().lower()


class AuthResponseSerializer(serializers.Serializer):
    """Documentation-only shape of register/login responses."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    token = serializers.CharField()
    data = AdminSerializer()
