from django.conf import settings
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from utils.responses import envelope


class WelcomeView(APIView):
    """Service banner; not rate limited."""

    authentication_classes = []
    throttle_classes = []

    @extend_schema(operation_id="welcome", summary="API welcome", tags=["Health"])
    def get(self, request):
        return envelope(
            message=f"Welcome to the {settings.APP_NAME} API",
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            timestamp=timezone.now().isoformat(),
        )
