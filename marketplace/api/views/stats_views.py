from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.views import APIView

from authentication.permissions import CanViewStats
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, StatsSerializer
from utils.exceptions import raise_for_result
from utils.responses import envelope


class AdminStatsView(APIView):
    permission_classes = [CanViewStats]

    @extend_schema(
        operation_id="admin_stats",
        summary="Dashboard statistics",
        description="""
        Order counts per status, commission revenue (orders delivered or
        commission paid), active products, boutiques and admins.
        """,
        responses={
            200: StatsSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Authentication required"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Missing view_stats capability"),
        },
        tags=["Admin"],
    )
    def get(self, request):
        stats = raise_for_result(container.stats_service().dashboard(), {})
        return envelope(data=stats)
