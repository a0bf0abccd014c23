from django.conf import settings
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import AvisSerializer
from utils.exceptions import raise_for_result
from utils.pagination import parse_page_params
from utils.responses import envelope, page_envelope


class AvisViewSet(viewsets.ViewSet):
    """Public customer reviews of the marketplace itself."""

    authentication_classes = []

    def get_service(self):
        return container.review_service()

    @extend_schema(
        operation_id="avis_list",
        summary="List reviews",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 20, max: 100)"),
        ],
        responses={200: AvisSerializer(many=True)},
        tags=["Marketplace - Reviews"],
    )
    def list(self, request):
        page, limit = parse_page_params(
            request.query_params, default_limit=settings.MARKETPLACE["REVIEWS_PAGE_SIZE"]
        )
        page_data = raise_for_result(self.get_service().list_avis(page, limit), {})
        return page_envelope(page_data, AvisSerializer(page_data["results"], many=True).data)

    @extend_schema(
        operation_id="avis_create",
        summary="Leave a review",
        request=AvisSerializer,
        responses={
            201: AvisSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
        },
        examples=[
            OpenApiExample(
                "Five stars",
                value={"name": "Aya K.", "text": "Livraison rapide, très bon service.", "rating": 5},
                request_only=True,
            ),
        ],
        tags=["Marketplace - Reviews"],
    )
    def create(self, request):
        serializer = AvisSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        avis = raise_for_result(self.get_service().create_avis(**serializer.validated_data), {})
        return envelope(
            data=AvisSerializer(avis).data,
            message="Thank you for your review!",
            http_status=status.HTTP_201_CREATED,
        )
