from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets

from authentication.jwt_authentication import OptionalAuthMixin
from authentication.permissions import CanManageCatalog
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import BoutiqueSerializer, BoutiqueWriteSerializer
from marketplace.catalog.domain.services.boutique_service import BoutiqueService
from marketplace.services import ErrorCodes
from utils.exceptions import NotFoundError, raise_for_result
from utils.pagination import parse_page_params
from utils.query_params import parse_bool
from utils.responses import envelope, page_envelope

UUID_LOOKUP = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

ERRORS = {ErrorCodes.BOUTIQUE_NOT_FOUND: NotFoundError}


class BoutiqueViewSet(OptionalAuthMixin, viewsets.ViewSet):
    """
    Public reads (phone shown to admins only), admin-only writes.
    """

    lookup_value_regex = UUID_LOOKUP
    optional_auth_methods = ("GET", "HEAD", "OPTIONS")

    def get_service(self) -> BoutiqueService:
        return container.boutique_service()

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [permissions.AllowAny()]
        return [CanManageCatalog()]

    @extend_schema(
        operation_id="boutiques_list",
        summary="List boutiques",
        description="""
        Newest first. The `phone` field is only present for authenticated admins.
        """,
        parameters=[
            OpenApiParameter(name="search", type=str, description="Substring of name or description"),
            OpenApiParameter(name="is_verified", type=bool, description="Filter on verification status"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 10, max: 100)"),
        ],
        responses={200: BoutiqueSerializer(many=True)},
        tags=["Marketplace - Boutiques"],
    )
    def list(self, request):
        page, limit = parse_page_params(request.query_params)
        filters = {
            "search": request.query_params.get("search"),
            "is_verified": parse_bool(request.query_params.get("is_verified")),
        }
        result = self.get_service().list_boutiques(filters, page, limit)
        page_data = raise_for_result(result, ERRORS)
        data = BoutiqueSerializer(page_data["results"], many=True, context={"request": request}).data
        return page_envelope(page_data, data)

    @extend_schema(
        operation_id="boutiques_retrieve",
        summary="Get boutique details",
        responses={
            200: BoutiqueSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Boutique not found"),
        },
        tags=["Marketplace - Boutiques"],
    )
    def retrieve(self, request, pk=None):
        boutique = raise_for_result(self.get_service().get_boutique(pk), ERRORS)
        return envelope(data=BoutiqueSerializer(boutique, context={"request": request}).data)

    @extend_schema(
        operation_id="boutiques_create",
        summary="Create a boutique",
        request=BoutiqueWriteSerializer,
        responses={
            201: BoutiqueSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
        },
        tags=["Marketplace - Boutiques"],
    )
    def create(self, request):
        serializer = BoutiqueWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        boutique = raise_for_result(self.get_service().create_boutique(serializer.validated_data), ERRORS)
        return envelope(
            data=BoutiqueSerializer(boutique, context={"request": request}).data,
            message="Boutique created successfully.",
            http_status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="boutiques_update",
        summary="Update a boutique",
        description="Partial update: only the fields sent are validated and changed.",
        request=BoutiqueWriteSerializer,
        responses={
            200: BoutiqueSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Boutique not found"),
        },
        tags=["Marketplace - Boutiques"],
    )
    def update(self, request, pk=None):
        serializer = BoutiqueWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        boutique = raise_for_result(self.get_service().update_boutique(pk, serializer.validated_data), ERRORS)
        return envelope(
            data=BoutiqueSerializer(boutique, context={"request": request}).data,
            message="Boutique updated successfully.",
        )

    @extend_schema(
        operation_id="boutiques_partial_update",
        summary="Partially update a boutique",
        request=BoutiqueWriteSerializer,
        tags=["Marketplace - Boutiques"],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    @extend_schema(
        operation_id="boutiques_delete",
        summary="Delete a boutique",
        description="Its products are deactivated, not deleted.",
        responses={
            200: OpenApiResponse(description="Boutique deleted"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Boutique not found"),
        },
        tags=["Marketplace - Boutiques"],
    )
    def destroy(self, request, pk=None):
        deactivated = raise_for_result(self.get_service().delete_boutique(pk), ERRORS)
        return envelope(
            message="Boutique deleted successfully. Its products have been deactivated.",
            products_deactivated=deactivated,
        )
