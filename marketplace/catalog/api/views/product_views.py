from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets

from authentication.jwt_authentication import OptionalAuthMixin
from authentication.permissions import CanManageCatalog
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.serializers import ProductSerializer, ProductWriteSerializer
from marketplace.catalog.domain.services.catalog_service import CatalogService
from marketplace.services import ErrorCodes
from utils.exceptions import NotFoundError, raise_for_result
from utils.pagination import parse_page_params
from utils.query_params import parse_bool, parse_decimal, parse_uuid
from utils.responses import envelope, page_envelope

from .boutique_views import UUID_LOOKUP

ERRORS = {
    ErrorCodes.PRODUCT_NOT_FOUND: NotFoundError,
    ErrorCodes.BOUTIQUE_NOT_FOUND: NotFoundError,
}


class ProductViewSet(OptionalAuthMixin, viewsets.ViewSet):
    lookup_value_regex = UUID_LOOKUP
    optional_auth_methods = ("GET", "HEAD", "OPTIONS")

    def get_service(self) -> CatalogService:
        return container.catalog_service()

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [permissions.AllowAny()]
        return [CanManageCatalog()]

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="""
        **What it receives:**
        - Optional search and filters (query params)
        - Pagination parameters (page, limit)

        **What it returns:**
        - Newest products first, each with its boutique embedded
        - Only active products unless `is_active=false`
        """,
        parameters=[
            OpenApiParameter(name="search", type=str, description="Substring of name or description"),
            OpenApiParameter(name="boutique", type=str, description="Boutique id"),
            OpenApiParameter(name="min_price", type=float, description="Minimum price (inclusive)"),
            OpenApiParameter(name="max_price", type=float, description="Maximum price (inclusive)"),
            OpenApiParameter(name="is_active", type=bool, description="false includes inactive products"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 10, max: 100)"),
        ],
        responses={200: ProductSerializer(many=True)},
        tags=["Marketplace - Products"],
    )
    def list(self, request):
        params = request.query_params
        page, limit = parse_page_params(params)
        filters = {
            "search": params.get("search"),
            "boutique": parse_uuid(params.get("boutique")),
            "min_price": parse_decimal(params.get("min_price")),
            "max_price": parse_decimal(params.get("max_price")),
            "is_active": parse_bool(params.get("is_active")) is not False,
        }
        result = self.get_service().list_products(filters, page, limit)
        page_data = raise_for_result(result, ERRORS)
        data = ProductSerializer(page_data["results"], many=True, context={"request": request}).data
        return page_envelope(page_data, data)

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product details",
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Products"],
    )
    def retrieve(self, request, pk=None):
        product = raise_for_result(self.get_service().get_product(pk), ERRORS)
        return envelope(data=ProductSerializer(product, context={"request": request}).data)

    @extend_schema(
        operation_id="products_create",
        summary="Create a product",
        request=ProductWriteSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Boutique not found"),
        },
        tags=["Marketplace - Products"],
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = raise_for_result(self.get_service().create_product(serializer.validated_data), ERRORS)
        return envelope(
            data=ProductSerializer(product, context={"request": request}).data,
            message="Product created successfully.",
            http_status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="products_update",
        summary="Update a product",
        description="Partial update: only the fields sent are validated and changed.",
        request=ProductWriteSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product or boutique not found"),
        },
        tags=["Marketplace - Products"],
    )
    def update(self, request, pk=None):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = raise_for_result(self.get_service().update_product(pk, serializer.validated_data), ERRORS)
        return envelope(
            data=ProductSerializer(product, context={"request": request}).data,
            message="Product updated successfully.",
        )

    @extend_schema(
        operation_id="products_partial_update",
        summary="Partially update a product",
        request=ProductWriteSerializer,
        tags=["Marketplace - Products"],
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    @extend_schema(
        operation_id="products_delete",
        summary="Delete a product",
        responses={
            200: OpenApiResponse(description="Product deleted"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Products"],
    )
    def destroy(self, request, pk=None):
        raise_for_result(self.get_service().delete_product(pk), ERRORS)
        return envelope(message="Product deleted successfully.")
