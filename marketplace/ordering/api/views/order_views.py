"""
Order endpoints.

Customers place cash-on-delivery orders without an account; admins list
orders and move them through their status lifecycle.
"""

from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny

from authentication.jwt_authentication import OptionalAuthMixin
from authentication.permissions import CanManageOrders
from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer
from marketplace.catalog.api.views.boutique_views import UUID_LOOKUP
from marketplace.ordering.api.serializers import OrderCreateSerializer, OrderSerializer, OrderStatusSerializer
from marketplace.ordering.domain.models import Order
from marketplace.ordering.domain.services.order_service import OrderService
from marketplace.services import ErrorCodes
from utils.exceptions import ConflictError, NotFoundError, ValidationError, raise_for_result
from utils.pagination import parse_page_params
from utils.query_params import parse_uuid
from utils.responses import envelope, page_envelope

ERRORS = {
    ErrorCodes.PRODUCT_NOT_FOUND: NotFoundError,
    ErrorCodes.ORDER_NOT_FOUND: NotFoundError,
    ErrorCodes.PRODUCT_UNAVAILABLE: ValidationError,
    ErrorCodes.INSUFFICIENT_STOCK: ConflictError,
    ErrorCodes.INVALID_STATUS: ValidationError,
}


class OrderViewSet(OptionalAuthMixin, viewsets.ViewSet):
    lookup_value_regex = UUID_LOOKUP
    optional_auth_methods = ("POST",)

    def get_service(self) -> OrderService:
        return container.order_service()

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [CanManageOrders()]

    @extend_schema(
        operation_id="orders_create",
        summary="Place an order",
        description="""
        **What it receives:**
        - Customer name, phone and delivery location
        - Product id and quantity (default 1)

        **What it does:**
        - Checks the product is still sold and in stock
        - Computes total price and marketplace commission
        - Decrements stock and records the order atomically

        Payment happens on delivery; no account is required.
        """,
        request=OrderCreateSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data, unavailable product or insufficient stock"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        examples=[
            OpenApiExample(
                "Order two items",
                value={
                    "customer_name": "Kouassi Jean",
                    "customer_phone": "+225 07 00 00 00 00",
                    "customer_location": "Cocody, Abidjan",
                    "product": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                    "quantity": 2,
                },
                request_only=True,
            ),
        ],
        tags=["Marketplace - Orders"],
    )
    def create(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        result = self.get_service().create_order(
            customer_name=data["customer_name"],
            customer_phone=data["customer_phone"],
            customer_location=data["customer_location"],
            product_id=data["product"],
            quantity=data["quantity"],
        )
        order = raise_for_result(result, ERRORS)
        return envelope(
            data=OrderSerializer(order).data,
            message="Order placed successfully. Payment on delivery.",
            http_status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="orders_list",
        summary="List orders",
        parameters=[
            OpenApiParameter(name="status", type=str, enum=[choice for choice, _ in Order.STATUS_CHOICES]),
            OpenApiParameter(name="boutique", type=str, description="Boutique id"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 10, max: 100)"),
        ],
        responses={
            200: OrderSerializer(many=True),
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Authentication required"),
        },
        tags=["Marketplace - Orders"],
    )
    def list(self, request):
        page, limit = parse_page_params(request.query_params)
        filters = {
            "status": request.query_params.get("status"),
            "boutique": parse_uuid(request.query_params.get("boutique")),
        }
        page_data = raise_for_result(self.get_service().list_orders(filters, page, limit), ERRORS)
        return page_envelope(page_data, OrderSerializer(page_data["results"], many=True).data)

    @extend_schema(
        operation_id="orders_update_status",
        summary="Change an order's status",
        description="Any status may follow any other.",
        request=OrderStatusSerializer,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
        },
        tags=["Marketplace - Orders"],
    )
    @action(detail=True, methods=["put", "patch"], url_path="status")
    def update_status(self, request, pk=None):
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = raise_for_result(
            self.get_service().update_status(pk, serializer.validated_data["status"]), ERRORS
        )
        return envelope(data=OrderSerializer(order).data, message="Order status updated.")
