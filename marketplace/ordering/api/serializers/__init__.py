from .order_serializers import OrderCreateSerializer, OrderSerializer, OrderStatusSerializer


__all__ = [
    "OrderCreateSerializer",
    "OrderSerializer",
    "OrderStatusSerializer",
]
