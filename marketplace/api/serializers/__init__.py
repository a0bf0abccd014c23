from .response_serializers import ErrorResponseSerializer, FieldErrorSerializer, StatsSerializer


__all__ = [
    "ErrorResponseSerializer",
    "FieldErrorSerializer",
    "StatsSerializer",
]
