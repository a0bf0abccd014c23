"""
Service-layer result type and base class.

Services report expected failures (missing product, insufficient stock, ...)
as a failed ``ServiceResult`` carrying an error code; views turn the code
into an HTTP error with ``utils.exceptions.raise_for_result``. Unexpected
failures are raised.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        ok: True if the operation succeeded
        value: The success value (when ok)
        error: Error code from ``ErrorCodes`` (when not ok)
        error_detail: Human-readable message safe to return to the caller

    Example:
        >>> result = service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found.")
        >>> result.ok, result.error
        (False, 'product_not_found')
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T) -> ServiceResult[T]:
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for marketplace services.

    Provides a per-class logger and the ``log_performance`` decorator.

    Usage:
        class OrderService(BaseService):
            @BaseService.log_performance
            def create_order(self, ...):
                self.logger.info("...")
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """Log the duration of a service method, and its error code when it fails."""

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

            elapsed_time = (time.time() - start_time) * 1000
            if isinstance(result, ServiceResult) and not result.ok:
                self.logger.warning(f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms")
            else:
                self.logger.debug(f"{method_name} completed in {elapsed_time:.2f}ms")
            return result

        return wrapper


class ErrorCodes:
    """Error codes shared by marketplace services."""

    # Catalog
    BOUTIQUE_NOT_FOUND = "boutique_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_UNAVAILABLE = "product_unavailable"

    # Orders
    ORDER_NOT_FOUND = "order_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_STATUS = "invalid_status"

    # Uploads
    NO_FILE = "no_file"
    INVALID_FILE_TYPE = "invalid_file_type"
    FILE_TOO_LARGE = "file_too_large"
    INVALID_IMAGE = "invalid_image"
    STORAGE_ERROR = "storage_error"
