from django.urls import include, path, re_path
from rest_framework.routers import DefaultRouter

from .api.views import AdminStatsView
from .catalog.api.views import (
    AvisViewSet,
    BoutiqueImageUploadView,
    BoutiqueViewSet,
    ProductImageUploadView,
    ProductViewSet,
)
from .ordering.api.views import OrderViewSet


class OptionalSlashRouter(DefaultRouter):
    """Routes match with or without the trailing slash."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = "/?"


router = OptionalSlashRouter()
router.register(r"boutiques", BoutiqueViewSet, basename="boutique")
router.register(r"products", ProductViewSet, basename="product")
router.register(r"orders", OrderViewSet, basename="order")
router.register(r"avis", AvisViewSet, basename="avis")

app_name = "marketplace"

urlpatterns = [
    re_path(r"^admin/stats/?$", AdminStatsView.as_view(), name="admin-stats"),
    re_path(r"^upload/product-image/?$", ProductImageUploadView.as_view(), name="upload-product-image"),
    re_path(r"^upload/boutique-image/?$", BoutiqueImageUploadView.as_view(), name="upload-boutique-image"),
    path("", include(router.urls)),
]
