from .boutique_views import BoutiqueViewSet
from .product_views import ProductViewSet
from .review_views import AvisViewSet
from .upload_views import BoutiqueImageUploadView, ProductImageUploadView


__all__ = [
    "AvisViewSet",
    "BoutiqueImageUploadView",
    "BoutiqueViewSet",
    "ProductImageUploadView",
    "ProductViewSet",
]
