from .boutique_serializers import BoutiqueSerializer, BoutiqueSummarySerializer, BoutiqueWriteSerializer
from .product_serializers import ProductSerializer, ProductWriteSerializer
from .review_serializers import AvisSerializer
from .upload_serializers import ImageUploadResultSerializer, ImageUploadSerializer


__all__ = [
    "AvisSerializer",
    "BoutiqueSerializer",
    "BoutiqueSummarySerializer",
    "BoutiqueWriteSerializer",
    "ImageUploadResultSerializer",
    "ImageUploadSerializer",
    "ProductSerializer",
    "ProductWriteSerializer",
]
