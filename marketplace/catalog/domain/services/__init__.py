from .boutique_service import BoutiqueService
from .catalog_service import CatalogService
from .image_service import ImageService
from .review_service import ReviewService


__all__ = [
    "BoutiqueService",
    "CatalogService",
    "ImageService",
    "ReviewService",
]
