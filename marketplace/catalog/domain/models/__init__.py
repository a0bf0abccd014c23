from .avis import Avis
from .boutique import Boutique
from .product import Product


__all__ = [
    "Avis",
    "Boutique",
    "Product",
]
