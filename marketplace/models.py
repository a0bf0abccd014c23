from marketplace.catalog.domain.models import Avis, Boutique, Product
from marketplace.ordering.domain.models import Order


__all__ = [
    "Avis",
    "Boutique",
    "Order",
    "Product",
]
