"""
ReviewService - customer testimonials (avis).

Anyone may post an avis; they are never edited or removed through the API.
"""

from typing import Any, Dict

from marketplace.catalog.domain.models import Avis
from marketplace.services.base import BaseService, ServiceResult, service_ok
from utils.pagination import paginate


class ReviewService(BaseService):
    @BaseService.log_performance
    def create_avis(self, name: str, text: str, rating: int) -> ServiceResult[Avis]:
        avis = Avis.objects.create(name=name, text=text, rating=rating)
        self.logger.info(f"New avis from {name}: {rating}/5")
        return service_ok(avis)

    def list_avis(self, page: int = 1, page_size: int = 20) -> ServiceResult[Dict[str, Any]]:
        """Newest first."""
        return service_ok(paginate(Avis.objects.order_by("-created_at"), page, page_size))
