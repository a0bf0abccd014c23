"""
BoutiqueService - partner shop management.
"""

from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from marketplace.catalog.domain.models import Boutique, Product
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.pagination import paginate

EDITABLE_FIELDS = ("name", "phone", "address", "description", "banner", "is_verified", "commission_rate")


class BoutiqueService(BaseService):
    @BaseService.log_performance
    def list_boutiques(
        self, filters: Optional[Dict[str, Any]] = None, page: int = 1, page_size: int = 10
    ) -> ServiceResult[Dict[str, Any]]:
        """
        List boutiques, newest first.

        Filters: ``search`` (substring of name or description) and
        ``is_verified`` (bool).
        """
        filters = filters or {}
        queryset = Boutique.objects.all()

        search = filters.get("search")
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(description__icontains=search))

        if filters.get("is_verified") is not None:
            queryset = queryset.filter(is_verified=filters["is_verified"])

        return service_ok(paginate(queryset.order_by("-created_at"), page, page_size))

    def get_boutique(self, boutique_id) -> ServiceResult[Boutique]:
        boutique = Boutique.objects.filter(pk=boutique_id).first()
        if boutique is None:
            return service_err(ErrorCodes.BOUTIQUE_NOT_FOUND, "Boutique not found.")
        return service_ok(boutique)

    @BaseService.log_performance
    def create_boutique(self, data: Dict[str, Any]) -> ServiceResult[Boutique]:
        fields = {field: data[field] for field in EDITABLE_FIELDS if field in data}
        boutique = Boutique.objects.create(**fields)
        self.logger.info(f"Created boutique: {boutique.name} (id={boutique.id})")
        return service_ok(boutique)

    @BaseService.log_performance
    @transaction.atomic
    def update_boutique(self, boutique_id, data: Dict[str, Any]) -> ServiceResult[Boutique]:
        boutique = Boutique.objects.select_for_update().filter(pk=boutique_id).first()
        if boutique is None:
            return service_err(ErrorCodes.BOUTIQUE_NOT_FOUND, "Boutique not found.")

        updated_fields = [field for field in EDITABLE_FIELDS if field in data]
        for field in updated_fields:
            setattr(boutique, field, data[field])
        if updated_fields:
            boutique.save(update_fields=updated_fields + ["updated_at"])

        self.logger.info(f"Updated boutique: {boutique.name} (id={boutique_id}), fields={updated_fields}")
        return service_ok(boutique)

    @BaseService.log_performance
    @transaction.atomic
    def delete_boutique(self, boutique_id) -> ServiceResult[int]:
        """
        Delete a boutique and deactivate its products.

        Products are kept (their boutique becomes NULL) so existing orders
        still point at them.

        Returns:
            ServiceResult with the number of products deactivated
        """
        boutique = Boutique.objects.filter(pk=boutique_id).first()
        if boutique is None:
            return service_err(ErrorCodes.BOUTIQUE_NOT_FOUND, "Boutique not found.")

        deactivated = Product.objects.filter(boutique=boutique).update(is_active=False, updated_at=timezone.now())
        boutique_name = boutique.name
        boutique.delete()

        self.logger.warning(
            f"Deleted boutique: {boutique_name} (id={boutique_id}), {deactivated} product(s) deactivated"
        )
        return service_ok(deactivated)
