import math
from typing import Any, Dict

from django.conf import settings
from django.core.paginator import EmptyPage, Paginator


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def parse_page_params(query_params, default_limit: int = None) -> tuple:
    """Read ``page``/``limit`` from query params; bad values fall back to defaults."""
    config = settings.MARKETPLACE
    default_limit = default_limit or config["DEFAULT_PAGE_SIZE"]
    page = _positive_int(query_params.get("page"), 1)
    limit = min(_positive_int(query_params.get("limit"), default_limit), config["MAX_PAGE_SIZE"])
    return page, limit


def paginate(queryset, page: int, limit: int) -> Dict[str, Any]:
    """
    Slice a queryset into one page.

    Returns:
        Dict with results, count (items on this page), total,
        total_pages and current_page. Pages past the end are empty.
    """
    paginator = Paginator(queryset, limit)
    try:
        results = list(paginator.page(page).object_list)
    except EmptyPage:
        results = []

    total = paginator.count
    return {
        "results": results,
        "count": len(results),
        "total": total,
        "total_pages": math.ceil(total / limit),
        "current_page": page,
    }
