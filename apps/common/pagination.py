"""
Offset pagination for list endpoints.

Services slice querysets into a ``Page``; views validate ``page``/``limit``
with ``PaginationQuerySerializer`` and render with ``paginated_response``.
A page past the end is an empty page, not an error.
"""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from rest_framework import serializers
from rest_framework.response import Response

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

T = TypeVar('T')


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE


def paginate(queryset, *, page: int, limit: int) -> Page:
    """
    Slice an ordered queryset into a single page.

    Args:
        queryset: Ordered QuerySet (ordering must be deterministic)
        page: 1-based page number
        limit: Page size

    Returns:
        Page with the matching items and the total row count
    """
    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit]) if offset < total else []
    return Page(items=items, total=total, page=page, limit=limit)


class PaginationQuerySerializer(serializers.Serializer):
    """
    Validate pagination query parameters.

    Query Parameters:
        page (int): 1-based page number (default 1)
        limit (int): Items per page, 1-100 (default 20)
    """

    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(
        min_value=1,
        max_value=MAX_PAGE_SIZE,
        default=DEFAULT_PAGE_SIZE
    )


class PaginationSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()


def paginated_response(page: Page, serializer_class, context=None) -> Response:
    """Render a Page as ``{"data": [...], "pagination": {...}}``."""
    return Response({
        'data': serializer_class(page.items, many=True, context=context or {}).data,
        'pagination': {
            'total': page.total,
            'page': page.page,
            'limit': page.limit,
        },
    })
