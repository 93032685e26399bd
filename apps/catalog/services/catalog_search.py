"""Catalog listing and lookup service."""

from typing import Optional
from uuid import UUID

from apps.common.pagination import Page, paginate

from ..models import Blend, Brand, Region
from .exceptions import BlendNotFoundError, RegionNotFoundError


def _search_by_name(queryset, search: Optional[str]):
    term = (search or '').strip()
    if term:
        queryset = queryset.filter(name__icontains=term)
    return queryset


def list_brands(*, page: int = 1, limit: int = 20, search: Optional[str] = None) -> Page[Brand]:
    """
    List brands alphabetically.

    Args:
        page: 1-based page number
        limit: Page size
        search: Case-insensitive substring to match against the name

    Returns:
        Page of Brand
    """
    queryset = _search_by_name(Brand.objects.all(), search).order_by('name', 'id')
    return paginate(queryset, page=page, limit=limit)


def list_regions(*, page: int = 1, limit: int = 20, search: Optional[str] = None) -> Page[Region]:
    """List regions alphabetically, optionally filtered by name."""
    queryset = _search_by_name(Region.objects.all(), search).order_by('name', 'id')
    return paginate(queryset, page=page, limit=limit)


def list_blends(
    *,
    page: int = 1,
    limit: int = 20,
    brand_id: Optional[UUID] = None,
    region_id: Optional[UUID] = None,
    search: Optional[str] = None
) -> Page[Blend]:
    """
    List blends alphabetically with their brand and region.

    Args:
        page: 1-based page number
        limit: Page size
        brand_id: Only blends from this brand
        region_id: Only blends from this region
        search: Case-insensitive substring to match against the blend name

    Returns:
        Page of Blend
    """
    queryset = Blend.objects.select_related('brand', 'region')

    if brand_id is not None:
        queryset = queryset.filter(brand_id=brand_id)

    if region_id is not None:
        queryset = queryset.filter(region_id=region_id)

    queryset = _search_by_name(queryset, search).order_by('name', 'id')
    return paginate(queryset, page=page, limit=limit)


def get_region_by_id(*, region_id: UUID) -> Region:
    """
    Get region by ID.

    Raises:
        RegionNotFoundError: If region does not exist
    """
    try:
        return Region.objects.get(pk=region_id)
    except Region.DoesNotExist:
        raise RegionNotFoundError("Region not found")


def get_blend_by_id(*, blend_id: UUID) -> Blend:
    """
    Get blend by ID with its brand and region.

    Raises:
        BlendNotFoundError: If blend does not exist
    """
    try:
        return Blend.objects.select_related('brand', 'region').get(pk=blend_id)
    except Blend.DoesNotExist:
        raise BlendNotFoundError("Blend not found")
