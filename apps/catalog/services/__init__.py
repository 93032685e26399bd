"""Services for catalog business logic."""

from .exceptions import (
    CatalogServiceError,
    BrandNotFoundError,
    RegionNotFoundError,
    BlendNotFoundError,
    DuplicateBlendError,
    CatalogDatabaseError,
)
from .entity_resolution import (
    ById,
    ByName,
    EntityRef,
    create_blend,
)
from .catalog_search import (
    list_brands,
    list_regions,
    list_blends,
    get_region_by_id,
    get_blend_by_id,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'BrandNotFoundError',
    'RegionNotFoundError',
    'BlendNotFoundError',
    'DuplicateBlendError',
    'CatalogDatabaseError',
    # Entity resolution
    'ById',
    'ByName',
    'EntityRef',
    'create_blend',
    # Search
    'list_brands',
    'list_regions',
    'list_blends',
    'get_region_by_id',
    'get_blend_by_id',
]
