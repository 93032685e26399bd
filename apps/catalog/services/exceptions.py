"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    code = 'catalog_error'


class BrandNotFoundError(CatalogServiceError):
    """Raised when a brand referenced by id does not exist."""
    code = 'brand_not_found'


class RegionNotFoundError(CatalogServiceError):
    """Raised when a region referenced by id does not exist."""
    code = 'region_not_found'


class BlendNotFoundError(CatalogServiceError):
    """Raised when blend does not exist."""
    code = 'blend_not_found'


class DuplicateBlendError(CatalogServiceError):
    """Raised when a blend with the same name, brand and region exists."""
    code = 'duplicate_blend'


class CatalogDatabaseError(CatalogServiceError):
    """Raised when the database fails during a catalog write."""
    code = 'database_error'
