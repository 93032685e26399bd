"""
Blend creation with brand/region resolution.

Brands and regions can be referenced by id (must exist) or by name
(case-insensitive reuse, otherwise created). The steps run without an
enclosing transaction: a brand created by name stays even if a later
step fails. Concurrent creators are arbitrated only by the unique
constraints on the tables.
"""

import logging
from dataclasses import dataclass
from typing import Type, Union
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import Value
from django.db.models.functions import Lower

from ..models import Blend, Brand, Region
from .exceptions import (
    BrandNotFoundError,
    CatalogDatabaseError,
    CatalogServiceError,
    DuplicateBlendError,
    RegionNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ById:
    id: UUID


@dataclass(frozen=True)
class ByName:
    name: str


EntityRef = Union[ById, ByName]


def _named(queryset, name: str):
    # Same LOWER() expression as the unique constraints on name
    return (
        queryset
        .annotate(name_lower=Lower('name'))
        .filter(name_lower=Lower(Value(name)))
    )


def _resolve(model, ref: EntityRef, not_found: Type[CatalogServiceError], message: str):
    if isinstance(ref, ById):
        entity = model.objects.filter(pk=ref.id).first()
        if entity is None:
            raise not_found(message)
        return entity

    entity = _named(model.objects.all(), ref.name).first()
    if entity is not None:
        return entity

    # Savepoint keeps a failed insert from breaking an enclosing transaction
    with transaction.atomic():
        entity = model.objects.create(name=ref.name)
    logger.info("Created %s %s (%s)", model.__name__.lower(), entity.id, entity.name)
    return entity


def create_blend(*, name: str, brand: EntityRef, region: EntityRef) -> Blend:
    """
    Create a blend, resolving or creating its brand and region.

    Args:
        name: Blend name (already trimmed)
        brand: Brand reference, by id or by name
        region: Region reference, by id or by name

    Returns:
        Created Blend with brand and region loaded

    Raises:
        BrandNotFoundError: If the brand id does not exist
        RegionNotFoundError: If the region id does not exist
        DuplicateBlendError: If the blend already exists for this brand and region
        CatalogDatabaseError: If any database operation fails
    """
    try:
        brand_obj = _resolve(Brand, brand, BrandNotFoundError, "Brand not found")
        region_obj = _resolve(Region, region, RegionNotFoundError, "Region not found")

        duplicate = _named(
            Blend.objects.filter(brand=brand_obj, region=region_obj),
            name,
        ).exists()
        if duplicate:
            raise DuplicateBlendError("Blend already exists")

        with transaction.atomic():
            blend = Blend.objects.create(name=name, brand=brand_obj, region=region_obj)

        created = (
            Blend.objects
            .select_related('brand', 'region')
            .filter(pk=blend.pk)
            .first()
        )
    except DatabaseError as e:
        logger.exception("Database error while creating blend %r", name)
        raise CatalogDatabaseError(str(e)) from e

    if created is None:
        raise CatalogDatabaseError("Failed to fetch created blend")

    logger.info("Created blend %s (%s)", created.id, created.name)
    return created
