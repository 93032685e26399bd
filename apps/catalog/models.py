from django.db import models
from django.db.models.functions import Lower
import uuid


class Brand(models.Model):
    """Matcha producer or seller. Names are unique ignoring case."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'brands'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(Lower('name'), name='brands_name_ci_unique'),
        ]

    def __str__(self):
        return self.name


class Region(models.Model):
    """Growing region. Independent of brands."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'regions'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(Lower('name'), name='regions_name_ci_unique'),
        ]

    def __str__(self):
        return self.name


class Blend(models.Model):
    """A specific matcha product: name + brand + region."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    brand = models.ForeignKey(Brand, on_delete=models.PROTECT, related_name='blends')
    region = models.ForeignKey(Region, on_delete=models.PROTECT, related_name='blends')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'blends'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                Lower('name'), 'brand', 'region',
                name='blends_name_brand_region_ci_unique'
            ),
        ]
        indexes = [
            models.Index(fields=['brand', 'region'], name='blends_brand_region_idx'),
        ]

    def __str__(self):
        return f"{self.brand.name} - {self.name}"
