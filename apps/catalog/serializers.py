from rest_framework import serializers

from apps.common.fields import StrictCharField, StrictUUIDField
from apps.common.pagination import PaginationQuerySerializer
from .models import Blend, Brand, Region
from .services import ById, ByName


class BrandSerializer(serializers.ModelSerializer):

    class Meta:
        model = Brand
        fields = ['id', 'name', 'created_at']
        read_only_fields = fields


class RegionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Region
        fields = ['id', 'name', 'created_at']
        read_only_fields = fields


class NestedBrandSerializer(serializers.ModelSerializer):
    """Brand as embedded in blends and tasting notes."""

    class Meta:
        model = Brand
        fields = ['id', 'name']
        read_only_fields = fields


class NestedRegionSerializer(serializers.ModelSerializer):
    """Region as embedded in blends and tasting notes."""

    class Meta:
        model = Region
        fields = ['id', 'name']
        read_only_fields = fields


class BlendSerializer(serializers.ModelSerializer):
    """Blend with its brand and region."""

    brand_id = serializers.UUIDField(read_only=True)
    region_id = serializers.UUIDField(read_only=True)
    brand = NestedBrandSerializer(read_only=True)
    region = NestedRegionSerializer(read_only=True)

    class Meta:
        model = Blend
        fields = [
            'id',
            'name',
            'brand_id',
            'region_id',
            'created_at',
            'brand',
            'region',
        ]
        read_only_fields = fields


class EntityReferenceSerializer(serializers.Serializer):
    """
    Reference to a brand or region: an existing ``id`` or a ``name``.

    Exactly one must be given. Validates to ``ById`` or ``ByName``.
    """

    id = StrictUUIDField(required=False, allow_null=True)
    name = StrictCharField(
        max_length=100,
        required=False,
        allow_null=True,
        allow_blank=True,
    )

    def validate(self, attrs):
        ref_id = attrs.get('id')
        name = attrs.get('name') or None

        if (ref_id is None) == (name is None):
            raise serializers.ValidationError(
                'must provide either id OR name, not both and not neither'
            )

        if ref_id is not None:
            return ById(id=ref_id)
        return ByName(name=name)


class BlendCreateSerializer(serializers.Serializer):
    """Validate POST /api/blends bodies."""

    name = StrictCharField(max_length=200)
    brand = EntityReferenceSerializer()
    region = EntityReferenceSerializer()


class BrandsQuerySerializer(PaginationQuerySerializer):
    """
    Validate query parameters for brand and region listings.

    Query Parameters:
        page, limit: see PaginationQuerySerializer
        search (str): Substring of the name, case-insensitive
    """

    search = serializers.CharField(max_length=255, required=False, allow_blank=True)


RegionsQuerySerializer = BrandsQuerySerializer


class BlendsQuerySerializer(BrandsQuerySerializer):
    """
    Validate query parameters for the blend listing.

    Query Parameters:
        brand_id (uuid): Only blends from this brand
        region_id (uuid): Only blends from this region
    """

    brand_id = StrictUUIDField(required=False, allow_null=True)
    region_id = StrictUUIDField(required=False, allow_null=True)
