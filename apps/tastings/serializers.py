from collections.abc import Mapping

from rest_framework import serializers

from apps.catalog.serializers import NestedBrandSerializer, NestedRegionSerializer
from apps.catalog.models import Blend
from apps.common.fields import CommaSeparatedUUIDField, StrictCharField, StrictUUIDField, parse_uuid
from apps.common.pagination import PaginationQuerySerializer
from .models import TastingNote
from .services import SORT_FIELDS, SORT_ORDERS


class NoteBlendSerializer(serializers.ModelSerializer):
    """Blend as embedded in a tasting note."""

    brand = NestedBrandSerializer(read_only=True)
    region = NestedRegionSerializer(read_only=True)

    class Meta:
        model = Blend
        fields = ['id', 'name', 'brand', 'region']
        read_only_fields = fields


class TastingNoteSerializer(serializers.ModelSerializer):
    """Full tasting note representation."""

    user_id = serializers.UUIDField(read_only=True)
    blend = NoteBlendSerializer(read_only=True)

    class Meta:
        model = TastingNote
        fields = [
            'id',
            'user_id',
            'blend',
            'overall_rating',
            'umami',
            'bitter',
            'sweet',
            'foam',
            'notes_koicha',
            'notes_milk',
            'price_pln',
            'purchase_source',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


def _rating(**kwargs):
    return serializers.IntegerField(min_value=1, max_value=5, **kwargs)


class TastingNoteCreateSerializer(serializers.Serializer):
    """Validate POST /api/tasting-notes bodies."""

    blend_id = StrictUUIDField()
    overall_rating = _rating()
    umami = _rating(required=False, allow_null=True)
    bitter = _rating(required=False, allow_null=True)
    sweet = _rating(required=False, allow_null=True)
    foam = _rating(required=False, allow_null=True)
    notes_koicha = StrictCharField(
        max_length=5000, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    notes_milk = StrictCharField(
        max_length=5000, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    price_pln = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    purchase_source = StrictCharField(
        max_length=500, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class TastingNoteUpdateSerializer(serializers.Serializer):
    """
    Validate PATCH /api/tasting-notes/{id} bodies.

    Every field is optional, but at least one must be present. Unknown
    keys (``blend_id`` included) are rejected rather than ignored.
    """

    overall_rating = _rating(required=False)
    umami = _rating(required=False, allow_null=True)
    bitter = _rating(required=False, allow_null=True)
    sweet = _rating(required=False, allow_null=True)
    foam = _rating(required=False, allow_null=True)
    notes_koicha = StrictCharField(
        max_length=5000, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    notes_milk = StrictCharField(
        max_length=5000, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    price_pln = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    purchase_source = StrictCharField(
        max_length=500, required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )

    def to_internal_value(self, data):
        errors = {}
        attrs = None
        try:
            attrs = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            errors.update(exc.detail)

        if isinstance(data, Mapping):
            for key in sorted(set(data) - set(self.fields)):
                errors[key] = ['This field cannot be updated.']

        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('At least one field must be provided for update')

        return attrs


class TastingNotesQuerySerializer(PaginationQuerySerializer):
    """
    Validate query parameters for the tasting note list.

    Query Parameters:
        page, limit: see PaginationQuerySerializer
        brand_ids (str): Comma-separated brand UUIDs
        region_ids (str): Comma-separated region UUIDs
        min_rating (int): Minimum overall rating, 1-5
        sort_by (str): created_at, updated_at or overall_rating
        sort_order (str): asc or desc
    """

    brand_ids = CommaSeparatedUUIDField(required=False)
    region_ids = CommaSeparatedUUIDField(required=False)
    min_rating = _rating(required=False)
    sort_by = serializers.ChoiceField(choices=SORT_FIELDS, default='created_at')
    sort_order = serializers.ChoiceField(choices=SORT_ORDERS, default='desc')


class TastingNoteSelectQuerySerializer(serializers.Serializer):
    """Validate ?ids=a,b for the comparison endpoint."""

    ids = serializers.CharField(
        error_messages={
            'required': 'ids parameter is required',
            'blank': 'ids parameter is required',
        }
    )

    def validate_ids(self, value):
        parts = [part.strip() for part in value.split(',')]
        if len(parts) != 2:
            raise serializers.ValidationError('Exactly 2 tasting note IDs are required')

        note_ids = []
        for part in parts:
            parsed = parse_uuid(part)
            if parsed is None:
                raise serializers.ValidationError('Invalid UUID format for one or more IDs')
            note_ids.append(parsed)
        return note_ids
