import uuid

import pytest

from apps.catalog.serializers import BlendCreateSerializer, BlendsQuerySerializer
from apps.catalog.services import ById, ByName
from config.exceptions import flatten_errors


class TestBlendCreateSerializer:

    def test_reference_by_id_and_by_name(self):
        brand_id = uuid.uuid4()
        serializer = BlendCreateSerializer(data={
            'name': ' Sayaka ',
            'brand': {'id': str(brand_id)},
            'region': {'name': '  Uji '},
        })

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['name'] == 'Sayaka'
        assert serializer.validated_data['brand'] == ById(brand_id)
        assert serializer.validated_data['region'] == ByName('Uji')

    def test_blank_name_counts_as_absent(self):
        serializer = BlendCreateSerializer(data={
            'name': 'Sayaka',
            'brand': {'id': str(uuid.uuid4()), 'name': '   '},
            'region': {'name': 'Uji'},
        })

        assert serializer.is_valid(), serializer.errors
        assert isinstance(serializer.validated_data['brand'], ById)

    def test_numeric_names_rejected(self):
        serializer = BlendCreateSerializer(data={
            'name': 42,
            'brand': {'name': 7},
            'region': {'name': 'Uji'},
        })

        assert not serializer.is_valid()
        assert flatten_errors(serializer.errors) == [
            {'field': 'name', 'message': 'Not a valid string.'},
            {'field': 'brand.name', 'message': 'Not a valid string.'},
        ]

    @pytest.mark.parametrize('ref', [
        {},
        {'id': None, 'name': None},
        {'id': '6f1c0b4e-8a43-4d55-9a3e-2a4b2f1c9d10', 'name': 'Ippodo'},
    ])
    def test_exactly_one_of_id_or_name(self, ref):
        serializer = BlendCreateSerializer(data={'name': 'Sayaka', 'brand': ref, 'region': {'name': 'Uji'}})

        assert not serializer.is_valid()
        assert flatten_errors(serializer.errors) == [{
            'field': 'brand',
            'message': 'must provide either id OR name, not both and not neither',
        }]

    @pytest.mark.parametrize('value', [
        uuid.uuid4().hex,
        '{%s}' % uuid.uuid4(),
        'urn:uuid:%s' % uuid.uuid4(),
        '6f1c0b4e-8a43-4d55-9a3e-2a4b2f1c9d1',
    ])
    def test_non_canonical_uuid_rejected(self, value):
        serializer = BlendCreateSerializer(data={'name': 'Sayaka', 'brand': {'id': value}, 'region': {'name': 'Uji'}})

        assert not serializer.is_valid()
        assert flatten_errors(serializer.errors) == [{'field': 'brand.id', 'message': 'Invalid UUID format'}]


class TestBlendsQuerySerializer:

    def test_defaults(self):
        serializer = BlendsQuerySerializer(data={})

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data == {'page': 1, 'limit': 20}

    def test_uppercase_uuid_accepted(self):
        brand_id = uuid.uuid4()
        serializer = BlendsQuerySerializer(data={'brand_id': str(brand_id).upper()})

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['brand_id'] == brand_id
