import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.catalog.models import Blend, Brand, Region


# =============================================================================
# Brands & Regions
# =============================================================================

@pytest.mark.django_db
class TestBrandList:
    """Tests for GET /api/brands"""

    def test_list_unauthenticated(self, api_client, brand, other_brand):
        """Brands are public."""
        response = api_client.get(reverse('catalog:brand-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [b['name'] for b in response.data['data']] == ['Ippodo Tea', 'Marukyu Koyamaen']
        assert response.data['pagination'] == {'total': 2, 'page': 1, 'limit': 20}

    def test_search(self, api_client, brand, other_brand):
        response = api_client.get(reverse('catalog:brand-list'), {'search': 'maru'})

        assert response.status_code == status.HTTP_200_OK
        assert [b['name'] for b in response.data['data']] == ['Marukyu Koyamaen']
        assert response.data['pagination']['total'] == 1

    def test_search_too_long(self, api_client, db):
        response = api_client.get(reverse('catalog:brand-list'), {'search': 'x' * 256})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['details'][0]['field'] == 'search'

    def test_pagination_params(self, api_client, db):
        for i in range(25):
            Brand.objects.create(name=f'Brand {i:02d}')

        response = api_client.get(reverse('catalog:brand-list'), {'page': 2, 'limit': 10})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 10
        assert response.data['data'][0]['name'] == 'Brand 10'
        assert response.data['pagination'] == {'total': 25, 'page': 2, 'limit': 10}

    @pytest.mark.parametrize('params', [
        {'page': 0},
        {'page': 'abc'},
        {'limit': 0},
        {'limit': 101},
        {'limit': 2.5},
    ])
    def test_invalid_pagination(self, api_client, db, params):
        response = api_client.get(reverse('catalog:brand-list'), params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Validation failed'

    def test_page_past_end(self, api_client, brand):
        response = api_client.get(reverse('catalog:brand-list'), {'page': 5})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'] == []
        assert response.data['pagination']['total'] == 1


@pytest.mark.django_db
class TestRegionEndpoints:
    """Tests for /api/regions"""

    def test_list(self, api_client, region, other_region):
        response = api_client.get(reverse('catalog:region-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [r['name'] for r in response.data['data']] == ['Nishio, Aichi', 'Uji, Kyoto']

    def test_retrieve(self, api_client, region):
        url = reverse('catalog:region-detail', kwargs={'pk': region.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(region.id)
        assert response.data['name'] == region.name

    def test_retrieve_missing(self, api_client, db):
        url = reverse('catalog:region-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Region not found'}

    def test_retrieve_invalid_uuid(self, api_client, db):
        url = reverse('catalog:region-detail', kwargs={'pk': 'not-a-uuid'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['details'] == [{'field': 'id', 'message': 'Invalid UUID format'}]


# =============================================================================
# Blends
# =============================================================================

@pytest.mark.django_db
class TestBlendList:
    """Tests for GET /api/blends"""

    def test_list_includes_brand_and_region(self, api_client, blend):
        response = api_client.get(reverse('catalog:blend-list'))

        assert response.status_code == status.HTTP_200_OK
        item = response.data['data'][0]
        assert item['id'] == str(blend.id)
        assert item['brand_id'] == str(blend.brand_id)
        assert item['region_id'] == str(blend.region_id)
        assert item['brand'] == {'id': str(blend.brand_id), 'name': 'Ippodo Tea'}
        assert item['region'] == {'id': str(blend.region_id), 'name': 'Uji, Kyoto'}
        assert 'created_at' in item

    def test_filter_by_brand(self, api_client, blend, blend_other_brand, brand):
        response = api_client.get(reverse('catalog:blend-list'), {'brand_id': str(brand.id)})

        assert [b['id'] for b in response.data['data']] == [str(blend.id)]
        assert response.data['pagination']['total'] == 1

    def test_filter_by_region(self, api_client, blend, blend_other_brand, other_region):
        response = api_client.get(reverse('catalog:blend-list'), {'region_id': str(other_region.id)})

        assert [b['id'] for b in response.data['data']] == [str(blend_other_brand.id)]

    def test_invalid_brand_id(self, api_client, db):
        response = api_client.get(reverse('catalog:blend-list'), {'brand_id': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['details'][0]['field'] == 'brand_id'

    def test_unhyphenated_uuid_rejected(self, api_client, db):
        response = api_client.get(reverse('catalog:blend-list'), {'brand_id': uuid.uuid4().hex})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestBlendRetrieve:
    """Tests for GET /api/blends/{id}"""

    def test_retrieve(self, api_client, blend):
        url = reverse('catalog:blend-detail', kwargs={'pk': blend.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Sayaka'

    def test_retrieve_missing(self, api_client, db):
        url = reverse('catalog:blend-detail', kwargs={'pk': uuid.uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestBlendCreate:
    """Tests for POST /api/blends"""

    url_name = 'catalog:blend-list'

    def test_requires_authentication(self, api_client, db):
        data = {'name': 'Sayaka', 'brand': {'name': 'Ippodo'}, 'region': {'name': 'Uji'}}
        response = api_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data
        assert Blend.objects.count() == 0

    def test_create_by_name(self, authenticated_client):
        data = {
            'name': '  Premium Matcha ',
            'brand': {'name': 'Ippodo Tea'},
            'region': {'name': 'Uji, Kyoto'},
        }
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Premium Matcha'
        assert response.data['brand']['name'] == 'Ippodo Tea'
        assert response.data['region']['name'] == 'Uji, Kyoto'
        assert Brand.objects.count() == 1
        assert Region.objects.count() == 1

    def test_create_by_id(self, authenticated_client, brand, region):
        data = {
            'name': 'Ummon',
            'brand': {'id': str(brand.id)},
            'region': {'id': str(region.id), 'name': None},
        }
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['brand_id'] == str(brand.id)
        assert response.data['region_id'] == str(region.id)

    def test_repeat_create_conflicts(self, authenticated_client):
        """Creating the same blend twice yields 201 then 409."""
        data = {'name': 'Sayaka', 'brand': {'name': 'Ippodo'}, 'region': {'name': 'Uji'}}

        first = authenticated_client.post(reverse(self.url_name), data, format='json')
        second = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT
        assert second.data == {'error': 'Blend already exists'}
        assert Blend.objects.count() == 1

    def test_names_reused_case_insensitively(self, authenticated_client, brand, region):
        data = {'name': 'Ummon', 'brand': {'name': 'ippodo tea'}, 'region': {'name': 'UJI, KYOTO'}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['brand_id'] == str(brand.id)
        assert response.data['region_id'] == str(region.id)
        assert Brand.objects.count() == 1

    def test_unknown_brand_id(self, authenticated_client, region):
        data = {'name': 'Ummon', 'brand': {'id': str(uuid.uuid4())}, 'region': {'id': str(region.id)}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Brand not found'}

    def test_unknown_region_id(self, authenticated_client, brand):
        data = {'name': 'Ummon', 'brand': {'id': str(brand.id)}, 'region': {'id': str(uuid.uuid4())}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Region not found'}

    def test_brand_with_id_and_name_rejected(self, authenticated_client, brand):
        data = {
            'name': 'Ummon',
            'brand': {'id': str(brand.id), 'name': 'Ippodo Tea'},
            'region': {'name': 'Uji'},
        }
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert [d['field'] for d in response.data['details']] == ['brand']

    def test_reference_with_neither_rejected(self, authenticated_client):
        data = {'name': 'Ummon', 'brand': {}, 'region': {'id': None, 'name': None}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {d['field'] for d in response.data['details']}
        assert fields == {'brand', 'region'}

    def test_every_violation_reported(self, authenticated_client):
        data = {'name': '', 'brand': {'id': 'nope'}, 'region': {'name': 'x' * 101}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {d['field'] for d in response.data['details']}
        assert fields == {'name', 'brand.id', 'region.name'}

    def test_name_too_long(self, authenticated_client):
        data = {'name': 'x' * 201, 'brand': {'name': 'Ippodo'}, 'region': {'name': 'Uji'}}
        response = authenticated_client.post(reverse(self.url_name), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Brand.objects.count() == 0

    def test_put_not_allowed(self, authenticated_client, blend):
        url = reverse('catalog:blend-detail', kwargs={'pk': blend.id})
        response = authenticated_client.put(url, {'name': 'x'}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


# =============================================================================
# Server errors
# =============================================================================

@pytest.mark.django_db
class TestServerErrors:
    """Database failures become a bare 500."""

    def test_catalog_database_error(self, authenticated_client, monkeypatch):
        from apps.catalog.services import CatalogDatabaseError

        def failing_create_blend(**kwargs):
            raise CatalogDatabaseError('relation "blends" does not exist')

        monkeypatch.setattr('apps.catalog.views.create_blend', failing_create_blend)

        data = {'name': 'Sayaka', 'brand': {'name': 'Ippodo'}, 'region': {'name': 'Uji'}}
        response = authenticated_client.post(reverse('catalog:blend-list'), data, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Internal server error'}

    def test_unexpected_exception_is_hidden(self, api_client, monkeypatch):
        def broken_list_brands(**kwargs):
            raise RuntimeError('secret connection string')

        monkeypatch.setattr('apps.catalog.views.list_brands', broken_list_brands)

        response = api_client.get(reverse('catalog:brand-list'))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Internal server error'}
