import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import Blend, Brand, Region


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def brand(db):
    return Brand.objects.create(name='Ippodo Tea')


@pytest.fixture
def other_brand(db):
    return Brand.objects.create(name='Marukyu Koyamaen')


@pytest.fixture
def region(db):
    return Region.objects.create(name='Uji, Kyoto')


@pytest.fixture
def other_region(db):
    return Region.objects.create(name='Nishio, Aichi')


@pytest.fixture
def blend(db, brand, region):
    """Create and return a test blend."""
    return Blend.objects.create(name='Sayaka', brand=brand, region=region)


@pytest.fixture
def blend_other_brand(db, other_brand, other_region):
    return Blend.objects.create(name='Aoarashi', brand=other_brand, region=other_region)
