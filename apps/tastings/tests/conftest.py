import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.catalog.models import Blend, Brand, Region
from apps.tastings.models import TastingNote


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
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='otherpass123',
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
    return Blend.objects.create(name='Sayaka', brand=brand, region=region)


@pytest.fixture
def blend_other_brand(db, other_brand, other_region):
    return Blend.objects.create(name='Aoarashi', brand=other_brand, region=other_region)


@pytest.fixture
def note(db, user, blend):
    """Create and return a tasting note owned by `user`."""
    return TastingNote.objects.create(
        user=user,
        blend=blend,
        overall_rating=4,
        umami=5,
        bitter=2,
        notes_koicha='Thick, creamy, sweet finish.',
        price_pln=120,
        purchase_source='ippodo-tea.co.jp',
    )


@pytest.fixture
def second_note(db, user, blend_other_brand):
    return TastingNote.objects.create(
        user=user,
        blend=blend_other_brand,
        overall_rating=2,
        notes_milk='Gets lost in milk.',
    )


@pytest.fixture
def foreign_note(db, other_user, blend):
    """A note owned by someone else."""
    return TastingNote.objects.create(
        user=other_user,
        blend=blend,
        overall_rating=5,
    )
