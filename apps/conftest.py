import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


def client_for(user):
    """Return an API client authenticated as user using JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff_user(db):
    """Create and return a cashier."""
    return User.objects.create_user(
        username='cashier',
        password='TestPass123!',
        full_name='Test Cashier',
        role=UserRole.STAFF,
    )


@pytest.fixture
def admin_user(db):
    """Create and return a manager."""
    return User.objects.create_user(
        username='manager',
        password='TestPass123!',
        full_name='Test Manager',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def super_admin_user(db):
    """Create and return the owner."""
    return User.objects.create_user(
        username='owner',
        password='TestPass123!',
        full_name='Test Owner',
        role=UserRole.SUPER_ADMIN,
    )


@pytest.fixture
def staff_client(staff_user):
    return client_for(staff_user)


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def super_admin_client(super_admin_user):
    return client_for(super_admin_user)
