import pytest
from apps.accounts.models import User


@pytest.fixture
def user_inactive(db):
    """Create and return a deactivated user."""
    return User.objects.create_user(
        username='former',
        password='TestPass123!',
        full_name='Former Employee',
        is_active=False,
    )
