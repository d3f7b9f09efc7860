import pytest
from django.core.management import call_command
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.accounts.services import ensure_default_admin
from apps.products.models import Product
from apps.stats.models import DailyStats
from apps.transactions.models import Transaction


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, staff_user):
        """Valid credentials return the user and a token pair."""
        url = reverse('users:login')
        response = api_client.post(url, {
            'username': 'cashier',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['username'] == 'cashier'
        assert response.data['user']['role'] == UserRole.STAFF
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert 'password' not in response.data['user']

    def test_login_updates_last_login(self, api_client, staff_user):
        url = reverse('users:login')
        api_client.post(url, {'username': 'cashier', 'password': 'TestPass123!'})

        staff_user.refresh_from_db()
        assert staff_user.last_login is not None

    def test_login_wrong_password(self, api_client, staff_user):
        url = reverse('users:login')
        response = api_client.post(url, {
            'username': 'cashier',
            'password': 'WrongPass!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_user(self, api_client, db):
        url = reverse('users:login')
        response = api_client.post(url, {
            'username': 'nobody',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        """Deactivated accounts cannot log in."""
        url = reverse('users:login')
        response = api_client.post(url, {
            'username': 'former',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client, db):
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'cashier'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_logout_with_valid_refresh(self, staff_client, staff_user):
        url = reverse('users:logout')
        refresh = RefreshToken.for_user(staff_user)
        response = staff_client.post(url, {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK

    def test_logout_with_invalid_refresh(self, staff_client):
        url = reverse('users:logout')
        response = staff_client.post(url, {'refresh': 'not-a-token'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_logout_unauthenticated(self, api_client):
        url = reverse('users:logout')
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, staff_client, staff_user):
        url = reverse('users:current-user')
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == staff_user.id
        assert response.data['fullName'] == 'Test Cashier'

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestUserManagement:
    """Tests for /api/auth/users/ (admin only)"""

    def test_list_users_as_admin(self, admin_client, staff_user):
        url = reverse('users:user-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        usernames = [u['username'] for u in response.data]
        assert 'cashier' in usernames
        assert 'manager' in usernames

    def test_list_users_as_staff_forbidden(self, staff_client):
        url = reverse('users:user-list')
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_user(self, admin_client):
        url = reverse('users:user-list')
        response = admin_client.post(url, {
            'username': 'newbarista',
            'password': 'secret123',
            'role': 'staff',
            'fullName': 'New Barista',
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['username'] == 'newbarista'
        assert 'password' not in response.data
        user = User.objects.get(username='newbarista')
        assert user.check_password('secret123')

    def test_create_duplicate_username(self, admin_client, staff_user):
        url = reverse('users:user-list')
        response = admin_client.post(url, {
            'username': 'cashier',
            'password': 'secret123',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data

    def test_update_user_rehashes_password(self, admin_client, staff_user):
        url = reverse('users:user-detail', kwargs={'pk': staff_user.id})
        response = admin_client.patch(url, {'password': 'changed123', 'role': 'admin'})

        assert response.status_code == status.HTTP_200_OK
        staff_user.refresh_from_db()
        assert staff_user.check_password('changed123')
        assert staff_user.role == UserRole.ADMIN

    def test_update_user_unknown_field(self, admin_client, staff_user):
        url = reverse('users:user-detail', kwargs={'pk': staff_user.id})
        response = admin_client.patch(url, {'email': 'x@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data

    def test_get_missing_user(self, admin_client):
        url = reverse('users:user-detail', kwargs={'pk': 99999})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_user(self, admin_client, staff_user):
        url = reverse('users:user-detail', kwargs={'pk': staff_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not User.objects.filter(id=staff_user.id).exists()

    def test_cannot_delete_self(self, admin_client, admin_user):
        url = reverse('users:user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=admin_user.id).exists()


# =============================================================================
# Default Data Tests
# =============================================================================

@pytest.mark.django_db
class TestDefaults:

    def test_ensure_default_admin_on_empty_table(self):
        user = ensure_default_admin()

        assert user is not None
        assert user.username == 'admin'
        assert user.role == UserRole.SUPER_ADMIN
        assert user.check_password('admin')

    def test_ensure_default_admin_noop_when_users_exist(self, staff_user):
        assert ensure_default_admin() is None
        assert not User.objects.filter(username='admin').exists()

    def test_seed_defaults_command(self):
        call_command('seed_defaults')

        assert User.objects.filter(username='admin').exists()
        assert Product.objects.count() == 5

        # Idempotent
        call_command('seed_defaults')
        assert User.objects.count() == 1
        assert Product.objects.count() == 5

    def test_create_sample_data_command(self):
        call_command('create_sample_data', '--days', '2')

        assert User.objects.filter(username='owner', role=UserRole.SUPER_ADMIN).exists()
        assert Transaction.objects.exists()
        # Stats built through the ledger match a rebuild from scratch
        before = {
            s.date: (s.total_revenue, s.entries_count, s.cafe_orders_count)
            for s in DailyStats.objects.all()
        }
        call_command('rebuild_daily_stats')
        after = {
            s.date: (s.total_revenue, s.entries_count, s.cafe_orders_count)
            for s in DailyStats.objects.all()
        }
        assert before == after
