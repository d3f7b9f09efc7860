import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.expenses.models import Expense
from apps.stats.models import DailyStats


@pytest.mark.django_db
class TestExpenseRead:
    """Reads are open to any authenticated user."""

    def test_list_newest_first(self, staff_client, rent_expense, supplies_expense):
        url = reverse('expenses:expense-list')
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [e['id'] for e in response.data] == [supplies_expense.id, rent_expense.id]
        assert response.data[0]['createdByName'] == 'Test Manager'

    def test_retrieve_missing(self, staff_client):
        url = reverse('expenses:expense-detail', kwargs={'pk': 99999})
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_by_date_inclusive(self, staff_client, rent_expense, supplies_expense):
        url = reverse('expenses:expense-by-date')
        response = staff_client.get(url, {'startDate': '2024-01-02', 'endDate': '2024-01-15'})

        assert [e['id'] for e in response.data] == [supplies_expense.id]

    def test_by_category(self, staff_client, rent_expense, supplies_expense):
        url = reverse('expenses:expense-by-category', kwargs={'category': 'rent'})
        response = staff_client.get(url)

        assert [e['id'] for e in response.data] == [rent_expense.id]

    def test_by_unknown_category(self, staff_client):
        url = reverse('expenses:expense-by-category', kwargs={'category': 'travel'})
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestExpenseWrite:
    """Writes need the admin role."""

    def test_create_as_admin(self, admin_client, admin_user):
        url = reverse('expenses:expense-list')
        response = admin_client.post(url, {
            'amount': '120.00',
            'category': 'maintenance',
            'description': 'Réparation machine',
            'paymentMethod': 'card',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        expense = Expense.objects.get(id=response.data['id'])
        assert expense.created_by == admin_user
        assert expense.amount == Decimal('120.00')

    def test_create_does_not_touch_stats(self, admin_client):
        url = reverse('expenses:expense-list')
        admin_client.post(url, {'amount': '50.00', 'category': 'other'}, format='json')

        assert not DailyStats.objects.exists()

    def test_create_as_staff_forbidden(self, staff_client):
        url = reverse('expenses:expense-list')
        response = staff_client.post(url, {'amount': '50.00', 'category': 'other'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Expense.objects.exists()

    def test_create_invalid_category(self, admin_client):
        url = reverse('expenses:expense-list')
        response = admin_client.post(url, {'amount': '50.00', 'category': 'travel'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch(self, admin_client, rent_expense):
        url = reverse('expenses:expense-detail', kwargs={'pk': rent_expense.id})
        response = admin_client.patch(url, {'amount': '4200.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        rent_expense.refresh_from_db()
        assert rent_expense.amount == Decimal('4200.00')
        assert rent_expense.category == 'rent'

    def test_patch_unknown_field(self, admin_client, rent_expense):
        url = reverse('expenses:expense-detail', kwargs={'pk': rent_expense.id})
        response = admin_client.patch(url, {'createdBy': 1}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete(self, admin_client, rent_expense):
        url = reverse('expenses:expense-detail', kwargs={'pk': rent_expense.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Expense.objects.filter(id=rent_expense.id).exists()

    def test_delete_missing(self, admin_client):
        url = reverse('expenses:expense-detail', kwargs={'pk': 99999})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_as_staff_forbidden(self, staff_client, rent_expense):
        url = reverse('expenses:expense-detail', kwargs={'pk': rent_expense.id})
        response = staff_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
