"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --days 30 --clear

This creates:
- 3 users (owner, manager, cashier)
- The default drinks menu with stock levels
- Entries, subscriptions and cafe orders over the last days
- A few expenses

All ledger writes go through the services, so daily stats and stock
movements stay consistent.
"""

import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.expenses.models import Expense, ExpenseCategory
from apps.expenses.services import create_expense
from apps.inventory.models import Inventory, StockMovement
from apps.inventory.services import add_stock, remove_stock, update_inventory_item
from apps.products.services import ensure_default_products, list_products
from apps.stats.models import DailyStats
from apps.transactions.models import Transaction, TransactionType, PaymentMethod
from apps.transactions.services import create_transaction


ENTRY_PRICE = Decimal('25.00')
SUBSCRIPTION_PRICE = Decimal('300.00')
CLIENT_NAMES = ['Yasmine', 'Karim', 'Sofia', 'Omar', 'Lina', 'Mehdi', 'Salma']


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days',
            type=int,
            default=14,
            help='Number of past days to fill with transactions',
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing ledger data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        products = self.create_stock(users['manager'])
        self.create_transactions(options['days'], products, users['cashier'])
        self.create_expenses(users['owner'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  owner / owner123 (super admin)')
        self.stdout.write('  manager / manager123 (admin)')
        self.stdout.write('  cashier / cashier123 (staff)')

    def clear_data(self):
        """Clear ledger data. Users and products are kept."""
        StockMovement.objects.all().delete()
        Inventory.objects.all().delete()
        Transaction.objects.all().delete()
        DailyStats.objects.all().delete()
        Expense.objects.all().delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        accounts = [
            ('owner', 'owner123', UserRole.SUPER_ADMIN, 'Owner'),
            ('manager', 'manager123', UserRole.ADMIN, 'Manager'),
            ('cashier', 'cashier123', UserRole.STAFF, 'Cashier'),
        ]

        users = {}
        for username, password, role, full_name in accounts:
            user, _ = User.objects.get_or_create(
                username=username,
                defaults={'role': role, 'full_name': full_name}
            )
            user.set_password(password)
            user.save()
            users[username] = user

        return users

    def create_stock(self, manager):
        """Seed the menu and give every product a purchase price and stock."""
        self.stdout.write('  Creating products and stock...')

        ensure_default_products()
        products = list(list_products(active_only=True))

        for product in products:
            inventory, _ = add_stock(
                product_id=product.id,
                quantity=random.randint(20, 60),
                user=manager,
                reason='Sample data',
            )
            update_inventory_item(
                inventory_id=inventory.id,
                purchase_price=(product.price * Decimal('0.4')).quantize(Decimal('0.01')),
            )

        return products

    def create_transactions(self, days, products, cashier):
        self.stdout.write('  Creating transactions...')

        now = timezone.now()
        for offset in range(days):
            day = now - timedelta(days=offset)

            for _ in range(random.randint(3, 10)):
                create_transaction(
                    type=TransactionType.ENTRY,
                    amount=ENTRY_PRICE,
                    payment_method=random.choice(PaymentMethod.values),
                    date=day,
                    client_name=random.choice(CLIENT_NAMES),
                )

            if random.random() < 0.3:
                create_transaction(
                    type=TransactionType.SUBSCRIPTION,
                    amount=SUBSCRIPTION_PRICE,
                    payment_method=PaymentMethod.TRANSFER,
                    date=day,
                    client_name=random.choice(CLIENT_NAMES),
                )

            for _ in range(random.randint(2, 8)):
                product = random.choice(products)
                order = create_transaction(
                    type=TransactionType.CAFE,
                    amount=product.price,
                    payment_method=PaymentMethod.CASH,
                    date=day,
                    notes=product.name,
                )
                if product.inventory.quantity > 0:
                    remove_stock(
                        product_id=product.id,
                        quantity=1,
                        user=cashier,
                        reason='Sale',
                        transaction_id=order.id,
                    )
                    product.inventory.refresh_from_db()

    def create_expenses(self, owner):
        self.stdout.write('  Creating expenses...')

        today = timezone.now()
        create_expense(
            amount=Decimal('4000.00'),
            category=ExpenseCategory.RENT,
            date=today.replace(day=1),
            description='Loyer mensuel',
            payment_method=PaymentMethod.TRANSFER,
            created_by=owner,
        )
        create_expense(
            amount=Decimal('650.00'),
            category=ExpenseCategory.UTILITIES,
            date=today - timedelta(days=3),
            description='Électricité et internet',
            payment_method=PaymentMethod.TRANSFER,
            created_by=owner,
        )
