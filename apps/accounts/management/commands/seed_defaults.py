"""
Management command to seed the default admin account and drinks menu.

Safe to run on every deploy: nothing is created when users or products
already exist.

Usage:
    python manage.py seed_defaults
"""

from django.core.management.base import BaseCommand

from apps.accounts.services import ensure_default_admin
from apps.products.services import ensure_default_products


class Command(BaseCommand):
    help = 'Create the default admin user and products when the tables are empty'

    def handle(self, *args, **options):
        admin = ensure_default_admin()
        if admin:
            self.stdout.write(
                self.style.WARNING(
                    f'Created default admin "{admin.username}". Change its password.'
                )
            )
        else:
            self.stdout.write('Users already exist, no admin created.')

        products = ensure_default_products()
        if products:
            self.stdout.write(
                self.style.SUCCESS(f'Created {len(products)} default product(s).')
            )
        else:
            self.stdout.write('Products already exist, none created.')
