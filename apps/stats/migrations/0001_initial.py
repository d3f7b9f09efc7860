from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='DailyStats',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(unique=True)),
                ('total_revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('entries_revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('entries_count', models.PositiveIntegerField(default=0)),
                ('subscriptions_revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('subscriptions_count', models.PositiveIntegerField(default=0)),
                ('cafe_revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('cafe_orders_count', models.PositiveIntegerField(default=0)),
            ],
            options={
                'db_table': 'daily_stats',
                'ordering': ['date'],
                'verbose_name_plural': 'daily stats',
            },
        ),
    ]
