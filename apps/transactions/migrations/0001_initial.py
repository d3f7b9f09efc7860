from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('entry', 'Daily entry'), ('subscription', 'Subscription'), ('cafe', 'Cafe order')], max_length=20)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
                ('payment_method', models.CharField(choices=[('cash', 'Cash'), ('card', 'Card'), ('transfer', 'Bank transfer')], default='cash', max_length=20)),
                ('client_name', models.CharField(blank=True, max_length=200)),
                ('notes', models.TextField(blank=True)),
                ('subscription_end_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-date', '-id'],
                'indexes': [
                    models.Index(fields=['date'], name='transactions_date_idx'),
                    models.Index(fields=['type', 'date'], name='transactions_type_date_idx'),
                ],
            },
        ),
    ]
