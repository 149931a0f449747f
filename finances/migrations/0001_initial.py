import decimal
import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FinancialMovement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('movement_type', models.CharField(choices=[('income', 'Entrada'), ('expense', 'Saída')], db_index=True, max_length=10)),
                ('category', models.CharField(help_text='Free text category (see INCOME_CATEGORIES / EXPENSE_CATEGORIES)', max_length=100)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0.00'))])),
                ('movement_date', models.DateField(db_index=True)),
                ('payment_method', models.CharField(blank=True, default='', max_length=50)),
                ('contact', models.CharField(blank=True, default='', max_length=150)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='financial_movements', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'financial_movements',
                'ordering': ['-movement_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-movement_date'], name='fin_mov_user_date_idx'),
                    models.Index(fields=['user', 'movement_type', 'movement_date'], name='fin_mov_user_type_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='FinancialBalance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('balance', models.DecimalField(decimal_places=2, default=decimal.Decimal('0.00'), max_digits=12)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='financial_balance', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'financial_balance',
            },
        ),
    ]
