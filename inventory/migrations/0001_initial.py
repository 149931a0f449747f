import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('finances', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('movement_type', models.CharField(choices=[('in', 'Entrada'), ('out', 'Saída')], db_index=True, max_length=10)),
                ('egg_count', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)])),
                ('movement_date', models.DateField(db_index=True)),
                ('source_type', models.CharField(blank=True, help_text='Model name of source record (EggCollection)', max_length=50, null=True)),
                ('source_id', models.CharField(blank=True, help_text='UUID of source record', max_length=50, null=True)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('financial_movement', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stock_movements', to='finances.financialmovement')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_movements', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'stock_movements',
                'ordering': ['-movement_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-movement_date'], name='stock_mov_user_date_idx'),
                    models.Index(fields=['source_type', 'source_id'], name='stock_mov_source_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StockBalance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('egg_count', models.IntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='stock_balance', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'stock_balance',
            },
        ),
    ]
