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
            name='EggCollection',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('collection_date', models.DateField(db_index=True, help_text='Date of the collection')),
                ('period', models.CharField(choices=[('morning', 'Manhã'), ('afternoon', 'Tarde')], max_length=10)),
                ('egg_count', models.PositiveIntegerField(help_text='Eggs collected in this period', validators=[django.core.validators.MinValueValidator(0)])),
                ('posture_percentage', models.DecimalField(decimal_places=2, default=decimal.Decimal('0.00'), help_text='(Eggs collected / hen count) × 100', max_digits=12)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='egg_collections', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'egg_collections',
                'ordering': ['-collection_date', '-period'],
                'indexes': [
                    models.Index(fields=['user', '-collection_date'], name='egg_coll_user_date_idx'),
                ],
            },
        ),
    ]
