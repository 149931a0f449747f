import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='HenCountHistory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('hen_count', models.PositiveIntegerField(help_text='Hen count from this moment on')),
                ('change_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('reason', models.CharField(blank=True, default='', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hen_count_history', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Hen Count History',
                'verbose_name_plural': 'Hen Count History',
                'db_table': 'hen_count_history',
                'ordering': ['-change_date'],
            },
        ),
    ]
