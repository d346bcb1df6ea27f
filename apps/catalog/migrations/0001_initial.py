# Generated manually for the Veezet catalog app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CatalogProduct',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('description', models.TextField(blank=True, null=True)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('one_time_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('monthly_service_fee', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('yearly_service_fee', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('type', models.CharField(choices=[('BUSINESS_CARD', 'Business card'), ('REDIRECT_ITEM', 'Redirect item'), ('STATIC_ITEM', 'Static item')], max_length=20)),
                ('plan', models.CharField(blank=True, choices=[('STARTER', 'Starter'), ('PROFESSIONAL', 'Professional'), ('BUSINESS', 'Business')], max_length=20, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'catalog_products',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['is_active', 'name'], name='catalog_pro_is_acti_3e1f0a_idx'),
                    models.Index(fields=['type'], name='catalog_pro_type_8c2d4b_idx'),
                ],
            },
        ),
    ]
