from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class ProductType(models.TextChoices):
    BUSINESS_CARD = 'BUSINESS_CARD', 'Business card'
    REDIRECT_ITEM = 'REDIRECT_ITEM', 'Redirect item'
    STATIC_ITEM = 'STATIC_ITEM', 'Static item'


class BusinessCardPlan(models.TextChoices):
    STARTER = 'STARTER', 'Starter'
    PROFESSIONAL = 'PROFESSIONAL', 'Professional'
    BUSINESS = 'BUSINESS', 'Business'


class CatalogProduct(models.Model):
    """Purchasable SKU: a business card plan, a redirect tag or a static tag."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True, null=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)

    one_time_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    monthly_service_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    yearly_service_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    type = models.CharField(max_length=20, choices=ProductType.choices)
    plan = models.CharField(
        max_length=20,
        choices=BusinessCardPlan.choices,
        blank=True,
        null=True
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'catalog_products'
        ordering = ['name']
        indexes = [
            models.Index(fields=['is_active', 'name']),
            models.Index(fields=['type']),
        ]

    def __str__(self):
        return self.name
