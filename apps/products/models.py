from django.db import models
import uuid

from apps.catalog.models import ProductType, BusinessCardPlan


class ProductStatus(models.TextChoices):
    PENDING_ACTIVATION = 'PENDING_ACTIVATION', 'Pending activation'
    ACTIVE = 'ACTIVE', 'Active'
    SUSPENDED = 'SUSPENDED', 'Suspended'


class ContactType(models.TextChoices):
    PHONE = 'PHONE', 'Phone'
    EMAIL = 'EMAIL', 'Email'
    ADDRESS = 'ADDRESS', 'Address'


class BusinessCardProfile(models.Model):
    """Public-facing content of a business card, reachable at /cards/<slug>."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(max_length=120, unique=True)
    full_name = models.CharField(max_length=200, blank=True, null=True)
    title = models.CharField(max_length=200, blank=True, null=True)
    profile_picture_url = models.CharField(max_length=500, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    plan = models.CharField(
        max_length=20,
        choices=BusinessCardPlan.choices,
        default=BusinessCardPlan.STARTER
    )
    views = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'business_card_profiles'
        ordering = ['-created_at']

    def __str__(self):
        return self.slug

    @property
    def display_name(self):
        return self.full_name or self.title or 'No name'

    def get_product(self):
        """Owning product, or None for an orphaned profile."""
        try:
            return self.product
        except Product.DoesNotExist:
            return None


class ContactInfo(models.Model):
    profile = models.ForeignKey(
        BusinessCardProfile,
        on_delete=models.CASCADE,
        related_name='contacts'
    )
    type = models.CharField(max_length=10, choices=ContactType.choices)
    value = models.CharField(max_length=500)

    class Meta:
        db_table = 'contact_infos'
        ordering = ['id']

    def __str__(self):
        return f"{self.type}: {self.value}"


class SocialLink(models.Model):
    profile = models.ForeignKey(
        BusinessCardProfile,
        on_delete=models.CASCADE,
        related_name='social_links'
    )
    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=100, blank=True, null=True)
    url = models.CharField(max_length=2048)

    class Meta:
        db_table = 'social_links'
        ordering = ['id']

    def __str__(self):
        return self.name


class AdditionalLink(models.Model):
    profile = models.ForeignKey(
        BusinessCardProfile,
        on_delete=models.CASCADE,
        related_name='additional_links'
    )
    title = models.CharField(max_length=200)
    icon = models.CharField(max_length=100, blank=True, null=True)
    url = models.CharField(max_length=2048)

    class Meta:
        db_table = 'additional_links'
        ordering = ['id']

    def __str__(self):
        return self.title


class RedirectItem(models.Model):
    """NFC tag that forwards to a configurable URL."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    target_url = models.CharField(max_length=2048, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'redirect_items'

    def __str__(self):
        return self.target_url or '(unset)'


class StaticItem(models.Model):
    """NFC tag showing fixed text."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'static_items'


class Product(models.Model):
    """
    A customer's purchased instance of a catalog product.

    Exactly one of the type-specific links is used, matching ``type``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='products'
    )
    catalog_product = models.ForeignKey(
        'catalog.CatalogProduct',
        on_delete=models.PROTECT,
        related_name='products'
    )
    name = models.CharField(max_length=200)
    type = models.CharField(max_length=20, choices=ProductType.choices)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.PENDING_ACTIVATION,
        db_index=True
    )

    business_card_profile = models.OneToOneField(
        BusinessCardProfile,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='product'
    )
    redirect_item = models.OneToOneField(
        RedirectItem,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='product'
    )
    static_item = models.OneToOneField(
        StaticItem,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='product'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', '-created_at']),
            models.Index(fields=['status', '-created_at']),
        ]

    def __str__(self):
        return f"{self.name} ({self.owner})"

    @property
    def is_active(self):
        return self.status == ProductStatus.ACTIVE

    @property
    def latest_subscription(self):
        """Newest subscription; relies on the default -created_at ordering."""
        subscriptions = list(self.subscriptions.all())
        return subscriptions[0] if subscriptions else None
