"""Public business card lookup."""

from django.db import transaction
from django.db.models import F

from ..models import BusinessCardProfile
from .exceptions import ProfileNotFoundError, ProductNotActiveError


@transaction.atomic
def get_public_card(*, slug: str) -> BusinessCardProfile:
    """
    Fetch a card for public display and count the view.

    Raises:
        ProfileNotFoundError: If no profile has this slug
        ProductNotActiveError: If the profile has no product or it is not ACTIVE
    """
    try:
        profile = (
            BusinessCardProfile.objects
            .select_related('product__owner', 'product__catalog_product')
            .prefetch_related('contacts', 'social_links', 'additional_links')
            .get(slug=slug)
        )
    except BusinessCardProfile.DoesNotExist:
        raise ProfileNotFoundError("Business card not found")

    product = profile.get_product()
    if product is None or not product.is_active:
        raise ProductNotActiveError("Business card is not active")

    BusinessCardProfile.objects.filter(id=profile.id).update(views=F('views') + 1)
    profile.refresh_from_db(fields=['views'])

    return profile
