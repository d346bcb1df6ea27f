"""Owner edits of business card profiles."""

import logging

from django.db import transaction
from uuid import UUID
from typing import Optional, List, Dict, Any

from ..models import BusinessCardProfile, ContactInfo, SocialLink, AdditionalLink
from .exceptions import (
    ProfileNotFoundError,
    ProductAccessDeniedError,
    ProductNotActiveError,
)

logger = logging.getLogger(__name__)


def _replace_children(profile, model, rows, fields):
    model.objects.filter(profile=profile).delete()
    model.objects.bulk_create([
        model(profile=profile, **{field: row.get(field) for field in fields})
        for row in rows
    ])


@transaction.atomic
def update_business_card_profile(
    *,
    profile_id: UUID,
    user,
    title: Optional[str] = None,
    profile_picture_url: Optional[str] = None,
    notes: Optional[str] = None,
    contacts: Optional[List[Dict[str, Any]]] = None,
    social_links: Optional[List[Dict[str, Any]]] = None,
    additional_links: Optional[List[Dict[str, Any]]] = None
) -> BusinessCardProfile:
    """
    Update a business card profile owned by ``user``.

    title, profile_picture_url and notes are always written; empty values
    become NULL. Each child collection given as a list replaces the stored
    set entirely; a collection passed as None is left untouched.

    Returns:
        The profile with contacts and links prefetched in insertion order

    Raises:
        ProfileNotFoundError: If profile doesn't exist
        ProductAccessDeniedError: If the profile has no product or user is not its owner
        ProductNotActiveError: If the owning product is not ACTIVE
    """
    try:
        profile = BusinessCardProfile.objects.select_for_update().get(id=profile_id)
    except BusinessCardProfile.DoesNotExist:
        raise ProfileNotFoundError("Profile not found")

    product = profile.get_product()
    if product is None or product.owner_id != user.id:
        raise ProductAccessDeniedError("Unauthorized - Profile does not belong to you")

    if not product.is_active:
        raise ProductNotActiveError("Cannot edit inactive product")

    profile.title = title or None
    profile.profile_picture_url = profile_picture_url or None
    profile.notes = notes or None
    profile.save(update_fields=['title', 'profile_picture_url', 'notes', 'updated_at'])

    if contacts is not None:
        _replace_children(profile, ContactInfo, contacts, ['type', 'value'])

    if social_links is not None:
        social_links = [{**link, 'icon': link.get('icon') or None} for link in social_links]
        _replace_children(profile, SocialLink, social_links, ['name', 'icon', 'url'])

    if additional_links is not None:
        additional_links = [{**link, 'icon': link.get('icon') or None} for link in additional_links]
        _replace_children(profile, AdditionalLink, additional_links, ['title', 'icon', 'url'])

    logger.info("Profile %s updated by %s", profile.id, user.id)

    return (
        BusinessCardProfile.objects
        .prefetch_related('contacts', 'social_links', 'additional_links')
        .get(id=profile.id)
    )
