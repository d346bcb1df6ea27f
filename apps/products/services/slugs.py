"""Slug generation for public business card URLs."""

import re

from ..models import BusinessCardProfile

_INVALID_CHARS = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def generate_slug(name: str) -> str:
    """
    Turn a display name into a URL slug.

    Characters outside a-z, 0-9, whitespace and hyphen are dropped, so
    non-ASCII letters disappear rather than being transliterated.

    >>> generate_slug('  John   Doe -- CEO! ')
    'john-doe-ceo'
    """
    slug = _INVALID_CHARS.sub('', name.lower())
    slug = _WHITESPACE.sub('-', slug)
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')


def ensure_unique_slug(base: str, *, separator: str = '-') -> str:
    """
    Return ``base`` or the first free ``base<separator><n>`` for n = 1, 2, ...

    Not race-free on its own; the unique constraint on
    BusinessCardProfile.slug is the final guard.
    """
    slug = base
    counter = 1
    while BusinessCardProfile.objects.filter(slug=slug).exists():
        slug = f"{base}{separator}{counter}"
        counter += 1
    return slug
