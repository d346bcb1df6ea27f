"""Resolution of NFC redirect tags."""

from dataclasses import dataclass
from urllib.parse import urlencode
from uuid import UUID

from django.conf import settings

from apps.catalog.models import ProductType
from ..models import Product
from .exceptions import ProductNotFoundError, RedirectNotConfiguredError


@dataclass(frozen=True)
class RedirectTarget:
    location: str
    status: int


def _frontend_page(path: str, product_id: UUID) -> str:
    query = urlencode({'product': str(product_id)})
    return f"{settings.FRONTEND_URL}{path}?{query}"


def resolve_redirect(*, product_id: UUID) -> RedirectTarget:
    """
    Decide where a scanned redirect tag should send the visitor.

    - inactive product: the coming-soon page
    - no target configured yet: the setup page
    - otherwise: the target URL

    Every hop is a 307 so the visitor's method is preserved.

    Raises:
        ProductNotFoundError: If product is missing or not a redirect product
        RedirectNotConfiguredError: If an active product lacks its redirect item
    """
    try:
        product = Product.objects.select_related('redirect_item').get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found or not a redirect item")

    if product.type != ProductType.REDIRECT_ITEM:
        raise ProductNotFoundError("Product not found or not a redirect item")

    if not product.is_active:
        return RedirectTarget(_frontend_page('/coming-soon', product.id), 307)

    if product.redirect_item is None:
        raise RedirectNotConfiguredError("Redirect configuration not found")

    target_url = (product.redirect_item.target_url or '').strip()
    if not target_url:
        return RedirectTarget(_frontend_page('/setup-redirect', product.id), 307)

    return RedirectTarget(target_url, 307)
