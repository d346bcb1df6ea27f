"""Services for orders business logic."""

from .exceptions import (
    OrdersServiceError,
    OrderValidationError,
    ProductNotFoundError,
    ActivationError,
    ActivationFailedError,
)
from .billing import (
    add_months,
    billing_period,
    subscription_price,
    new_gateway_subscription_id,
    new_gateway_transaction_id,
)
from .order_creation import OrderResult, choose_profile_identity, create_order
from .product_activation import owner_slug_base, activate_product
from .order_queries import list_pending_orders

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderValidationError',
    'ProductNotFoundError',
    'ActivationError',
    'ActivationFailedError',
    # Billing
    'add_months',
    'billing_period',
    'subscription_price',
    'new_gateway_subscription_id',
    'new_gateway_transaction_id',
    # Orders
    'OrderResult',
    'choose_profile_identity',
    'create_order',
    'list_pending_orders',
    # Activation
    'owner_slug_base',
    'activate_product',
]
