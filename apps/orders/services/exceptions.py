"""Domain-specific exceptions for orders services."""


class OrdersServiceError(Exception):
    """Base exception for orders services."""
    pass


class OrderValidationError(OrdersServiceError):
    """Raised when an order cannot be placed with the given input."""
    pass


class ProductNotFoundError(OrdersServiceError):
    """Raised when the product to activate does not exist."""
    pass


class ActivationError(OrdersServiceError):
    """Raised when a product is not in a state that allows activation."""
    pass


class ActivationFailedError(OrdersServiceError):
    """Raised when activation keeps failing on database errors."""
    pass
