"""Domain-specific exceptions for products services."""


class ProductsServiceError(Exception):
    """Base exception for products services."""
    pass


class ProductNotFoundError(ProductsServiceError):
    """Raised when product does not exist."""
    pass


class ProfileNotFoundError(ProductsServiceError):
    """Raised when business card profile does not exist."""
    pass


class ProductAccessDeniedError(ProductsServiceError):
    """Raised when the requester does not own the product."""
    pass


class ProductNotActiveError(ProductsServiceError):
    """Raised when editing or viewing a product that is not ACTIVE."""
    pass


class InvalidProductDataError(ProductsServiceError):
    """Raised when an edit does not fit the product type."""
    pass


class RedirectNotConfiguredError(ProductsServiceError):
    """Raised when an active redirect product has no redirect item."""
    pass
