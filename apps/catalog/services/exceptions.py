"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class CatalogProductNotFoundError(CatalogServiceError):
    """Raised when catalog product does not exist."""
    pass


class CatalogProductInUseError(CatalogServiceError):
    """Raised when deleting a catalog product that customers already ordered."""
    pass
