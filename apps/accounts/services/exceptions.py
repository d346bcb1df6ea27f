"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class EmailInUseError(AccountsServiceError):
    """Raised when an email address already belongs to another account."""
    pass


class PasswordConfirmationError(AccountsServiceError):
    """Raised when the current password does not match."""
    pass


class PasswordReuseError(AccountsServiceError):
    """Raised when the new password equals the current one."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when a role outside USER/ADMIN is requested."""
    pass
