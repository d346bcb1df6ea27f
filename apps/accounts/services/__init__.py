"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    EmailInUseError,
    PasswordConfirmationError,
    PasswordReuseError,
    InvalidRoleError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import change_email, change_password
from .role_management import list_users, update_user_role

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'EmailInUseError',
    'PasswordConfirmationError',
    'PasswordReuseError',
    'InvalidRoleError',
    # Services
    'register_user',
    'authenticate_user',
    'change_email',
    'change_password',
    'list_users',
    'update_user_role',
]
