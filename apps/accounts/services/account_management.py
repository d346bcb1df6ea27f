"""Self-service account changes: email and password."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID

from .exceptions import (
    EmailInUseError,
    PasswordConfirmationError,
    PasswordReuseError,
    UserNotFoundError,
)

User = get_user_model()


def _get_locked_user(user_id: UUID) -> User:
    try:
        return User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


@transaction.atomic
def change_email(*, user_id: UUID, new_email: str) -> User:
    """
    Move an account to a new email address.

    The address is stored lower-cased. Re-submitting the current address is
    accepted as a no-op change.

    Raises:
        UserNotFoundError: If the account no longer exists
        EmailInUseError: If another account already uses the address
    """
    new_email = new_email.strip().lower()
    user = _get_locked_user(user_id)

    taken = (
        User.objects
        .filter(email__iexact=new_email)
        .exclude(id=user.id)
        .exists()
    )
    if taken:
        raise EmailInUseError("Email is already in use")

    user.email = new_email
    user.save(update_fields=['email', 'updated_at'])
    return user


@transaction.atomic
def change_password(*, user_id: UUID, current_password: str, new_password: str) -> None:
    """
    Replace the account password after verifying the current one.

    Raises:
        UserNotFoundError: If the account no longer exists or has no usable password
        PasswordConfirmationError: If current_password is wrong
        PasswordReuseError: If new_password equals the current password
    """
    user = _get_locked_user(user_id)

    if not user.has_usable_password():
        raise UserNotFoundError("User not found or password not set")

    if not user.check_password(current_password):
        raise PasswordConfirmationError("Current password is incorrect")

    if user.check_password(new_password):
        raise PasswordReuseError("New password must be different from current password")

    user.set_password(new_password)
    user.save(update_fields=['password', 'updated_at'])
