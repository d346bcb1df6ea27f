"""Email and password sign-in for customers and admins."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)

BAD_CREDENTIALS = "Invalid email or password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check credentials and stamp ``last_login``.

    Email matching is case-insensitive, so accounts created through guest
    checkout with mixed-case addresses can still sign in. Unknown email and
    wrong password produce the same error.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Password is right but the account is disabled
    """
    account = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email.strip())
        .first()
    )

    if account is None or not account.check_password(password):
        logger.info("Failed sign-in for %s", email)
        raise InvalidCredentialsError(BAD_CREDENTIALS)

    if not account.is_active:
        raise InactiveAccountError("Account is deactivated")

    account.last_login = timezone.now()
    account.save(update_fields=['last_login'])
    return account
