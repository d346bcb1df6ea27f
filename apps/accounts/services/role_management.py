"""Back-office user administration."""

import logging

from django.db import transaction
from django.db.models import QuerySet
from django.contrib.auth import get_user_model
from uuid import UUID

from ..models import UserRole
from .exceptions import InvalidRoleError, UserNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)


def list_users() -> QuerySet:
    """All accounts, newest first."""
    return User.objects.order_by('-created_at')


@transaction.atomic
def update_user_role(*, user_id: UUID, role: str) -> User:
    """
    Grant or revoke admin access.

    ADMIN users also get ``is_staff`` so they can use the Django admin site.

    Raises:
        InvalidRoleError: If role is not USER or ADMIN
        UserNotFoundError: If the user does not exist
    """
    if role not in UserRole.values:
        raise InvalidRoleError("Invalid role. Must be USER or ADMIN")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found")

    user.role = role
    user.is_staff = role == UserRole.ADMIN
    user.save(update_fields=['role', 'is_staff', 'updated_at'])

    logger.info("Role of user %s set to %s", user.id, role)
    return user
