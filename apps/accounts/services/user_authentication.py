"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate user with username and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        username: User's login name
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    # Get user with lock to prevent race conditions on last_login
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username=username)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid username or password")

    # Check password
    if not user.check_password(password):
        logger.warning("Failed login attempt for %s", username)
        raise InvalidCredentialsError("Invalid username or password")

    # Check if active
    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    # Update last login
    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
