"""Admin-side user management service."""

import logging
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from ..models import UserRole
from .exceptions import (
    UserNotFoundError,
    DuplicateUsernameError,
    SelfDeletionError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def list_users() -> QuerySet:
    """Return all users ordered by username."""
    return User.objects.all().order_by('username')


def get_user_by_id(*, user_id: int) -> User:
    """
    Retrieve a user by ID.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


@transaction.atomic
def create_user(
    *,
    username: str,
    password: str,
    role: str = UserRole.STAFF,
    full_name: str = '',
) -> User:
    """
    Create a back-office user with a hashed password.

    Raises:
        DuplicateUsernameError: If the username is already taken
    """
    if User.objects.filter(username=username).exists():
        raise DuplicateUsernameError("Username already exists")

    try:
        user = User.objects.create_user(
            username=username,
            password=password,
            role=role,
            full_name=full_name,
        )
    except IntegrityError:
        raise DuplicateUsernameError("Username already exists")

    logger.info("Created user %s with role %s", user.username, user.role)
    return user


@transaction.atomic
def update_user(
    *,
    user_id: int,
    username: Optional[str] = None,
    password: Optional[str] = None,
    role: Optional[str] = None,
    full_name: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> User:
    """
    Update a user. Only provided (non-None) fields change.

    Raises:
        UserNotFoundError: If user doesn't exist
        DuplicateUsernameError: If the new username is taken
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    if username is not None and username != user.username:
        if User.objects.filter(username=username).exclude(id=user.id).exists():
            raise DuplicateUsernameError("Username already exists")
        user.username = username
    if password:
        user.set_password(password)
    if role is not None:
        user.role = role
    if full_name is not None:
        user.full_name = full_name
    if is_active is not None:
        user.is_active = is_active

    user.save()
    return user


@transaction.atomic
def delete_user(*, user_id: int, acting_user: User) -> None:
    """
    Delete a user account.

    Raises:
        SelfDeletionError: If the acting admin targets their own account
        UserNotFoundError: If user doesn't exist
    """
    if user_id == acting_user.id:
        raise SelfDeletionError("Cannot delete your own account")

    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError("User not found")

    logger.info("User %s deleted by %s", user_id, acting_user.username)


def ensure_default_admin() -> Optional[User]:
    """
    Create the default super admin when the user table is empty.

    Returns:
        The created user, or None if users already exist
    """
    if User.objects.exists():
        return None

    user = User.objects.create_user(
        username=settings.DEFAULT_ADMIN_USERNAME,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        role=UserRole.SUPER_ADMIN,
        full_name='Administrator',
        is_staff=True,
    )
    logger.warning(
        "Default admin user created with username: %s. Change its password.",
        user.username
    )
    return user
