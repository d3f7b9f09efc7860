"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
    SelfDeletionError,
)
from .user_authentication import authenticate_user
from .user_management import (
    list_users,
    get_user_by_id,
    create_user,
    update_user,
    delete_user,
    ensure_default_admin,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'DuplicateUsernameError',
    'SelfDeletionError',
    # Services
    'authenticate_user',
    'list_users',
    'get_user_by_id',
    'create_user',
    'update_user',
    'delete_user',
    'ensure_default_admin',
]
