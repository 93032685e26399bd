"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
)
from .registration import register_user
from .authentication import authenticate_user
from .password_reset import request_password_reset, confirm_password_reset

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
    # Services
    'register_user',
    'authenticate_user',
    'request_password_reset',
    'confirm_password_reset',
]
