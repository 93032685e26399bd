"""
Credential checks for login.

Only verifies the email/password pair. ``last_login`` is stamped by
Django's ``user_logged_in`` signal once the view opens the session.
"""

from typing import Optional

from django.contrib.auth import get_user_model

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

INVALID_CREDENTIALS = "Invalid email or password"


def _find_user(email: str) -> Optional[User]:
    return User.objects.filter(email__iexact=email).first()


def authenticate_user(*, email: str, password: str) -> User:
    """
    Return the user owning these credentials.

    Unknown emails still pay for one password hash, so response time
    doesn't reveal which addresses are registered.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Correct password on a deactivated account
    """
    user = _find_user(email)
    if user is None:
        User().set_password(password)
        raise InvalidCredentialsError(INVALID_CREDENTIALS)

    if not user.check_password(password):
        raise InvalidCredentialsError(INVALID_CREDENTIALS)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    return user
