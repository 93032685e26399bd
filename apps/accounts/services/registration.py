"""User registration service."""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import DuplicateEmailError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(*, email: str, password: str) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (stored lowercased)
        password: User's password (will be hashed)

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError("An account with this email already exists")

    try:
        # Savepoint so a concurrent duplicate doesn't poison the outer transaction
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password)
    except IntegrityError:
        raise DuplicateEmailError("An account with this email already exists")

    logger.info("Registered user %s", user.id)
    return user
