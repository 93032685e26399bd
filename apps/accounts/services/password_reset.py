"""Password reset service."""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

User = get_user_model()


def _send_reset_email(email: str, token: str) -> None:
    link = f"{settings.PASSWORD_RESET_URL}?token={token}"
    send_mail(
        subject="Reset your SipStory password",
        message=(
            "We received a request to reset your password.\n\n"
            f"Follow this link to choose a new one:\n{link}\n\n"
            "If you didn't ask for this, you can ignore this email."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )


def _token_is_fresh(issued_at) -> bool:
    if issued_at is None:
        return False
    max_age = timedelta(seconds=settings.PASSWORD_RESET_TIMEOUT)
    return timezone.now() - issued_at <= max_age


@transaction.atomic
def request_password_reset(*, email: str) -> Optional[str]:
    """
    Issue a password reset token and mail it to the user.

    Unknown or inactive emails are ignored so callers can't tell which
    addresses are registered.

    Args:
        email: User's email address

    Returns:
        Reset token, or None when no active account matches
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email, is_active=True)
        )
    except User.DoesNotExist:
        logger.info("Password reset requested for unknown email")
        return None

    reset_token = secrets.token_urlsafe(32)
    user.reset_token = reset_token
    user.reset_token_created_at = timezone.now()
    user.save(update_fields=['reset_token', 'reset_token_created_at'])

    transaction.on_commit(lambda: _send_reset_email(user.email, reset_token))

    return reset_token


@transaction.atomic
def confirm_password_reset(*, token: str, new_password: str) -> User:
    """
    Reset user password with token.

    Args:
        token: Reset token
        new_password: New password

    Returns:
        User instance

    Raises:
        InvalidTokenError: If token is unknown, already used, or older
            than PASSWORD_RESET_TIMEOUT seconds
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(reset_token=token, is_active=True)
        )
    except User.DoesNotExist:
        raise InvalidTokenError("Invalid or expired reset token")

    if not _token_is_fresh(user.reset_token_created_at):
        raise InvalidTokenError("Invalid or expired reset token")

    user.set_password(new_password)
    user.reset_token = None
    user.reset_token_created_at = None
    user.save(update_fields=['password', 'reset_token', 'reset_token_created_at'])

    logger.info("Password reset for user %s", user.id)
    return user
