"""
Project-wide DRF exception handler.

Every API error leaves the server as::

    {"error": "<message>", "details": [{"field": "...", "message": "..."}]}

where ``details`` is only present for validation failures. Unexpected
exceptions are logged with their traceback and reported as a generic 500 so
that database error text never reaches the client.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def flatten_errors(detail, prefix=''):
    """
    Flatten a DRF error structure into a list of field/message pairs.

    Nested serializer errors are joined with dots (``brand.id``) and
    non-field errors are attributed to the enclosing field.
    """
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                field = prefix
            else:
                field = f'{prefix}.{key}' if prefix else str(key)
            errors.extend(flatten_errors(value, field))
        return errors

    if isinstance(detail, list):
        errors = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                errors.extend(flatten_errors(value, f'{prefix}.{index}' if prefix else str(index)))
            else:
                errors.append({'field': prefix, 'message': str(value)})
        return errors

    return [{'field': prefix, 'message': str(detail)}]


def api_exception_handler(exc, context):
    """Render any exception raised inside an API view as an error body."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            'Unhandled error in %s',
            view.__class__.__name__ if view is not None else 'API view',
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {
            'error': 'Validation failed',
            'details': flatten_errors(exc.detail),
        }
    else:
        # Django's Http404/PermissionDenied carry no .detail; DRF put it in the body
        detail = getattr(exc, 'detail', None)
        if detail is None and isinstance(response.data, dict):
            detail = response.data.get('detail')
        response.data = {'error': str(detail) if detail is not None else 'Request failed'}

    return response
