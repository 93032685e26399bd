"""Serializer fields shared by the API apps."""

import re
import uuid

from rest_framework import serializers

# RFC 4122 textual form: hyphenated, version 1-8, variant 10xx (or the nil UUID)
UUID_PATTERN = re.compile(
    r'^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}'
    r'|00000000-0000-0000-0000-000000000000)$',
    re.IGNORECASE,
)


def parse_uuid(value):
    """
    Parse a canonical hyphenated UUID string.

    Unlike ``uuid.UUID`` this refuses braces, URNs and the 32-digit form.

    Returns:
        uuid.UUID, or None when the value isn't a well-formed UUID string
    """
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        return None
    return uuid.UUID(value)


class StrictUUIDField(serializers.Field):
    """UUID field that only accepts the hyphenated textual form."""

    default_error_messages = {
        'invalid': 'Invalid UUID format',
    }

    def to_internal_value(self, data):
        parsed = parse_uuid(data)
        if parsed is None:
            self.fail('invalid')
        return parsed

    def to_representation(self, value):
        return str(value)


class StrictCharField(serializers.CharField):
    """CharField that refuses JSON numbers and booleans instead of casting them."""

    default_error_messages = {
        'invalid': 'Not a valid string.',
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class CommaSeparatedUUIDField(serializers.Field):
    """
    Query parameter holding a comma-separated list of UUIDs.

    Empty segments are skipped; at least one UUID must remain.
    """

    default_error_messages = {
        'invalid': 'Invalid UUID format',
        'empty': 'At least one UUID is required',
        'not_a_string': 'Expected a comma-separated string',
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('not_a_string')

        parts = [part.strip() for part in data.split(',')]
        parts = [part for part in parts if part]
        if not parts:
            self.fail('empty')

        result = []
        for part in parts:
            parsed = parse_uuid(part)
            if parsed is None:
                self.fail('invalid')
            result.append(parsed)
        return result

    def to_representation(self, value):
        return ','.join(str(item) for item in value)


def validate_path_uuid(value, field='id'):
    """
    Parse a UUID taken from the URL path.

    Raises:
        ValidationError: If the value isn't a hyphenated UUID
    """
    parsed = parse_uuid(value)
    if parsed is None:
        raise serializers.ValidationError({field: ['Invalid UUID format']})
    return parsed


def validate_path_uuid_and_body(value, serializer, field='id'):
    """
    Validate a path UUID and a request body serializer together.

    Errors from both are raised as one ValidationError so a client sees
    every problem with the request at once.

    Returns:
        uuid.UUID parsed from the path
    """
    parsed = parse_uuid(value)
    errors = {}
    if parsed is None:
        errors[field] = ['Invalid UUID format']
    if not serializer.is_valid():
        errors.update(serializer.errors)
    if errors:
        raise serializers.ValidationError(errors)
    return parsed
