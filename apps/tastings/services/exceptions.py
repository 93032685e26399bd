"""Domain-specific exceptions for tastings services."""


class TastingsServiceError(Exception):
    """Base exception for tastings services."""
    pass


class TastingNoteNotFoundError(TastingsServiceError):
    """Raised when a note doesn't exist or belongs to another user."""
    pass


class BlendNotFoundError(TastingsServiceError):
    """Raised when the blend for a new note doesn't exist."""
    pass
