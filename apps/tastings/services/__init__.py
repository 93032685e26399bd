"""Services for tastings business logic."""

from .exceptions import (
    TastingsServiceError,
    TastingNoteNotFoundError,
    BlendNotFoundError,
)
from .tasting_notes import (
    SORT_FIELDS,
    SORT_ORDERS,
    list_tasting_notes,
    get_tasting_note,
    create_tasting_note,
    update_tasting_note,
    delete_tasting_note,
    select_tasting_notes,
)

__all__ = [
    # Exceptions
    'TastingsServiceError',
    'TastingNoteNotFoundError',
    'BlendNotFoundError',
    # Services
    'SORT_FIELDS',
    'SORT_ORDERS',
    'list_tasting_notes',
    'get_tasting_note',
    'create_tasting_note',
    'update_tasting_note',
    'delete_tasting_note',
    'select_tasting_notes',
]
