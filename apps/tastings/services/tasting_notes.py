"""
Tasting note service: CRUD, filtered listing and pair selection.

Every function takes the acting user and only ever touches that user's
notes. A note owned by someone else is reported exactly like a missing one.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.catalog.models import Blend
from apps.common.pagination import Page, paginate
from ..models import TastingNote
from .exceptions import BlendNotFoundError, TastingNoteNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = ('created_at', 'updated_at', 'overall_rating')
SORT_ORDERS = ('asc', 'desc')


def _user_notes(user: User) -> QuerySet[TastingNote]:
    return (
        TastingNote.objects
        .filter(user=user)
        .select_related('blend', 'blend__brand', 'blend__region')
    )


def list_tasting_notes(
    *,
    user: User,
    page: int = 1,
    limit: int = 20,
    brand_ids: Optional[Sequence[UUID]] = None,
    region_ids: Optional[Sequence[UUID]] = None,
    min_rating: Optional[int] = None,
    sort_by: str = 'created_at',
    sort_order: str = 'desc'
) -> Page[TastingNote]:
    """
    List the user's tasting notes.

    Filters within one list are OR-ed, different filters are AND-ed.

    Args:
        user: Owner of the notes
        page: 1-based page number
        limit: Page size
        brand_ids: Only notes whose blend belongs to one of these brands
        region_ids: Only notes whose blend comes from one of these regions
        min_rating: Only notes with overall_rating >= this value
        sort_by: created_at, updated_at or overall_rating
        sort_order: asc or desc

    Returns:
        Page of TastingNote with blend, brand and region loaded
    """
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort_by}")
    if sort_order not in SORT_ORDERS:
        raise ValueError(f"Unsupported sort order: {sort_order}")

    queryset = _user_notes(user)

    if brand_ids:
        queryset = queryset.filter(blend__brand_id__in=brand_ids)

    if region_ids:
        queryset = queryset.filter(blend__region_id__in=region_ids)

    if min_rating is not None:
        queryset = queryset.filter(overall_rating__gte=min_rating)

    prefix = '-' if sort_order == 'desc' else ''
    # id breaks ties so pages don't overlap
    queryset = queryset.order_by(f'{prefix}{sort_by}', f'{prefix}id')

    return paginate(queryset, page=page, limit=limit)


def get_tasting_note(*, user: User, note_id: UUID) -> TastingNote:
    """
    Get one of the user's notes.

    Raises:
        TastingNoteNotFoundError: If the note is missing or not the user's
    """
    try:
        return _user_notes(user).get(id=note_id)
    except TastingNote.DoesNotExist:
        raise TastingNoteNotFoundError("Tasting note not found")


@transaction.atomic
def create_tasting_note(
    *,
    user: User,
    blend_id: UUID,
    overall_rating: int,
    umami: Optional[int] = None,
    bitter: Optional[int] = None,
    sweet: Optional[int] = None,
    foam: Optional[int] = None,
    notes_koicha: Optional[str] = None,
    notes_milk: Optional[str] = None,
    price_pln: Optional[int] = None,
    purchase_source: Optional[str] = None
) -> TastingNote:
    """
    Create a tasting note for an existing blend.

    Args:
        user: Owner of the new note
        blend_id: Blend being tasted
        overall_rating: Overall rating (1-5, required)
        umami, bitter, sweet, foam: Optional 1-5 scores
        notes_koicha: Notes on the koicha preparation
        notes_milk: Notes on the latte preparation
        price_pln: Price paid, whole PLN
        purchase_source: Where it was bought

    Returns:
        Created TastingNote with blend, brand and region loaded

    Raises:
        BlendNotFoundError: If the blend doesn't exist
    """
    try:
        blend = Blend.objects.select_related('brand', 'region').get(id=blend_id)
    except Blend.DoesNotExist:
        raise BlendNotFoundError("Blend not found")

    note = TastingNote.objects.create(
        user=user,
        blend=blend,
        overall_rating=overall_rating,
        umami=umami,
        bitter=bitter,
        sweet=sweet,
        foam=foam,
        notes_koicha=notes_koicha,
        notes_milk=notes_milk,
        price_pln=price_pln,
        purchase_source=purchase_source,
    )

    logger.info("User %s created tasting note %s for blend %s", user.id, note.id, blend.id)
    return note


@transaction.atomic
def update_tasting_note(*, user: User, note_id: UUID, data: Dict[str, Any]) -> TastingNote:
    """
    Apply a partial update to one of the user's notes.

    Only keys present in ``data`` change; an explicit None clears a
    nullable field. The blend, owner and timestamps can't be changed here.

    Args:
        user: Owner of the note
        note_id: Note to update
        data: Field values to apply

    Returns:
        Updated TastingNote

    Raises:
        TastingNoteNotFoundError: If the note is missing or not the user's
    """
    try:
        note = _user_notes(user).select_for_update(of=('self',)).get(id=note_id)
    except TastingNote.DoesNotExist:
        raise TastingNoteNotFoundError("Tasting note not found")

    updated_fields = []
    for field, value in data.items():
        if field in TastingNote.UPDATABLE_FIELDS:
            setattr(note, field, value)
            updated_fields.append(field)

    if updated_fields:
        updated_fields.append('updated_at')
        note.save(update_fields=updated_fields)

    return note


@transaction.atomic
def delete_tasting_note(*, user: User, note_id: UUID) -> None:
    """
    Permanently delete one of the user's notes.

    Raises:
        TastingNoteNotFoundError: If the note is missing or not the user's
    """
    deleted, _ = TastingNote.objects.filter(user=user, id=note_id).delete()
    if not deleted:
        raise TastingNoteNotFoundError("Tasting note not found")

    logger.info("User %s deleted tasting note %s", user.id, note_id)


def select_tasting_notes(*, user: User, note_ids: Sequence[UUID]) -> List[TastingNote]:
    """
    Fetch exactly two of the user's notes for comparison.

    Args:
        user: Owner of the notes
        note_ids: Two note ids, in the order they should be returned

    Returns:
        The two notes in the requested order

    Raises:
        TastingNoteNotFoundError: If either note is missing or not the user's
    """
    if len(note_ids) != 2:
        raise ValueError("Exactly 2 tasting note IDs are required")

    notes = {note.id: note for note in _user_notes(user).filter(id__in=note_ids)}
    if len(notes) != 2:
        raise TastingNoteNotFoundError("One or more tasting notes not found")

    return [notes[note_id] for note_id in note_ids]
