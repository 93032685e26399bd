from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


RATING_VALIDATORS = [MinValueValidator(1), MaxValueValidator(5)]


class TastingNote(models.Model):
    """One user's tasting of one blend."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='tasting_notes')
    blend = models.ForeignKey('catalog.Blend', on_delete=models.PROTECT, related_name='tasting_notes')

    # Ratings (1-5)
    overall_rating = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    umami = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    bitter = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    sweet = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    foam = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)

    # Free text
    notes_koicha = models.TextField(null=True, blank=True)
    notes_milk = models.TextField(null=True, blank=True)

    # Purchase
    price_pln = models.PositiveIntegerField(null=True, blank=True)
    purchase_source = models.CharField(max_length=500, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Fields a PATCH may touch
    UPDATABLE_FIELDS = (
        'overall_rating',
        'umami',
        'bitter',
        'sweet',
        'foam',
        'notes_koicha',
        'notes_milk',
        'price_pln',
        'purchase_source',
    )

    class Meta:
        db_table = 'tasting_notes'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='tasting_user_created_idx'),
            models.Index(fields=['user', 'overall_rating'], name='tasting_user_rating_idx'),
            models.Index(fields=['blend'], name='tasting_blend_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(overall_rating__gte=1) & models.Q(overall_rating__lte=5),
                name='tasting_overall_rating_range',
            ),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.blend.name} ({self.overall_rating}/5)"
