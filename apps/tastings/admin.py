from django.contrib import admin
from .models import TastingNote


@admin.register(TastingNote)
class TastingNoteAdmin(admin.ModelAdmin):
    """Admin interface for Tasting Notes."""

    list_display = ['blend', 'user', 'overall_rating', 'price_pln', 'created_at']
    list_filter = ['overall_rating', 'blend__brand', 'blend__region', 'created_at']
    search_fields = ['blend__name', 'blend__brand__name', 'user__email', 'purchase_source']
    list_select_related = ['user', 'blend', 'blend__brand']
    raw_id_fields = ['user', 'blend']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Tasting', {
            'fields': ('user', 'blend', 'overall_rating')
        }),
        ('Scores', {
            'fields': ('umami', 'bitter', 'sweet', 'foam'),
        }),
        ('Notes', {
            'fields': ('notes_koicha', 'notes_milk'),
        }),
        ('Purchase', {
            'fields': ('price_pln', 'purchase_source'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
