from django.contrib import admin
from .models import Blend, Brand, Region


class BlendInline(admin.TabularInline):
    model = Blend
    fk_name = 'brand'
    extra = 0
    fields = ['name', 'region', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']
    readonly_fields = ['created_at']
    ordering = ['name']
    inlines = [BlendInline]


@admin.register(Region)
class RegionAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']
    readonly_fields = ['created_at']
    ordering = ['name']


@admin.register(Blend)
class BlendAdmin(admin.ModelAdmin):
    """Admin interface for Blends."""

    list_display = ['name', 'brand', 'region', 'created_at']
    list_filter = ['brand', 'region']
    search_fields = ['name', 'brand__name', 'region__name']
    list_select_related = ['brand', 'region']
    autocomplete_fields = ['brand', 'region']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['name']
