from django.contrib import admin
from django.utils.html import format_html

from .models import BrewRecord, Shift


@admin.register(BrewRecord)
class BrewRecordAdmin(admin.ModelAdmin):
    """
    Read-only admin for logged brews.

    Brews are immutable once logged, so adding, editing and deleting are
    disabled; the admin is for browsing and filtering only.
    """

    list_display = [
        'timestamp',
        'shift_badge',
        'extraction_weight',
        'extraction_time',
        'grind_time',
    ]
    list_filter = ['shift', 'timestamp']
    date_hierarchy = 'timestamp'
    ordering = ['-timestamp']
    readonly_fields = [
        'extraction_weight',
        'extraction_time',
        'grind_time',
        'timestamp',
        'shift',
    ]

    def shift_badge(self, obj):
        """Display shift as colored badge."""
        colors = {
            Shift.AM: ('#E5C49A', '#2C1810'),
            Shift.PM: ('#A47449', 'white'),
            Shift.NIGHT: ('#2C1810', 'white'),
        }
        bg, fg = colors.get(obj.shift, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_shift_display()
        )
    shift_badge.short_description = 'Shift'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
