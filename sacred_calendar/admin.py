"""Admin registration for anchor presets."""

from django.contrib import admin

from . import core
from .models import AnchorPreset


@admin.register(AnchorPreset)
class AnchorPresetAdmin(admin.ModelAdmin):
    list_display = ("name", "start_date", "cycle_end", "owner", "created_at")
    search_fields = ("name",)
    list_filter = ("start_date",)

    @admin.display(description="Last day of cycle")
    def cycle_end(self, obj):
        try:
            return core.sacred_to_gregorian(obj.start_date, core.MONTHS, 31)
        except core.InvalidSacredDate:
            return None
