from __future__ import annotations

from rest_framework import serializers

from sacred_calendar import core
from sacred_calendar.models import AnchorPreset
from sacred_calendar.validators import validate_anchor_date, validate_preset_name


class AnchorPresetSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=100, validators=[validate_preset_name])
    start_date = serializers.DateField(input_formats=["%Y-%m-%d"], validators=[validate_anchor_date])
    cycle_end = serializers.SerializerMethodField()

    class Meta:
        model = AnchorPreset
        fields = ["id", "name", "start_date", "cycle_end", "created_at"]
        read_only_fields = ["id", "created_at"]

    def get_cycle_end(self, obj: AnchorPreset) -> str | None:
        try:
            return core.sacred_to_gregorian(obj.start_date, core.MONTHS, 31).isoformat()
        except core.InvalidSacredDate:
            return None

    def validate_name(self, value: str) -> str:
        return value.strip()
