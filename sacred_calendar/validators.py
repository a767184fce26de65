"""Validators for the sacred calendar."""

from django.core.exceptions import ValidationError

from . import core


def validate_sacred_date_parts(month: int, day: int) -> None:
    """Validate numeric parts of a sacred date."""
    if not 1 <= month <= core.MONTHS:
        raise ValidationError(f"Month must be 1–{core.MONTHS}")
    max_day = core.month_length(month)
    if not 1 <= day <= max_day:
        raise ValidationError(f"Month {month} has {max_day} days")


def validate_preset_name(value: str) -> None:
    if len((value or "").strip()) < 3:
        raise ValidationError("Preset name must be at least 3 characters long.")


def validate_anchor_date(value) -> None:
    """Reject anchors whose 364-day cycle would run past ``date.max``."""
    if value is not None and value > core.LAST_ANCHOR:
        raise ValidationError(f"Anchor must be on or before {core.LAST_ANCHOR.isoformat()}")
