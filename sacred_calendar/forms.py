from __future__ import annotations

from django import forms

from sacred_calendar import core
from sacred_calendar.models import AnchorPreset
from sacred_calendar.utils import as_calendar_date, parse_sacred_date
from sacred_calendar.validators import validate_anchor_date


class AnchorDateFormField(forms.Field):
    """\
    Text field for the Month 1 Day 1 anchor.
    clean() returns a plain ``datetime.date``.
    """

    default_validators = [validate_anchor_date]

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "YYYY-MM-DD"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return None
        return as_calendar_date(value)

    def prepare_value(self, value):
        if hasattr(value, "isoformat"):
            return value.isoformat()
        return value


class SacredDateFormField(forms.Field):
    """Text field for a sacred ``M-D`` date; clean() returns ``SacredDate``."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "M-D"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return None
        return parse_sacred_date(value)

    def prepare_value(self, value):
        if isinstance(value, core.SacredDate):
            return f"{value.month}-{value.day}"
        return value


class AnchorForm(forms.Form):
    anchor = AnchorDateFormField()


class AnchorPresetForm(forms.ModelForm):
    start_date = AnchorDateFormField()

    class Meta:
        model = AnchorPreset
        fields = ["name", "start_date"]

    def clean_name(self):
        return self.cleaned_data["name"].strip()
