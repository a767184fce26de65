from django.conf import settings
from django.db import models

from .validators import validate_anchor_date, validate_preset_name


class AnchorPreset(models.Model):
    """A named Gregorian date used as Month 1 Day 1."""

    name = models.CharField(max_length=100, validators=[validate_preset_name])
    start_date = models.DateField(validators=[validate_anchor_date])
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="anchor_presets",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.start_date.isoformat()})"
