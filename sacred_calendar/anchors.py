"""Resolve the Month 1 Day 1 anchor for a request.

Sources, first match wins:

1. the active preset stored in the session,
2. an anchor date stored in the session,
3. the default anchor for the current Gregorian year.
"""

from __future__ import annotations

import logging
from datetime import date

from .models import AnchorPreset
from .utils import default_anchor, from_storage, to_storage

logger = logging.getLogger(__name__)

SESSION_PRESET_KEY = "sacred_active_preset"
SESSION_ANCHOR_KEY = "sacred_anchor"


def active_preset(request) -> AnchorPreset | None:
    preset_id = request.session.get(SESSION_PRESET_KEY)
    if preset_id is None:
        return None
    preset = AnchorPreset.objects.filter(pk=preset_id).first()
    if preset is None:
        # preset deleted elsewhere
        request.session.pop(SESSION_PRESET_KEY, None)
    return preset


def resolve_anchor(request) -> date:
    preset = active_preset(request)
    if preset is not None:
        return preset.start_date
    stored = from_storage(request.session.get(SESSION_ANCHOR_KEY))
    if stored is not None:
        return stored
    return default_anchor()


def set_session_anchor(request, anchor: date) -> None:
    """Store ``anchor`` and drop any active preset."""

    request.session[SESSION_ANCHOR_KEY] = to_storage(anchor)
    request.session.pop(SESSION_PRESET_KEY, None)
    logger.info("Anchor set to %s", anchor.isoformat())


def select_preset(request, preset: AnchorPreset) -> None:
    request.session[SESSION_PRESET_KEY] = preset.pk
    logger.info("Preset %s selected (anchor %s)", preset.pk, preset.start_date.isoformat())


def is_active_preset(request, preset: AnchorPreset) -> bool:
    return request.session.get(SESSION_PRESET_KEY) == preset.pk


def clear_preset(request, preset: AnchorPreset | None = None) -> None:
    """Forget the active preset, or only if it is ``preset``."""

    current = request.session.get(SESSION_PRESET_KEY)
    if preset is None or current == preset.pk:
        request.session.pop(SESSION_PRESET_KEY, None)
