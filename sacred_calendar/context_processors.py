"""Context processors for the sacred calendar."""

import json

from . import anchors, core


def sacred_anchor(request):
    """Add the resolved Month 1 Day 1 anchor to templates."""
    anchor = anchors.resolve_anchor(request)
    return {"SACRED_ANCHOR": anchor, "SACRED_ANCHOR_ISO": anchor.isoformat()}


def sacred_calendar_meta(request):
    """Expose the fixed calendar structure and today's sacred date.

    ``SACRED_TODAY`` is ``None`` when today falls outside the anchor's cycle.
    """

    from datetime import date

    anchor = anchors.resolve_anchor(request)
    today = core.gregorian_to_sacred(anchor, date.today())
    meta = {
        "year_length": core.year_length(),
        "month_lengths": core.month_lengths(),
        "tekufah_months": sorted(core.TEKUFAH_MONTHS),
    }
    return {
        "SACRED_CALENDAR_META": meta,
        "SACRED_CALENDAR_MONTH_LENGTHS_JSON": json.dumps(meta["month_lengths"]),
        "SACRED_TODAY": today,
    }
