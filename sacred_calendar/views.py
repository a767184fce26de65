"""Views for the sacred calendar."""

import json
import logging

from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from . import anchors, core
from .data import TEKUFAH_DETAILS, sacred_month_name
from .forms import AnchorForm
from .grid import month_cells
from .ics import build_ics
from .search import search
from .utils import as_calendar_date, format_sacred_date
from .validators import validate_anchor_date

logger = logging.getLogger(__name__)


def _bad_request(message: str) -> JsonResponse:
    return JsonResponse({"error": message}, status=400)


def _error_text(exc: ValidationError) -> str:
    return "; ".join(exc.messages)


def _request_anchor(request):
    """Anchor for this request: ``?anchor=`` override or the resolved one."""

    raw = request.GET.get("anchor")
    anchor = as_calendar_date(raw) if raw else anchors.resolve_anchor(request)
    validate_anchor_date(anchor)
    return anchor


@require_POST
def set_anchor(request):
    """Store the Month 1 Day 1 anchor in the session."""
    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body.decode("utf-8") or "{}")
        except ValueError:
            return _bad_request("invalid JSON")
        if not isinstance(payload, dict):
            return _bad_request("invalid JSON")
    else:
        payload = request.POST
    form = AnchorForm(payload)
    if not form.is_valid():
        logger.warning("Rejected anchor %r", payload.get("anchor"))
        return _bad_request("; ".join(form.errors["anchor"]))
    anchor = form.cleaned_data["anchor"]
    anchors.set_session_anchor(request, anchor)
    return JsonResponse({"ok": True, "anchor": anchor.isoformat()})


@require_GET
def year_meta(request) -> JsonResponse:
    """Return calendar metadata for the current anchor."""

    try:
        anchor = _request_anchor(request)
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    months = []
    for m in range(1, core.MONTHS + 1):
        months.append(
            {
                "month": m,
                "name": sacred_month_name(m),
                "length": core.month_length(m),
                "tekufah": TEKUFAH_DETAILS.get(m),
                "starts": core.sacred_to_gregorian(anchor, m, 1).isoformat(),
            }
        )
    data = {
        "anchor": anchor.isoformat(),
        "year_length": core.year_length(),
        "month_lengths": core.month_lengths(),
        "tekufah_months": sorted(core.TEKUFAH_MONTHS),
        "months": months,
    }
    return JsonResponse(data)


@require_GET
def to_gregorian(request) -> JsonResponse:
    try:
        anchor = _request_anchor(request)
        month = int(request.GET.get("month", ""))
        day = int(request.GET.get("day", ""))
    except ValueError:
        return _bad_request("month and day must be integers")
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    try:
        gregorian = core.sacred_to_gregorian(anchor, month, day, strict=True)
    except core.InvalidSacredDate as exc:
        logger.warning("Rejected sacred date %s-%s: %s", month, day, exc)
        return _bad_request(str(exc))
    return JsonResponse(
        {
            "anchor": anchor.isoformat(),
            "month": month,
            "day": day,
            "gregorian": gregorian.isoformat(),
        }
    )


@require_GET
def to_sacred(request) -> JsonResponse:
    try:
        anchor = _request_anchor(request)
        target = as_calendar_date(request.GET.get("date"))
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    if target is None:
        return _bad_request("missing date")
    sacred = core.gregorian_to_sacred(anchor, target)
    position = core.locate(anchor, target)
    return JsonResponse(
        {
            "anchor": anchor.isoformat(),
            "date": target.isoformat(),
            "sacred": None
            if sacred is None
            else {"month": sacred.month, "day": sacred.day, "label": format_sacred_date(sacred)},
            "cycle": position._asdict(),
        }
    )


@require_GET
def month_grid(request, month: int) -> JsonResponse:
    if not 1 <= month <= core.MONTHS:
        raise Http404("Unknown month")
    try:
        anchor = _request_anchor(request)
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    cells = [cell.as_dict() for cell in month_cells(anchor, month)]
    return JsonResponse(
        {
            "anchor": anchor.isoformat(),
            "month": month,
            "name": sacred_month_name(month),
            "days": cells,
        }
    )


@require_GET
def export_ics(request) -> HttpResponse:
    try:
        anchor = _request_anchor(request)
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    body = build_ics(anchor)
    if not body:
        raise Http404("Calendar export is disabled")
    response = HttpResponse(body, content_type="text/calendar; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="yahuah-calendar-{anchor.year}.ics"'
    return response


@require_GET
def search_view(request) -> JsonResponse:
    q = (request.GET.get("q") or "").strip()
    try:
        anchor = _request_anchor(request)
    except ValidationError as exc:
        return _bad_request(_error_text(exc))
    return JsonResponse({"q": q, "results": search(anchor, q)})
