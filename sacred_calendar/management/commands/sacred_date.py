"""Convert between Gregorian and sacred calendar dates."""

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from sacred_calendar import core
from sacred_calendar.utils import as_calendar_date, default_anchor, format_sacred_date
from sacred_calendar.validators import validate_anchor_date


class Command(BaseCommand):
    help = "Convert a Gregorian date to a sacred date, or a sacred month/day to Gregorian"

    def add_arguments(self, parser):
        parser.add_argument("--anchor", help="Month 1 Day 1 as YYYY-MM-DD (default: this year)")
        parser.add_argument("--date", help="Gregorian date to convert")
        parser.add_argument("--month", type=int)
        parser.add_argument("--day", type=int)

    def handle(self, *args, **options):
        try:
            anchor = as_calendar_date(options["anchor"]) or default_anchor()
            validate_anchor_date(anchor)
            target = as_calendar_date(options["date"])
        except ValidationError as exc:
            raise CommandError("; ".join(exc.messages)) from exc

        if target is not None:
            sacred = core.gregorian_to_sacred(anchor, target)
            if sacred is None:
                position = core.locate(anchor, target)
                self.stdout.write(
                    f"{target.isoformat()}: out of cycle "
                    f"(cycle {position.cycle}, Month {position.month}, Day {position.day})"
                )
            else:
                self.stdout.write(f"{target.isoformat()}: {format_sacred_date(sacred)}")
            return

        month, day = options["month"], options["day"]
        if month is None or day is None:
            raise CommandError("Pass --date, or both --month and --day")
        try:
            gregorian = core.sacred_to_gregorian(anchor, month, day, strict=True)
        except core.InvalidSacredDate as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(f"Month {month}, Day {day}: {gregorian.isoformat()}")
