"""Clock adapter using the system's local date."""

from datetime import date

from ...ports.dates import ClockPort


class SystemClockAdapter(ClockPort):
    def today(self) -> date:
        return date.today()
