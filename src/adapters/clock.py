from datetime import date, datetime


class SystemClock:
    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single instant, for reproducible age calculations."""

    def __init__(self, instant: datetime | date) -> None:
        self._instant = instant

    def today(self) -> date:
        if isinstance(self._instant, datetime):
            return self._instant.date()
        return self._instant
