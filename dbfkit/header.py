"""Date of last update as stored in a dBase table header."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

YEAR_OFFSET = 1900
MIN_YEAR = YEAR_OFFSET
MAX_YEAR = YEAR_OFFSET + 0xFF


def low_def_time(when: _dt.date) -> _dt.date:
    """Reduce a date or datetime to the whole-day precision the header can hold."""
    if isinstance(when, _dt.datetime):
        return when.date()
    return _dt.date(when.year, when.month, when.day)


@dataclass(frozen=True)
class UpdateDate:
    """The header's YY MM DD byte trio.

    ``years_since_1900`` holds the year minus 1900, so years 1900 to 2155
    can be stored. Only whole days are kept; no time of day or timezone.
    """

    years_since_1900: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for label, value in (
            ("years_since_1900", self.years_since_1900),
            ("month", self.month),
            ("day", self.day),
        ):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{label} must fit in one byte, got {value}")

    @property
    def year(self) -> int:
        """The calendar year the stored byte stands for."""
        return self.years_since_1900 + YEAR_OFFSET

    @classmethod
    def from_date(cls, when: _dt.date) -> UpdateDate:
        """Encode a date or datetime, dropping any time of day."""
        if not MIN_YEAR <= when.year <= MAX_YEAR:
            raise ValueError(
                f"year {when.year} is outside the supported range "
                f"{MIN_YEAR}-{MAX_YEAR}"
            )
        return cls(when.year - YEAR_OFFSET, when.month, when.day)

    @classmethod
    def from_bytes(cls, data: bytes) -> UpdateDate:
        """Read the trio from the first three bytes of ``data``."""
        raw = bytes(data)
        if len(raw) < 3:
            raise ValueError(
                f"date of last update needs 3 bytes, got {len(raw)}"
            )
        return cls(raw[0], raw[1], raw[2])

    @classmethod
    def today(cls) -> UpdateDate:
        """Encode today's local date."""
        return cls.from_date(_dt.date.today())

    def to_date(self) -> _dt.date:
        """Interpret the trio as a date.

        Out-of-range months and days roll over into neighbouring months and
        years, so month 0 is December of the year before and day 0 is the
        last day of the previous month.
        """
        year = self.year + (self.month - 1) // 12
        month = (self.month - 1) % 12 + 1
        first = _dt.date(year, month, 1)
        return first + _dt.timedelta(days=self.day - 1)

    def to_bytes(self) -> bytes:
        """Return the three header bytes."""
        return bytes((self.years_since_1900, self.month, self.day))