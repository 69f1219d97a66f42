"""Month grid for the date picker.

The grid starts on Sunday: the month is preceded by as many blank slots as
the weekday of its first day (Sunday = 0), then one cell per day.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


@dataclass
class DayCell:
    day: int
    iso_date: str
    is_today: bool = False
    is_selected: bool = False


@dataclass
class MonthGrid:
    year: int
    month: int
    month_name: str
    leading_blanks: int
    days: List[DayCell] = field(default_factory=list)
    previous_month: Tuple[int, int] = None
    next_month: Tuple[int, int] = None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st with Sunday = 0."""
    return (calendar.weekday(year, month, 1) + 1) % 7


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months from (year, month), rolling the year over."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def format_day(year: int, month: int, day: int) -> str:
    """Selected day as ``YYYY-MM-DD``."""
    return date(year, month, day).isoformat()


def parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


def month_grid(year: int, month: int, selected: Optional[date] = None, today: Optional[date] = None) -> MonthGrid:
    """
    Build the grid shown for one month.

    Args:
        year: Year being viewed
        month: Month being viewed (1-12)
        selected: Currently selected date, highlighted when inside the month
        today: Reference date for the today highlight (defaults to date.today())

    Returns:
        MonthGrid with blanks, day cells and the neighbouring months
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    today = today or date.today()

    days = []
    for d in range(1, days_in_month(year, month) + 1):
        current = date(year, month, d)
        days.append(
            DayCell(
                day=d,
                iso_date=current.isoformat(),
                is_today=current == today,
                is_selected=selected is not None and current == selected,
            )
        )

    return MonthGrid(
        year=year,
        month=month,
        month_name=MONTH_NAMES[month - 1],
        leading_blanks=first_weekday(year, month),
        days=days,
        previous_month=shift_month(year, month, -1),
        next_month=shift_month(year, month, 1),
    )
