"""Domain records held by the in-memory store."""

import datetime
from dataclasses import dataclass, field
from typing import List, Union

Number = Union[int, float]

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Formats accepted wherever a date comes in from a client.
INPUT_DATE_FORMATS = ("%Y-%m-%d", "%a %b %d %Y")


def format_date(value: datetime.date) -> str:
    """Render ``value`` as ``Www Mmm DD YYYY``, e.g. ``Mon Jan 02 2023``.

    Built from fixed English abbreviations so the output does not
    depend on the process locale.
    """
    return f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"


def parse_date(value: str) -> datetime.date:
    """Parse an ISO ``YYYY-MM-DD`` or ``Www Mmm DD YYYY`` string.

    Raises ``ValueError`` when neither format matches.
    """
    text = value.strip()
    for fmt in INPUT_DATE_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")


@dataclass
class Exercise:
    """One logged activity.  Owned by exactly one :class:`User`."""

    description: str
    duration: Number
    date: datetime.date


@dataclass
class User:
    id: str
    username: str
    exercises: List[Exercise] = field(default_factory=list)
