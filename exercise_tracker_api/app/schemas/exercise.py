"""
Pydantic schemas for exercise entries and logs.

``ExerciseCreate`` accepts the fields of ``POST
/api/users/{id}/exercises``; ``LogQuery`` the query string of ``GET
/api/users/{id}/logs``.  Dates arrive as ``YYYY-MM-DD`` (or the
``Mon Jan 02 2023`` form the API itself emits) and are rendered back in
the latter form.
"""

import datetime
import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from . import FormModel
from ..models import Exercise, format_date, parse_date


def _coerce_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_date(value)
    return value


class ExerciseCreate(FormModel):
    """Schema for logging an exercise."""

    description: str = Field(..., examples=["running"])
    duration: Union[int, float] = Field(..., description="Duration in minutes", examples=[30])
    date: Optional[datetime.date] = Field(
        None, description="Defaults to the current date when omitted", examples=["2023-01-15"]
    )

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()

    @field_validator("duration")
    @classmethod
    def finite_duration(cls, value: Union[int, float]) -> Union[int, float]:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("duration must be a finite number")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_entry_date(cls, value: Any) -> Any:
        return _coerce_date(value)


class LogQuery(FormModel):
    """Filters for an exercise log.

    ``from`` and ``to`` are inclusive bounds; ``limit`` keeps the first
    entries in insertion order after the date filters are applied.
    """

    from_: Optional[datetime.date] = Field(None, alias="from")
    to: Optional[datetime.date] = None
    limit: Optional[int] = Field(None, ge=1)

    model_config = {"populate_by_name": True}

    @field_validator("from_", "to", mode="before")
    @classmethod
    def parse_bound(cls, value: Any) -> Any:
        return _coerce_date(value)


class ExerciseRead(BaseModel):
    description: str
    duration: Union[int, float]
    date: str

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseRead":
        return cls(
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )


class ExerciseAdded(BaseModel):
    """The owning user's identity together with the entry just added."""

    username: str
    id: str
    description: str
    duration: Union[int, float]
    date: str


class ExerciseLog(BaseModel):
    username: str
    count: int
    id: str
    log: List[ExerciseRead]
