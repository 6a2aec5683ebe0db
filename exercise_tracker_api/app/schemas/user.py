"""
Pydantic models for user data.

``UserCreate`` validates the body of ``POST /api/users``.  ``UserRead``
is the projection used by the user listing, ``UserCreated`` the
response to a successful registration and ``UserWithExercises`` the
full record including every logged exercise.
"""

from typing import List

from pydantic import BaseModel, Field

from . import FormModel
from .exercise import ExerciseRead
from ..models import User


class UserCreate(FormModel):
    """Schema for creating a user.

    ``username`` is stored exactly as submitted: it is neither trimmed
    nor required to be unique.
    """

    username: str = Field(..., examples=["fcc_test"])


class UserRead(BaseModel):
    """Schema for a user in the listing."""

    username: str
    id: str

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(username=user.username, id=user.id)


class UserCreated(UserRead):
    # Always empty: a newly created user has not logged anything yet.
    exercises: List[ExerciseRead] = Field(default_factory=list)


class UserWithExercises(UserRead):
    exercises: List[ExerciseRead]

    @classmethod
    def from_user(cls, user: User) -> "UserWithExercises":
        return cls(
            username=user.username,
            id=user.id,
            exercises=[ExerciseRead.from_exercise(exercise) for exercise in user.exercises],
        )
