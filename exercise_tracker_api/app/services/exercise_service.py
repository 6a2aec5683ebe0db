"""
Business logic for exercise entries.

``ExerciseService.add_exercise`` appends an entry to a user and shapes
the response according to the configured mode; ``get_log`` filters a
user's entries by date and truncates them to ``limit``.  Neither method
reorders entries: the log is always in the order exercises were added.
"""

import datetime
import logging
from typing import Callable, List, Union

from ..core.config import EXERCISE_RESPONSE_ENTRY, EXERCISE_RESPONSE_MODES, EXERCISE_RESPONSE_USER
from ..core.store import InMemoryStore
from ..models import Exercise, format_date
from ..schemas.exercise import ExerciseAdded, ExerciseCreate, ExerciseLog, ExerciseRead, LogQuery
from ..schemas.user import UserWithExercises
from .user_service import UserService

logger = logging.getLogger(__name__)


def filter_exercises(exercises: List[Exercise], query: LogQuery) -> List[Exercise]:
    """Apply the inclusive ``from``/``to`` bounds, then ``limit``."""
    selected = list(exercises)
    if query.from_ is not None:
        selected = [exercise for exercise in selected if exercise.date >= query.from_]
    if query.to is not None:
        selected = [exercise for exercise in selected if exercise.date <= query.to]
    if query.limit is not None:
        selected = selected[: query.limit]
    return selected


class ExerciseService:
    """Log exercises and build exercise logs.

    Parameters
    ----------
    store : InMemoryStore
        Store holding the users.
    response_mode : str
        ``"entry"`` to echo the new entry with the user's identity,
        ``"user"`` to return the complete user record.
    today : Callable[[], datetime.date]
        Source of the default date for entries submitted without one.
    """

    def __init__(
        self,
        store: InMemoryStore,
        response_mode: str = EXERCISE_RESPONSE_ENTRY,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> None:
        if response_mode not in EXERCISE_RESPONSE_MODES:
            raise ValueError(f"Unknown exercise response mode {response_mode!r}")
        self.store = store
        self.users = UserService(store)
        self.response_mode = response_mode
        self.today = today

    async def add_exercise(
        self, user_id: str, data: ExerciseCreate
    ) -> Union[ExerciseAdded, UserWithExercises]:
        user = await self.users.get_user(user_id)
        exercise = Exercise(
            description=data.description,
            duration=data.duration,
            date=data.date if data.date is not None else self.today(),
        )
        self.store.add_exercise(user, exercise)
        logger.info(
            "Added exercise %r (%s) on %s to user %s",
            exercise.description,
            exercise.duration,
            exercise.date.isoformat(),
            user.id,
        )

        if self.response_mode == EXERCISE_RESPONSE_USER:
            return UserWithExercises.from_user(user)
        return ExerciseAdded(
            username=user.username,
            id=user.id,
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )

    async def get_log(self, user_id: str, query: LogQuery) -> ExerciseLog:
        user = await self.users.get_user(user_id)
        selected = filter_exercises(user.exercises, query)
        return ExerciseLog(
            username=user.username,
            count=len(selected),
            id=user.id,
            log=[ExerciseRead.from_exercise(exercise) for exercise in selected],
        )
