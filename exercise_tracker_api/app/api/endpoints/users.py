"""
User and exercise endpoints.

Create and list users, log an exercise for a user and read back a
user's exercise log.  Request bodies may be HTML form data or JSON.
Errors are raised as :class:`~exercise_tracker_api.app.core.errors.ApiError`
subclasses and rendered as ``{"error": message}`` by the handlers
registered in ``create_app``.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Request

from exercise_tracker_api.app.api.deps import (
    get_exercise_service,
    get_log_query,
    get_user_service,
    read_payload,
    validate_payload,
)
from exercise_tracker_api.app.schemas.exercise import ExerciseAdded, ExerciseCreate, ExerciseLog, LogQuery
from exercise_tracker_api.app.schemas.user import UserCreate, UserCreated, UserRead, UserWithExercises
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserCreated)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserCreated:
    """Create a user from a ``username`` field.

    Returns the new user with its generated ``id`` and an empty
    ``exercises`` list.  A missing or empty ``username`` yields 400.
    """
    data = validate_payload(UserCreate, await read_payload(request))
    return await service.create_user(data)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """List every user as ``{username, id}`` in creation order."""
    return await service.list_users()


@router.post("/{user_id}/exercises", response_model=Union[ExerciseAdded, UserWithExercises])
async def add_exercise(
    user_id: str,
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
) -> Union[ExerciseAdded, UserWithExercises]:
    """Log an exercise for a user.

    ``description`` and ``duration`` are required, ``date`` defaults to
    today.  Depending on ``EXERCISE_RESPONSE`` the response is either
    the new entry with the user's ``username`` and ``id`` or the whole
    user record.  Returns 400 for invalid input and 404 for an unknown
    user.
    """
    data = validate_payload(ExerciseCreate, await read_payload(request))
    return await service.add_exercise(user_id, data)


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    query: LogQuery = Depends(get_log_query),
    service: ExerciseService = Depends(get_exercise_service),
) -> ExerciseLog:
    """Return a user's exercise log, optionally filtered by ``from``, ``to`` and ``limit``."""
    return await service.get_log(user_id, query)
