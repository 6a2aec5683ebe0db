"""
Dependencies shared by the endpoint modules.

The store and settings are read from ``app.state`` so that every
application built by ``create_app`` works on its own data.  Request
bodies may be sent either as HTML form data or as a JSON object;
``read_payload`` turns both into a plain dict and ``validate_payload``
runs it through a schema, converting pydantic errors into the API's
400 :class:`ValidationError`.
"""

import json
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Depends, Query, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.config import Settings
from ..core.errors import ValidationError
from ..core.store import InMemoryStore
from ..schemas.exercise import LogQuery
from ..services.exercise_service import ExerciseService
from ..services.user_service import UserService

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_user_service(store: InMemoryStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_exercise_service(
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> ExerciseService:
    return ExerciseService(store, response_mode=settings.exercise_response)


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict, whether it was sent as JSON or a form."""
    if _is_json(request.headers.get("content-type", "")):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise ValidationError("Malformed JSON body")
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    form = await request.form()
    return {key: value for key, value in form.items()}


def describe_errors(exc: PydanticValidationError) -> str:
    """Build a single human readable message from pydantic errors.

    Missing fields are reported together (``"description and duration
    are required"``); otherwise the first error is reported.
    """
    errors = exc.errors()
    missing = [str(err["loc"][0]) for err in errors if err["type"] == "missing" and err["loc"]]
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        return f"{' and '.join(missing)} {verb} required"

    first = errors[0]
    message = first["msg"]
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {message}" if location else message


def validate_payload(schema: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(describe_errors(exc))


def get_log_query(
    from_: Optional[str] = Query(None, alias="from", description="Earliest date to include (YYYY-MM-DD)"),
    to: Optional[str] = Query(None, description="Latest date to include (YYYY-MM-DD)"),
    limit: Optional[str] = Query(None, description="Maximum number of entries to return"),
) -> LogQuery:
    return validate_payload(LogQuery, {"from": from_, "to": to, "limit": limit})
