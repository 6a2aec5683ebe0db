"""
Pydantic schema definitions for API payloads.

Input schemas describe exactly which fields each endpoint accepts and
how they are coerced; response schemas fix the JSON shape returned to
clients.  Schemas are kept separate from the store's dataclasses so the
wire format can change without touching the domain records.
"""

from typing import Any

from pydantic import BaseModel, model_validator


class FormModel(BaseModel):
    """Base for input schemas fed from forms, JSON bodies or query strings.

    HTML forms submit empty strings for untouched inputs and query
    parameters may be present without a value, so blank values are
    dropped before validation and count as missing.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, values: Any) -> Any:
        if isinstance(values, dict):
            return {
                key: value
                for key, value in values.items()
                if value is not None and not (isinstance(value, str) and value == "")
            }
        return values
