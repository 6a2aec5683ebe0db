"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration.  ``run.py`` loads a ``.env``
file (if present) before this module is imported, so values placed
there behave exactly like real environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List

from exercise_tracker_api import PACKAGE_DIR

# Shapes accepted for ``EXERCISE_RESPONSE``.
EXERCISE_RESPONSE_ENTRY = "entry"
EXERCISE_RESPONSE_USER = "user"
EXERCISE_RESPONSE_MODES = (EXERCISE_RESPONSE_ENTRY, EXERCISE_RESPONSE_USER)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any
    # origin, which mirrors how the public demo is usually deployed.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    # What ``POST /api/users/{id}/exercises`` returns: ``entry`` echoes
    # the user's identity with the new entry, ``user`` returns the whole
    # user record including every exercise.
    exercise_response: str = os.getenv("EXERCISE_RESPONSE", EXERCISE_RESPONSE_ENTRY)

    static_dir: str = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "public"))
    views_dir: str = os.getenv("VIEWS_DIR", str(PACKAGE_DIR / "views"))

    def __post_init__(self) -> None:
        self.exercise_response = self.exercise_response.strip().lower()
        if self.exercise_response not in EXERCISE_RESPONSE_MODES:
            raise ValueError(
                f"EXERCISE_RESPONSE must be one of {', '.join(EXERCISE_RESPONSE_MODES)}, "
                f"got {self.exercise_response!r}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
