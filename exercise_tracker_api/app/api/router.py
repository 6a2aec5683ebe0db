"""
Top‑level API router.

Mounted by ``create_app`` under the ``/api`` prefix.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

# Exercise routes hang off a user (``/users/{id}/exercises``), so they
# live in the users router as well.
router.include_router(users.router, prefix="/users", tags=["users"])
