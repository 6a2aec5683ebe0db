"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, errors and the in‑memory
store), ``schemas`` (request and response models), ``services``
(business logic) and ``api`` (routers and request dependencies).
"""

from .main import app, create_app  # noqa: F401
