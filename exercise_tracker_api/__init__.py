"""
Top‑level package for the Exercise Tracker API.

This file makes ``exercise_tracker_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``exercise_tracker_api.app.main``.  The static assets served
under ``/public`` and the landing page template live next to it in
``public/`` and ``views/``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

__all__ = ["PACKAGE_DIR"]
