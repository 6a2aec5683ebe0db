"""
API package containing the routes mounted under ``/api``.

``router.py`` aggregates the domain routers from ``endpoints`` and
``deps.py`` holds the dependencies they share: access to the store and
services, and parsing of form or JSON request bodies into schemas.
"""
