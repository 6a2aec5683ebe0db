"""
Service layer abstraction.

Each service encapsulates the business logic for one concern and works
on the :class:`~exercise_tracker_api.app.core.store.InMemoryStore`
handed to it, so handlers stay thin and tests can drive services
against a fresh store.
"""
