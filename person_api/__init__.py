"""
Top‑level package for the Person CRUD API.

This file makes ``person_api`` a package so that modules within
``app`` can be imported using fully qualified names like
``person_api.app.main``.  All functionality lives in submodules under
``app``.
"""

__all__ = []
