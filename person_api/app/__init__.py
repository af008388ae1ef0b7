"""
Application package initializer.

The backend is split into small pieces: ``core`` holds settings,
logging and the in‑memory store, ``schemas`` the pydantic payloads,
``services`` the validation and store orchestration, and ``api`` the
routers.  The backend does not know anything about the frontend; the
client wrapper and console view live outside this package.
"""

from .main import app  # noqa: F401
