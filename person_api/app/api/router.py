"""
Top‑level API router.

Aggregates the domain routers.  The application factory mounts this
router under ``/api``; when new domains are introduced, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import index, person

router = APIRouter()

router.include_router(index.router, tags=["index"])
router.include_router(person.router, prefix="/person", tags=["person"])
