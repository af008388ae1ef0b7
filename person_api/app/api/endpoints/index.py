"""
Index and liveness endpoints.

``GET /api/`` answers with a short banner so a browser pointed at the
backend shows something useful.  ``GET /api/ping`` is polled by the
frontend every second to display whether the backend is up and how
long a round trip takes.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse

router = APIRouter()

BANNER = (
    "This is the backend part of the template. "
    "The Backend does not know anything about the frontend."
)


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    """Return the backend banner."""
    return BANNER


@router.get("/ping", status_code=status.HTTP_200_OK)
async def ping() -> Response:
    """Return an empty 200 response."""
    return Response(status_code=status.HTTP_200_OK)
