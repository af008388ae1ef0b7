"""Person CRUD API client.

This module defines a small client wrapper around the person REST API.
Every method returns an :class:`APIResponse` envelope instead of
raising: HTTP errors and transport failures (connection refused,
timeouts, ...) are caught here and turned into ``success=False``
responses whose ``message`` embeds the server's text or the exception
text.  This keeps the calling view free of error handling.

The client exposes one method per operation:

* :meth:`PersonAPI.ping` – check that the backend is reachable.
* :meth:`PersonAPI.create_person` – create a person.
* :meth:`PersonAPI.read_person` – fetch a single person by id.
* :meth:`PersonAPI.update_person` – merge new values into a person.
* :meth:`PersonAPI.delete_person` – delete a person.
* :meth:`PersonAPI.read_people` – fetch every person.

Methods taking an id validate it before sending anything; an invalid
id yields a failure envelope without a network round trip.

The base URL defaults to ``http://localhost:<PORT>/api`` where ``PORT``
is the same environment variable the backend reads.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

PORT = os.getenv("PORT", "3001")
API_URL = f"http://localhost:{PORT}/api"

INVALID_ID_MESSAGE = "Please provide a valid id."

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class APIResponse:
    """Envelope returned by every client call.

    Attributes:
        success: Whether the API call was successful.
        message: A message to display to the user for more information.
        data: Optional data returned by the API call.
    """

    success: bool
    message: str
    data: Any = None


class PersonAPI:
    """Client for the person endpoints of the backend."""

    def __init__(
        self,
        *,
        base_url: str = API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fork(self) -> "PersonAPI":
        """Return a client for the same backend with its own session.

        ``requests.Session`` is not thread safe, so code calling the API
        from another thread needs its own client.
        """
        return PersonAPI(base_url=self.base_url, timeout=self.timeout)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def validate_id(person_id: Any) -> Tuple[bool, APIResponse]:
        """Check whether ``person_id`` can be sent to the backend.

        Returns a tuple ``(valid, on_invalid)`` where ``on_invalid`` is
        the envelope to hand back to the caller when ``valid`` is false.
        """
        on_invalid = APIResponse(success=False, message=INVALID_ID_MESSAGE)
        if isinstance(person_id, bool):
            return False, on_invalid
        if isinstance(person_id, int):
            return True, on_invalid
        if isinstance(person_id, str) and _ID_PATTERN.fullmatch(person_id):
            return True, on_invalid
        return False, on_invalid

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[str]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/person``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  On success ``data`` holds the
            parsed JSON body (``None`` for empty bodies) and ``error`` is
            ``None``.  On failure ``data`` is ``None`` and ``error`` is the
            text to show the user.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method,
                url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, str(exc)

        if response.status_code >= 400:
            message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, message
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            return response.text, None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def ping(self) -> APIResponse:
        """Ping the backend to check whether it is running."""
        _, error = self._request("GET", "/ping")
        if error is not None:
            return APIResponse(success=False, message=f"Failed to ping backend: {error}")
        return APIResponse(success=True, message="Ping successful.")

    def create_person(self, person: Dict[str, Any]) -> APIResponse:
        """Create a person from ``{"firstName": ..., "lastName": ...}``."""
        data, error = self._request("POST", "/person/create", json_body=person)
        if error is not None:
            return APIResponse(success=False, message=f"Failed to create person: {error}")
        return APIResponse(
            success=True,
            message=f"Successfully created person, id: {data['id']}",
            data=data,
        )

    def read_person(self, person_id: Any) -> APIResponse:
        """Read a person by id."""
        valid, on_invalid = self.validate_id(person_id)
        if not valid:
            return on_invalid

        data, error = self._request("GET", f"/person/{person_id}")
        if error is not None:
            return APIResponse(
                success=False,
                message=f"Failed to read person with id {person_id}: {error}",
            )
        return APIResponse(
            success=True,
            message=f"Successfully read person with id {person_id}.",
            data=data,
        )

    def update_person(self, person: Dict[str, Any], person_id: Any) -> APIResponse:
        """Send partial data for the person with ``person_id``."""
        valid, on_invalid = self.validate_id(person_id)
        if not valid:
            return on_invalid

        data, error = self._request("PATCH", f"/person/update/{person_id}", json_body=person)
        if error is not None:
            return APIResponse(
                success=False,
                message=f"Failed to update person with id {person_id}: {error}",
            )
        return APIResponse(
            success=True,
            message=f"Successfully updated person with id {person_id}.",
            data=data,
        )

    def delete_person(self, person_id: Any) -> APIResponse:
        """Delete the person with ``person_id``."""
        valid, on_invalid = self.validate_id(person_id)
        if not valid:
            return on_invalid

        _, error = self._request("DELETE", f"/person/delete/{person_id}")
        if error is not None:
            return APIResponse(
                success=False,
                message=f"Failed to delete person with id {person_id}: {error}",
            )
        return APIResponse(success=True, message=f"Successfully deleted person with id {person_id}")

    def read_people(self) -> APIResponse:
        """Read every person and report how many there are."""
        data, error = self._request("GET", "/person")
        if error is not None:
            return APIResponse(success=False, message=f"Failed to read people: {error}")
        people = data or []
        message = f"Read {len(people)} people" if people else "No people yet"
        return APIResponse(success=True, message=message, data=people)
