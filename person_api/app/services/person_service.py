"""
Service layer for people.

This module turns raw request input into validated schemas and
delegates to :class:`~person_api.app.core.db.PersonStore`.  Validation
functions never raise: they return a :class:`Validation` holding
either the parsed value or a :class:`Rejection` whose value is the
message reported to the client.  The API layer maps rejections to
HTTP 400 and store misses to HTTP 404.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from person_api.app.core.db import PersonStore
from person_api.app.schemas.person import Person, PersonCreate, PersonUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")

NOT_FOUND_MESSAGE = "No person found in database"
CREATE_FAILED_MESSAGE = "Could not create person in the database!"

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class Rejection(str, Enum):
    """Reasons a request is rejected before reaching the store."""

    MISSING_PERSON = "Please provide a person to create!"
    MISSING_FIRST_NAME = "A person must have a first name!"
    MISSING_LAST_NAME = "A person must have a last name!"
    MALFORMED_PERSON = "Person names must be text!"
    NO_VALUES = "Please provide values to update!"
    INVALID_ID = "Please provide a valid id!"


@dataclass(frozen=True)
class Validation(Generic[T]):
    """Outcome of a validation function: a value or a rejection."""

    value: Optional[T] = None
    rejection: Optional[Rejection] = None

    @property
    def valid(self) -> bool:
        return self.rejection is None

    @classmethod
    def accept(cls, value: T) -> "Validation[T]":
        return cls(value=value)

    @classmethod
    def reject(cls, rejection: Rejection) -> "Validation[T]":
        return cls(rejection=rejection)


def parse_id(raw: Any) -> Validation[int]:
    """Parse a path parameter into an integer id."""
    if isinstance(raw, bool):
        return Validation.reject(Rejection.INVALID_ID)
    if isinstance(raw, int):
        return Validation.accept(raw)
    if isinstance(raw, str) and _ID_PATTERN.fullmatch(raw.strip()):
        return Validation.accept(int(raw.strip()))
    return Validation.reject(Rejection.INVALID_ID)


def validate_create(payload: Any) -> Validation[PersonCreate]:
    """Check that ``payload`` describes a person with both names."""
    if not payload or not isinstance(payload, dict):
        return Validation.reject(Rejection.MISSING_PERSON)
    try:
        person = PersonCreate.model_validate(payload)
    except ValidationError:
        return Validation.reject(Rejection.MALFORMED_PERSON)
    if not person.first_name:
        return Validation.reject(Rejection.MISSING_FIRST_NAME)
    if not person.last_name:
        return Validation.reject(Rejection.MISSING_LAST_NAME)
    return Validation.accept(person)


def validate_update(payload: Any) -> Validation[PersonUpdate]:
    """Check that ``payload`` carries at least one non‑blank field."""
    if not payload or not isinstance(payload, dict):
        return Validation.reject(Rejection.NO_VALUES)
    try:
        partial = PersonUpdate.model_validate(payload)
    except ValidationError:
        return Validation.reject(Rejection.MALFORMED_PERSON)
    if not partial.changes():
        return Validation.reject(Rejection.NO_VALUES)
    return Validation.accept(partial)


class PersonService:
    """Thin orchestration over a :class:`PersonStore`."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    async def create_person(self, person: PersonCreate) -> Optional[Person]:
        """Store ``person`` and return it with its new id.

        Returns ``None`` if the store refused the record.
        """
        person_id = self.store.create(person)
        if person_id is None:
            logger.warning("Store rejected person %s", person.model_dump(by_alias=True))
            return None
        return self.store.read(person_id)

    async def get_person(self, person_id: int) -> Optional[Person]:
        return self.store.read(person_id)

    async def update_person(self, person_id: int, partial: PersonUpdate) -> Optional[Person]:
        return self.store.update(partial, person_id)

    async def delete_person(self, person_id: int) -> bool:
        return self.store.delete(person_id)

    async def list_people(self) -> List[Person]:
        return self.store.read_all()
