"""
In‑memory storage for people.

DISCLAIMER: this is a mock database that keeps all people in a
dictionary for the lifetime of the process.  It exists to demonstrate
how the backend is wired together; a real application would use a
real database.

The store is a plain object rather than process‑wide state.  The
application factory creates one per application and attaches it to
``app.state.store``; route handlers receive it through the
:func:`get_store` dependency.  Tests build applications over fresh
stores.

All operations are synchronous and no locking is performed.  Misses
are signalled by ``None`` (or ``False`` for deletes) rather than by
exceptions.
"""

import logging
from typing import Dict, List, Optional

from fastapi import Request

from ..schemas.person import Person, PersonCreate, PersonUpdate

logger = logging.getLogger(__name__)


class PersonStore:
    """Keyed collection of people plus a monotonic id counter."""

    def __init__(self) -> None:
        self._people: Dict[int, Person] = {}
        # The next id to hand out.  Ids are never reused, even after
        # the person holding one has been deleted.
        self._current_id = 0

    def __len__(self) -> int:
        return len(self._people)

    def __contains__(self, person_id: object) -> bool:
        return person_id in self._people

    def create(self, person: PersonCreate) -> Optional[int]:
        """Insert a new person and return the generated id.

        Returns ``None`` without inserting anything if either name is
        missing or empty.
        """
        logger.info("Creating person in db... %s", person.model_dump(by_alias=True))
        if not person.first_name or not person.last_name:
            return None

        person_id = self._current_id
        self._current_id += 1
        self._people[person_id] = Person(
            id=person_id,
            first_name=person.first_name,
            last_name=person.last_name,
        )
        return person_id

    def read(self, person_id: int) -> Optional[Person]:
        """Return the person with ``person_id`` or ``None``."""
        logger.info("Reading person with id %s from db...", person_id)
        return self._people.get(person_id)

    def update(self, partial: PersonUpdate, person_id: int) -> Optional[Person]:
        """Merge ``partial`` over the stored person and return the result.

        Only non‑blank fields of ``partial`` are applied and the id is
        never changed.  Returns ``None`` if no person has ``person_id``.
        """
        logger.info(
            "Updating person with id %s in db... %s",
            person_id,
            partial.model_dump(by_alias=True, exclude_unset=True),
        )
        current = self._people.get(person_id)
        if current is None:
            return None

        updated = current.model_copy(update={**partial.changes(), "id": person_id})
        self._people[person_id] = updated
        return updated

    def delete(self, person_id: int) -> bool:
        """Remove a person.  Returns ``True`` if a record was removed."""
        logger.info("Deleting person with id %s from db...", person_id)
        return self._people.pop(person_id, None) is not None

    def read_all(self) -> List[Person]:
        """Return a snapshot of every stored person."""
        logger.info("Reading all people from db...")
        return list(self._people.values())


def get_store(request: Request) -> PersonStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.store
