"""
Person endpoints.

These routes expose the CRUD API for people.  Successful responses
carry JSON; every failure is a plain‑text message with status 400
(malformed input) or 404 (no such person).  Ids arrive as raw path
segments and are parsed by :func:`parse_id` so that a non‑numeric id
is reported with the same message on every route.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from person_api.app.core.db import PersonStore, get_store
from person_api.app.schemas.person import Person
from person_api.app.services.person_service import (
    CREATE_FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    PersonService,
    parse_id,
    validate_create,
    validate_update,
)

router = APIRouter()


def get_service(store: PersonStore = Depends(get_store)) -> PersonService:
    return PersonService(store)


def valid_id(person_id: str) -> int:
    """Dependency parsing the ``person_id`` path parameter."""
    parsed = parse_id(person_id)
    if not parsed.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=parsed.rejection.value)
    return parsed.value


@router.post("/create", response_model=Person)
async def create_person(
    payload: Any = Body(None),
    service: PersonService = Depends(get_service),
) -> Person:
    """Create a person and return it together with its new id."""
    checked = validate_create(payload)
    if not checked.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=checked.rejection.value)
    person = await service.create_person(checked.value)
    if person is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=CREATE_FAILED_MESSAGE)
    return person


@router.get("/{person_id}", response_model=Person)
async def get_person(
    person_id: int = Depends(valid_id),
    service: PersonService = Depends(get_service),
) -> Person:
    """Retrieve a single person by id."""
    person = await service.get_person(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return person


@router.patch("/update/{person_id}", response_model=Person)
async def update_person(
    person_id: int = Depends(valid_id),
    payload: Any = Body(None),
    service: PersonService = Depends(get_service),
) -> Person:
    """Merge the provided fields into an existing person."""
    checked = validate_update(payload)
    if not checked.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=checked.rejection.value)
    person = await service.update_person(person_id, checked.value)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return person


@router.delete("/delete/{person_id}")
async def delete_person(
    person_id: int = Depends(valid_id),
    service: PersonService = Depends(get_service),
) -> Response:
    """Delete a person.  Answers with an empty 200 response."""
    deleted = await service.delete_person(person_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return Response(status_code=status.HTTP_200_OK)


@router.get("", response_model=List[Person])
async def list_people(service: PersonService = Depends(get_service)) -> List[Person]:
    """Return every stored person.  An empty list is a valid answer."""
    return await service.list_people()
