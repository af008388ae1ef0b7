"""
Pydantic schemas for people.

A person has an integer ``id`` assigned by the store and two name
fields.  On the wire the names are camelCase (``firstName`` and
``lastName``); in Python they are ``first_name`` and ``last_name``.
Both spellings are accepted when parsing request bodies.

``PersonCreate`` and ``PersonUpdate`` keep the names optional at the
schema level: presence is checked by the validation functions in
:mod:`person_api.app.services.person_service` so that each missing
field can be reported with its own message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Ada"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Lovelace"])


class PersonCreate(PersonBase):
    """Schema for creating a person.  Both names are required by the service."""


class PersonUpdate(PersonBase):
    """Schema for updating a person.

    All fields are optional; only provided, non‑blank values are merged
    into the stored record.
    """

    def changes(self) -> dict:
        """Return the fields to merge, keyed by attribute name."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if isinstance(value, str) and value.strip()
        }


class Person(BaseModel):
    """A stored person as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    def to_json(self) -> dict:
        """Return the camelCase representation used on the wire."""
        return self.model_dump(by_alias=True)
