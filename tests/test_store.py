from __future__ import annotations

from person_api.app.core.db import PersonStore
from person_api.app.schemas.person import Person, PersonCreate, PersonUpdate


def test_create_assigns_increasing_ids_starting_at_zero(store: PersonStore, ada: PersonCreate) -> None:
    first = store.create(ada)
    second = store.create(PersonCreate(first_name="Alan", last_name="Turing"))

    assert first == 0
    assert second == 1
    assert len(store) == 2


def test_create_without_a_name_does_not_insert(store: PersonStore) -> None:
    assert store.create(PersonCreate(first_name="Ada")) is None
    assert store.create(PersonCreate(last_name="Lovelace")) is None
    assert store.create(PersonCreate(first_name="", last_name="Lovelace")) is None

    assert len(store) == 0
    # A rejected create must not consume an id.
    assert store.create(PersonCreate(first_name="Ada", last_name="Lovelace")) == 0


def test_ids_are_never_reused_after_delete(store: PersonStore, ada: PersonCreate) -> None:
    person_id = store.create(ada)
    assert store.delete(person_id) is True

    assert store.create(ada) == person_id + 1


def test_read_returns_created_data_with_id(store: PersonStore, ada: PersonCreate) -> None:
    person_id = store.create(ada)

    assert store.read(person_id) == Person(id=person_id, first_name="Ada", last_name="Lovelace")
    assert store.read(person_id + 1) is None


def test_update_merges_only_provided_fields(store: PersonStore, ada: PersonCreate) -> None:
    person_id = store.create(ada)

    updated = store.update(PersonUpdate(last_name="King"), person_id)

    assert updated == Person(id=person_id, first_name="Ada", last_name="King")
    assert store.read(person_id) == updated


def test_update_ignores_blank_fields(store: PersonStore, ada: PersonCreate) -> None:
    person_id = store.create(ada)

    updated = store.update(PersonUpdate(first_name="", last_name="Byron"), person_id)

    assert updated.first_name == "Ada"
    assert updated.last_name == "Byron"


def test_update_missing_person_is_a_no_op(store: PersonStore, ada: PersonCreate) -> None:
    person_id = store.create(ada)

    assert store.update(PersonUpdate(first_name="Grace"), person_id + 5) is None
    assert store.read_all() == [Person(id=person_id, first_name="Ada", last_name="Lovelace")]
    assert (person_id + 5) not in store


def test_delete_twice_reports_missing(store: PersonStore, ada: PersonCreate) -> None:
    keep = store.create(ada)
    drop = store.create(PersonCreate(first_name="Alan", last_name="Turing"))

    assert store.delete(drop) is True
    assert store.delete(drop) is False
    assert keep in store
    assert len(store) == 1


def test_read_all_returns_a_snapshot(store: PersonStore, ada: PersonCreate) -> None:
    assert store.read_all() == []

    store.create(ada)
    store.create(PersonCreate(first_name="Alan", last_name="Turing"))
    snapshot = store.read_all()
    snapshot.clear()

    people = sorted(store.read_all(), key=lambda p: p.id)
    assert [(p.id, p.first_name) for p in people] == [(0, "Ada"), (1, "Alan")]
