from __future__ import annotations

from unittest import mock

import pytest
import requests

from person_client import INVALID_ID_MESSAGE, APIResponse, PersonAPI


@pytest.fixture
def offline_api() -> PersonAPI:
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("Connection refused")
    return PersonAPI(base_url="http://localhost:1/api", session=session)


@pytest.mark.parametrize("person_id", [0, 3, "0", "12"])
def test_validate_id_accepts_integers(person_id) -> None:
    valid, _ = PersonAPI.validate_id(person_id)
    assert valid


@pytest.mark.parametrize("person_id", ["", "abc", None, 1.5, True, " 3", "٣"])
def test_validate_id_rejects_other_values(person_id) -> None:
    valid, on_invalid = PersonAPI.validate_id(person_id)

    assert not valid
    assert on_invalid == APIResponse(success=False, message=INVALID_ID_MESSAGE)


def test_invalid_id_never_hits_the_network() -> None:
    session = mock.Mock(spec=requests.Session)
    api = PersonAPI(session=session)

    for response in (api.read_person(""), api.update_person({"firstName": "A"}, "x"), api.delete_person(None)):
        assert response.success is False
        assert response.message == INVALID_ID_MESSAGE

    session.request.assert_not_called()


def test_base_url_trailing_slash_is_stripped() -> None:
    api = PersonAPI(base_url="http://example.com/api/", session=mock.Mock(spec=requests.Session))
    assert api.base_url == "http://example.com/api"


def test_ping(api: PersonAPI) -> None:
    assert api.ping() == APIResponse(success=True, message="Ping successful.")


def test_create_person(api: PersonAPI) -> None:
    response = api.create_person({"firstName": "Ada", "lastName": "Lovelace"})

    assert response.success is True
    assert response.message == "Successfully created person, id: 0"
    assert response.data == {"id": 0, "firstName": "Ada", "lastName": "Lovelace"}


def test_create_person_failure_embeds_server_text(api: PersonAPI) -> None:
    response = api.create_person({"firstName": "Ada"})

    assert response == APIResponse(
        success=False,
        message="Failed to create person: A person must have a last name!",
    )


def test_read_update_delete_messages(api: PersonAPI) -> None:
    api.create_person({"firstName": "Ada", "lastName": "Lovelace"})

    read = api.read_person(0)
    assert read.message == "Successfully read person with id 0."
    assert read.data["lastName"] == "Lovelace"

    updated = api.update_person({"lastName": "King"}, "0")
    assert updated.message == "Successfully updated person with id 0."
    assert updated.data == {"id": 0, "firstName": "Ada", "lastName": "King"}

    deleted = api.delete_person(0)
    assert deleted == APIResponse(success=True, message="Successfully deleted person with id 0")

    missing = api.read_person(0)
    assert missing == APIResponse(
        success=False,
        message="Failed to read person with id 0: No person found in database",
    )


def test_update_and_delete_failures(api: PersonAPI) -> None:
    assert api.update_person({"firstName": "Grace"}, 4).message == (
        "Failed to update person with id 4: No person found in database"
    )
    assert api.delete_person(4).message == (
        "Failed to delete person with id 4: No person found in database"
    )


def test_read_people_messages(api: PersonAPI) -> None:
    empty = api.read_people()
    assert empty == APIResponse(success=True, message="No people yet", data=[])

    api.create_person({"firstName": "Ada", "lastName": "Lovelace"})
    api.create_person({"firstName": "Alan", "lastName": "Turing"})

    people = api.read_people()
    assert people.success is True
    assert people.message == "Read 2 people"
    assert {p["id"] for p in people.data} == {0, 1}


def test_transport_failures_become_envelopes(offline_api: PersonAPI) -> None:
    responses = {
        "ping": offline_api.ping(),
        "create": offline_api.create_person({"firstName": "Ada", "lastName": "Lovelace"}),
        "read": offline_api.read_person(1),
        "update": offline_api.update_person({"lastName": "King"}, 1),
        "delete": offline_api.delete_person(1),
        "all": offline_api.read_people(),
    }

    assert all(r.success is False for r in responses.values())
    assert all("Connection refused" in r.message for r in responses.values())
    assert responses["ping"].message.startswith("Failed to ping backend: ")
    assert responses["all"].message.startswith("Failed to read people: ")


def test_requests_use_timeout_and_json_body() -> None:
    session = mock.Mock(spec=requests.Session)
    session.request.return_value = mock.Mock(status_code=200, content=b"", text="")
    api = PersonAPI(base_url="http://localhost:3001/api", session=session, timeout=2)

    api.update_person({"firstName": "Grace"}, 7)

    session.request.assert_called_once_with(
        "PATCH",
        "http://localhost:3001/api/person/update/7",
        json={"firstName": "Grace"},
        timeout=2,
    )


def test_fork_uses_a_separate_session() -> None:
    session = mock.Mock(spec=requests.Session)
    api = PersonAPI(base_url="http://localhost:3001/api", session=session, timeout=3)

    forked = api.fork()

    assert forked.session is not session
    assert isinstance(forked.session, requests.Session)
    assert (forked.base_url, forked.timeout) == (api.base_url, api.timeout)
