"""
Tests for the PlacesAPI client with a mocked requests session.
"""

from unittest.mock import Mock

import pytest
import requests

from places_api_client import PlacesAPI


def make_response(status_code: int, json_body=None, text: str = "") -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if json_body is not None:
        response.content = b"json"
        response.json.return_value = json_body
    else:
        response.content = text.encode()
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session: Mock) -> PlacesAPI:
    return PlacesAPI(base_url="http://places.test/", session=session)


class TestPlacesAPI:

    def test_list_places_sends_filter(self, api: PlacesAPI, session: Mock):
        session.request.return_value = make_response(200, [{"id": 1, "name": "Alpha House"}])

        places, error = api.list_places(name="alpha")

        assert error is None
        assert places == [{"id": 1, "name": "Alpha House"}]
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://places.test/places"
        assert kwargs["params"] == {"name": "alpha"}

    def test_list_places_without_filter(self, api: PlacesAPI, session: Mock):
        session.request.return_value = make_response(200, [])

        places, error = api.list_places()

        assert (places, error) == ([], None)
        assert session.request.call_args.kwargs["params"] is None

    def test_create_place_posts_json(self, api: PlacesAPI, session: Mock):
        payload = {"name": "Park", "address": "1 Main St", "description": ""}
        session.request.return_value = make_response(201, {"id": 7, **payload})

        place, error = api.create_place(payload)

        assert error is None
        assert place["id"] == 7
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == payload

    def test_plain_text_error_is_returned_as_message(self, api: PlacesAPI, session: Mock):
        session.request.return_value = make_response(400, text="name is required")

        place, error = api.create_place({"address": "1 Main St"})

        assert place is None
        assert error == {"status_code": 400, "message": "name is required"}

    def test_get_place_not_found(self, api: PlacesAPI, session: Mock):
        session.request.return_value = make_response(400, text="ID not found")

        place, error = api.get_place(99)

        assert place is None
        assert error["message"] == "ID not found"
        assert session.request.call_args.kwargs["url"] == "http://places.test/places/99"

    def test_update_and_delete_return_success_flags(self, api: PlacesAPI, session: Mock):
        session.request.return_value = make_response(204)

        assert api.update_place(3, {"name": "A", "address": "B"}) == (True, None)
        assert session.request.call_args.kwargs["method"] == "PUT"
        assert api.delete_place(3) == (True, None)
        assert session.request.call_args.kwargs["method"] == "DELETE"

    def test_connection_error(self, api: PlacesAPI, session: Mock):
        session.request.side_effect = requests.ConnectionError("refused")

        ok, error = api.delete_place(1)

        assert ok is False
        assert error == {"status_code": None, "message": "refused"}

    def test_api_key_is_sent_as_bearer(self, session: Mock):
        session.request.return_value = make_response(200, [])
        api = PlacesAPI(base_url="http://places.test", api_key="secret", session=session)

        api.list_places()

        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer secret"}
