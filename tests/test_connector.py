"""
Tests for the Forkify HTTP connector using a mocked requests session.

These tests verify:
- URLs, query parameters, JSON bodies and timeouts sent for each call
- Failure statuses map onto NotFoundError / NetworkError with the API message
- Transport errors and non-JSON bodies become NetworkError
"""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from forkify.connectors.forkify_connector import ForkifyConnector
from forkify.errors import ConfigError, NetworkError, NotFoundError

API_URL = "https://forkify.test/api/v2/recipes/"


def _response(status_code=200, payload=None, json_error=False):
    response = Mock()
    response.status_code = status_code
    response.reason = "Bad Request"
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def connector(session):
    return ForkifyConnector(api_url=API_URL, key="secret", timeout_sec=5, session=session)


class TestForkifyConnectorRequests:
    """Test what the connector sends."""

    def test_get_recipe(self, connector, session):
        session.request.return_value = _response(payload={"data": {"recipe": {"id": "abc"}}})

        data = connector.get_recipe("abc")

        session.request.assert_called_once_with(
            "GET", f"{API_URL}abc", params=None, json=None, timeout=5
        )
        assert data["data"]["recipe"]["id"] == "abc"

    def test_search_recipes(self, connector, session):
        session.request.return_value = _response(payload={"data": {"recipes": []}})

        connector.search_recipes("pizza")

        session.request.assert_called_once_with(
            "GET", API_URL, params={"search": "pizza"}, json=None, timeout=5
        )

    def test_upload_recipe_sends_key_and_body(self, connector, session):
        session.request.return_value = _response(status_code=201, payload={"data": {"recipe": {}}})
        body = {"title": "TEST", "ingredients": []}

        connector.upload_recipe(body)

        session.request.assert_called_once_with(
            "POST", API_URL, params={"key": "secret"}, json=body, timeout=5
        )

    @patch.dict(os.environ, {}, clear=True)
    def test_upload_recipe_without_key(self, session):
        """Test that uploading with no configured key raises ConfigError before any request."""
        connector = ForkifyConnector(api_url=API_URL, timeout_sec=5, session=session)

        with pytest.raises(ConfigError, match="FORKIFY_KEY is not set"):
            connector.upload_recipe({"title": "TEST"})
        session.request.assert_not_called()

    @patch.dict(os.environ, {"FORKIFY_API_URL": "https://env.test/recipes", "FORKIFY_TIMEOUT_SEC": "3"})
    def test_defaults_from_environment(self):
        connector = ForkifyConnector()
        assert connector.api_url == "https://env.test/recipes/"
        assert connector.timeout_sec == 3

    @patch("forkify.connectors.forkify_connector.requests.request")
    def test_without_session_uses_requests(self, mock_request):
        """Test that the module-level requests API is used when no session is given."""
        mock_request.return_value = _response(payload={"data": {"recipes": []}})
        connector = ForkifyConnector(api_url=API_URL, timeout_sec=5)

        connector.search_recipes("pasta")

        mock_request.assert_called_once_with(
            "GET", API_URL, params={"search": "pasta"}, json=None, timeout=5
        )


class TestForkifyConnectorErrors:
    """Test how failures are reported."""

    def test_not_found(self, connector, session):
        session.request.return_value = _response(
            status_code=404,
            payload={"status": "fail", "message": "Invalid _id: abc"},
        )

        with pytest.raises(NotFoundError) as excinfo:
            connector.get_recipe("abc")

        assert str(excinfo.value) == "Invalid _id: abc (404)"
        assert excinfo.value.status_code == 404

    def test_failure_status(self, connector, session):
        session.request.return_value = _response(
            status_code=400,
            payload={"status": "fail", "message": "Invalid key"},
        )

        with pytest.raises(NetworkError) as excinfo:
            connector.upload_recipe({"title": "TEST"})

        assert not isinstance(excinfo.value, NotFoundError)
        assert str(excinfo.value) == "Invalid key (400)"
        assert excinfo.value.status_code == 400

    def test_failure_status_without_message(self, connector, session):
        session.request.return_value = _response(status_code=400, payload=[])

        with pytest.raises(NetworkError, match=r"Bad Request \(400\)"):
            connector.search_recipes("pizza")

    def test_timeout(self, connector, session):
        session.request.side_effect = requests.exceptions.Timeout()

        with pytest.raises(NetworkError, match="Timeout after 5 seconds"):
            connector.get_recipe("abc")

    def test_connection_error(self, connector, session):
        session.request.side_effect = requests.exceptions.ConnectionError("DNS failure")

        with pytest.raises(NetworkError, match="Could not connect"):
            connector.get_recipe("abc")

    def test_non_json_body(self, connector, session):
        session.request.return_value = _response(status_code=502, json_error=True)

        with pytest.raises(NetworkError) as excinfo:
            connector.get_recipe("abc")

        assert excinfo.value.status_code == 502
