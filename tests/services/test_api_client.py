# -*- coding: utf-8 -*-
"""
Tests for the property API client.

requests.request is patched; no network access.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from services.api_client import ApiConfig, PropertyApiClient
from services.exceptions import ApiException, NetworkException


def _response(status_code=200, body=None, text=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = text if text is not None else ("" if body is None else "x")
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def client():
    return PropertyApiClient(ApiConfig(base_url="http://api.test/api/", timeout=5,
                                       verify_ssl=True, access_token="tok"))


class TestRequests:

    def test_create_container_unwraps_envelope(self, client):
        body = {"success": True, "data": {"container": {"id": 7}}}
        with patch("services.api_client.requests.request", return_value=_response(201, body)) as req:
            result = client.create_container({"title": "Pensión"})

        assert result == {"container": {"id": 7}}
        kwargs = req.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://api.test/api/containers"
        assert kwargs["json"] == {"title": "Pensión"}
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["timeout"] == 5

    def test_update_container(self, client):
        with patch("services.api_client.requests.request",
                   return_value=_response(200, {"success": True, "data": {"id": 42}})) as req:
            client.update_container("42", {"title": "x"})

        assert req.call_args.kwargs["method"] == "PUT"
        assert req.call_args.kwargs["url"].endswith("/containers/42")

    def test_admin_create_adds_owner(self, client):
        payload = {"title": "x"}
        with patch("services.api_client.requests.request",
                   return_value=_response(201, {"success": True, "data": {"id": 1}})) as req:
            client.admin_create_container(payload, 99)

        assert req.call_args.kwargs["json"] == {"title": "x", "targetOwnerId": 99}
        assert payload == {"title": "x"}

    def test_no_token_no_authorization_header(self):
        client = PropertyApiClient(ApiConfig(base_url="http://api.test", access_token=""))
        assert "Authorization" not in client._headers()

    def test_plain_body_without_envelope(self, client):
        with patch("services.api_client.requests.request",
                   return_value=_response(200, [{"id": 1, "name": "WiFi"}])):
            assert client.list_amenities() == [{"id": 1, "name": "WiFi"}]

    def test_empty_body(self, client):
        with patch("services.api_client.requests.request", return_value=_response(204, None, text="")):
            assert client.list_cities() == []

    def test_cities_come_from_location_directory(self, client):
        body = {"success": True, "data": [{"id": 5, "name": "Bogotá", "departmentId": 11}]}
        with patch("services.api_client.requests.request", return_value=_response(200, body)) as req:
            assert client.list_cities()[0]["id"] == 5

        assert req.call_args.kwargs["method"] == "GET"
        assert req.call_args.kwargs["url"] == "http://api.test/api/locations/cities"


class TestErrors:

    def test_http_error_carries_server_message(self, client):
        body = {"success": False, "error": "Ya existe una propiedad con ese título"}
        with patch("services.api_client.requests.request", return_value=_response(409, body)):
            with pytest.raises(ApiException) as info:
                client.create_container({})

        assert info.value.status_code == 409
        assert info.value.message == "Ya existe una propiedad con ese título"

    def test_unsuccessful_envelope_raises(self, client):
        body = {"success": False, "message": "Datos inválidos"}
        with patch("services.api_client.requests.request", return_value=_response(200, body)):
            with pytest.raises(ApiException) as info:
                client.create_container({})
        assert info.value.server_message == "Datos inválidos"

    def test_connection_error(self, client):
        with patch("services.api_client.requests.request",
                   side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(NetworkException):
                client.get_container("1")

    def test_timeout(self, client):
        with patch("services.api_client.requests.request",
                   side_effect=requests.exceptions.Timeout("timed out")):
            with pytest.raises(NetworkException) as info:
                client.get_container("1")
        assert isinstance(info.value.original_error, requests.exceptions.Timeout)
