"""Tests for the WSGI bridge"""

import pytest

from werkzeug.test import Client

from registry_http import (
    Application,
    FallbackRouter,
    Head,
    Mount,
    RouteBuilder,
    handler,
    internal_error,
)
from registry_http.exceptions import HumanError


@handler
def list_crates(request):
    page = request.pagination(10, 50)
    return request.json_response(
        {"krates": [{"krate": "serde"}], "meta": {"offset": page.offset}}
    )


@handler
def download(request):
    return request.redirect(f"https://static.crates.io/{request.params['crate_id']}")


@handler
def broken(request):
    raise internal_error("failed to reach the index", "--- stderr\nfatal: no remote\n")


@handler
def unrendered(request):
    raise HumanError("nobody rendered me")


@pytest.fixture
def client():
    api = RouteBuilder()
    api.get("/crates", list_crates)
    api.get("/crates/:crate_id/download", download)
    api.get("/broken", broken)
    api.get("/unrendered", unrendered)

    routes = RouteBuilder().get("/api/v1/*path", Mount(FallbackRouter(api)))

    return Client(Application(Head(FallbackRouter(routes))))


class TestApplication:
    def test_json_through_mount(self, client):
        response = client.get("/api/v1/crates?page=2")

        assert response.status_code == 200
        assert response.json == {
            "krates": [{"crate": "serde"}],
            "meta": {"offset": 10},
        }

    def test_human_error_response(self, client):
        response = client.get("/api/v1/crates?per_page=51")

        assert response.status_code == 200
        assert response.json == {
            "errors": [{"detail": "cannot request more than 50 items"}]
        }

    def test_redirect(self, client):
        response = client.get("/api/v1/crates/serde/download")

        assert response.status_code == 302
        assert response.headers["Location"] == "https://static.crates.io/serde"

    def test_not_found(self, client):
        assert client.get("/api/v2/crates").status_code == 404
        assert client.get("/api/v1/nothing-here").status_code == 404

    def test_head(self, client):
        response = client.head("/api/v1/crates")

        assert response.status_code == 200
        assert response.get_data() == b""

    def test_internal_error_is_a_generic_500(self, client, mocker):
        logger = mocker.patch("registry_http.app.logger")

        response = client.get("/api/v1/broken")

        assert response.status_code == 500
        assert b"fatal: no remote" not in response.get_data()
        assert b"failed to reach the index" not in response.get_data()
        assert "fatal: no remote" in logger.error.call_args[0][0]

    def test_unrendered_human_error_is_a_generic_500(self, client):
        response = client.get("/api/v1/unrendered")

        assert response.status_code == 500
        assert b"nobody rendered me" not in response.get_data()
