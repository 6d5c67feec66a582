import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from rapidocui.common.enums import Theme
from rapidocui.hosting.fastapi import StarletteRequestContext, use_rapidoc
from rapidocui.protocols import RequestContext
from rapidocui.settings.rapidoc import RapiDocSettings


@pytest.fixture
def settings() -> RapiDocSettings:
    settings = RapiDocSettings(document_path="/openapi.json")
    settings.theme = Theme.LIGHT
    return settings


@pytest.fixture
def client(settings: RapiDocSettings) -> TestClient:
    app = FastAPI()
    use_rapidoc(app, settings)
    return TestClient(app)


def test_serves_rendered_page(client: TestClient) -> None:
    response = client.get("/swagger")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '"theme":"light"' in response.text
    assert 'spec-url="/openapi.json"' in response.text


def test_page_not_in_openapi_schema(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()
    assert "/swagger" not in schema.get("paths", {})


def test_invalid_enum_returns_error_page(client: TestClient, settings: RapiDocSettings) -> None:
    settings.additional_settings["render-style"] = "bogus"
    response = client.get("/swagger")
    assert response.status_code == 500
    assert "API documentation unavailable" in response.text
    assert "render-style" in response.text


def test_settings_changes_apply_to_next_request(
    client: TestClient, settings: RapiDocSettings
) -> None:
    settings.heading_text = "Updated"
    assert '"heading-text":"Updated"' in client.get("/swagger").text


def test_use_rapidoc_defaults() -> None:
    app = FastAPI()
    settings = use_rapidoc(app)
    assert settings.path == "/swagger"
    assert TestClient(app).get("/swagger").status_code == 200


def test_request_context_uses_root_path() -> None:
    request = Request({"type": "http", "root_path": "/api/", "headers": []})
    context = StarletteRequestContext(request)
    assert context.base_path == "/api"
    assert isinstance(context, RequestContext)


def test_request_context_without_root_path() -> None:
    request = Request({"type": "http", "headers": []})
    assert StarletteRequestContext(request).base_path == ""
