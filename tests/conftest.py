"""Shared test fixtures for the PlantUML UI."""

from typing import List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from plantuml_ui.api.main import create_app
from plantuml_ui.api.models.config import APIConfig
from plantuml_ui.core import PlantUMLClient


SERVER_ADDR = "http://plantuml.test/plantuml"
DIAGRAM_ID = "SyfFKj2rKt3CoKnELR1Io4ZDoSa70000"

SYNTAX_ERROR_BODY = (
    "[From string (line 5) ]\n"
    "\n"
    "@startuml\n"
    "Bob -> Alice : hello\n"
    "Alice -> Bob\n"
    " Syntax error: expected '@enduml'"
)


class FakePlantUMLServer:
    """Answers the rendering protocol the way a PlantUML server does."""

    def __init__(
        self,
        txt_status: int = 200,
        txt_body: bytes = b"     ,---.          ,-----.\n     |Bob|          |Alice|\n",
        image_status: int = 200,
        image_body: bytes = b"\x89PNG\r\n\x1a\nfake-png",
        form_status: int = 200,
        unreachable: Optional[str] = None,
    ):
        self.txt_status = txt_status
        self.txt_body = txt_body
        self.image_status = image_status
        self.image_body = image_body
        self.form_status = form_status
        self.unreachable = unreachable
        self.requests: List[httpx.Request] = []

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if self.unreachable and self.unreachable in path:
            raise httpx.ConnectError("Connection refused", request=request)

        if request.method == "POST" and path == "/plantuml/form":
            return httpx.Response(302, headers={"Location": f"{SERVER_ADDR}/uml/{DIAGRAM_ID}"})
        if path == f"/plantuml/uml/{DIAGRAM_ID}":
            return httpx.Response(self.form_status, text="<html>PlantUML Server</html>")
        if path == f"/plantuml/txt/{DIAGRAM_ID}":
            return httpx.Response(self.txt_status, content=self.txt_body)
        if path in (f"/plantuml/png/{DIAGRAM_ID}", f"/plantuml/svg/{DIAGRAM_ID}"):
            return httpx.Response(self.image_status, content=self.image_body)
        return httpx.Response(404)


@pytest.fixture
def fake_server():
    return FakePlantUMLServer()


@pytest.fixture
def make_client():
    """Build a PlantUMLClient talking to the given fake server."""
    def _make(server: FakePlantUMLServer) -> PlantUMLClient:
        return PlantUMLClient(SERVER_ADDR, transport=httpx.MockTransport(server.handler))
    return _make


@pytest.fixture
def plantuml_client(fake_server, make_client):
    return make_client(fake_server)


@pytest.fixture
def api_config():
    return APIConfig(plantuml_server_addr=SERVER_ADDR)


@pytest.fixture
def make_api(api_config, make_client):
    """Build a TestClient for an app rendering on the given fake server."""
    def _make(server: FakePlantUMLServer) -> TestClient:
        return TestClient(create_app(api_config, make_client(server)))
    return _make


@pytest.fixture
def api(fake_server, make_api):
    return make_api(fake_server)
