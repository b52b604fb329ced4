"""Fixtures for HTTP tests: a falcon app serving $metadata."""

import falcon
import falcon.asgi
import httpx
import pytest

from tests.conftest import METADATA_XML

SERVICE_URL = "http://odata.test/ODataDemo.svc"


class MetadataResource:
    """Serves a fixed metadata document and counts requests."""

    def __init__(self, body: bytes) -> None:
        self._body = body
        self.accept_headers: list[str | None] = []

    async def on_get(self, req, resp):
        self.accept_headers.append(req.get_header("Accept"))
        resp.content_type = "application/xml"
        resp.data = self._body


class BrokenResource:
    """Always answers 503."""

    async def on_get(self, req, resp):
        raise falcon.HTTPServiceUnavailable(title="maintenance")


@pytest.fixture
def metadata_resource() -> MetadataResource:
    return MetadataResource(METADATA_XML)


@pytest.fixture
def transport(metadata_resource: MetadataResource) -> httpx.ASGITransport:
    """ASGI transport routing httpx requests into the falcon app."""
    app = falcon.asgi.App()
    app.add_route("/ODataDemo.svc/metadata", metadata_resource)
    app.add_route("/Broken.svc/metadata", BrokenResource())
    return httpx.ASGITransport(app=app)
