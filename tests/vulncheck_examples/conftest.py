"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json
import logging
import os

import httpx
import pytest
from typer.testing import CliRunner

PACKAGE_LOGGER = "vulncheck_examples"
BASE_URL = "https://api.vulncheck.com/v3"


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def api_env(monkeypatch):
    """
    Pins the API configuration to known values for every test and removes any
    settings inherited from the developer's shell or .env file.
    """
    for name in list(os.environ):
        if name.upper().startswith("VULNCHECK_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("VULNCHECK_API_TOKEN", "test-token-123456")
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI installs a stream handler and disables propagation; undo that after each test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Responses are matched on method and URL without the query string; the full
    requests are recorded in ``add_response.requests`` so tests can check params
    and headers.
    """
    responses = {}
    requests_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json_payload: dict | list | None = None,
        content: bytes | None = None,
        text: str | None = None,
    ):
        """Register a mock response for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
            content_type = "application/json"
        elif text is not None:
            body = text.encode("utf-8")
            content_type = "text/plain; charset=utf-8"
        else:
            body = content if content is not None else b""
            content_type = "application/octet-stream"
        responses[(method.upper(), url)] = (status_code, body, content_type)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        requests_log.append(request)
        key = (request.method, str(request.url.copy_with(query=None)))
        if key in responses:
            status, body, content_type = responses[key]
            headers = {"Content-Length": str(len(body)), "Content-Type": content_type}
            return httpx.Response(status, content=body, headers=headers)

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.requests = requests_log  # type: ignore[attr-defined]
    return add_response
