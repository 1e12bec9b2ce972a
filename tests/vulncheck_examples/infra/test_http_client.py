from __future__ import annotations

import json
import httpx
import pytest

from vulncheck_examples.core.errors import ApiError
from vulncheck_examples.infra.http_client import HttpClient


def _response(status_code: int, obj: object = None, text: str | None = None) -> httpx.Response:
    req = httpx.Request("GET", "http://test/v3/x")
    if text is not None:
        return httpx.Response(status_code, request=req, content=text.encode("utf-8"), headers={"Content-Type": "text/plain"})
    content = json.dumps(obj).encode("utf-8")
    return httpx.Response(status_code, request=req, content=content, headers={"Content-Type": "application/json"})


class _StubClient(httpx.Client):
    def __init__(self, get_resp: httpx.Response) -> None:
        super().__init__(timeout=0.1)
        self._get_resp = get_resp
        self.calls: list[tuple[str, dict]] = []

    def get(self, url: str, params=None):
        self.calls.append((url, params))
        return self._get_resp


def test_http_client_get_json_ok_dict():
    hc = HttpClient()
    hc._client = _StubClient(_response(200, {"a": 1}))
    data = hc.get_json("http://x")
    assert data == {"a": 1}


def test_http_client_get_json_passes_params():
    hc = HttpClient()
    stub = _StubClient(_response(200, {}))
    hc._client = stub
    hc.get_json("http://x", {"cve": "CVE-2023-27350"})
    assert stub.calls == [("http://x", {"cve": "CVE-2023-27350"})]


def test_http_client_get_json_non_object_raises_typeerror():
    hc = HttpClient()
    hc._client = _StubClient(_response(200, [1, 2, 3]))
    with pytest.raises(TypeError):
        hc.get_json("http://x")


def test_http_client_non_200_raises_api_error():
    hc = HttpClient()
    hc._client = _StubClient(_response(401, {"error": True, "errors": ["invalid token"]}))
    with pytest.raises(ApiError) as excinfo:
        hc.get_json("http://x")
    assert excinfo.value.status_code == 401
    assert "invalid token" in excinfo.value.body
    assert "HTTP 401" in str(excinfo.value)


def test_http_client_other_2xx_is_still_an_error():
    """Only 200 counts as success."""
    hc = HttpClient()
    hc._client = _StubClient(_response(204, {}))
    with pytest.raises(ApiError):
        hc.get_json("http://x")


def test_http_client_get_text_returns_body():
    hc = HttpClient()
    hc._client = _StubClient(_response(200, text="evil.example\nbad.example\n"))
    assert hc.get_text("http://x") == "evil.example\nbad.example\n"


def test_http_client_sends_base_headers():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    hc = HttpClient(base_headers={"Authorization": "Bearer abc"})
    hc._client = httpx.Client(transport=httpx.MockTransport(handler), headers=hc._client.headers)
    assert hc.get_json("http://x/v3/index") == {"ok": True}
    assert seen[0].headers["Authorization"] == "Bearer abc"


def test_http_client_follows_redirects():
    hc = HttpClient()
    assert hc._client.follow_redirects is True


def test_http_client_uses_timeout():
    hc = HttpClient(timeout_seconds=3.5)
    assert hc._client.timeout.read == 3.5
