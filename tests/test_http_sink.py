from __future__ import annotations

import io

import pytest
import requests
from requests.adapters import HTTPAdapter

from cli_metrics.http_client import build_http_client
from cli_metrics.sinks import USAGE_ENDPOINT, HttpSink


class StubResponse:
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        self.closed = False

    def close(self) -> None:
        self.closed = True


class StubClient:
    def __init__(self, status_code: int = 200, error: Exception | None = None) -> None:
        self.status_code = status_code
        self.error = error
        self.posts: list[tuple[str, bytes, dict]] = []
        self.responses: list[StubResponse] = []

    def post(self, url, data=None, **kwargs):
        self.posts.append((url, data, kwargs.get("headers", {})))
        if self.error:
            raise self.error
        response = StubResponse(self.status_code)
        self.responses.append(response)
        return response


class RecordingAdapter(HTTPAdapter):
    """Transport adapter that answers every request with a fixed status."""

    def __init__(self, status_code: int = 200, error: Exception | None = None) -> None:
        super().__init__(max_retries=0)
        self.status_code = status_code
        self.error = error
        self.requests: list[requests.PreparedRequest] = []
        self.timeouts: list[object] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.timeouts.append(kwargs.get("timeout"))
        if self.error:
            raise self.error
        response = requests.Response()
        response.status_code = self.status_code
        response.request = request
        response.url = request.url
        response.raw = io.BytesIO(b"{}")
        return response


def _session_with(adapter: RecordingAdapter) -> requests.Session:
    session = build_http_client(timeout_seconds=1.5)
    session.mount("http://", adapter)
    return session


@pytest.mark.parametrize("status_code", [200, 204, 404, 500])
def test_http_sink_posts_once_and_closes_response(status_code: int) -> None:
    client = StubClient(status_code=status_code)

    HttpSink(client).report({"command": "up", "status": "success"})

    assert client.posts == [
        (USAGE_ENDPOINT, b'{"command":"up","status":"success"}', {"Content-Type": "application/json"})
    ]
    assert client.responses[0].closed is True


def test_http_sink_swallows_transport_errors() -> None:
    client = StubClient(error=requests.ConnectionError("connection refused"))

    HttpSink(client).report({"command": "up"})

    assert len(client.posts) == 1


def test_http_sink_sends_nothing_for_unencodable_record() -> None:
    client = StubClient()
    record: dict = {"command": "up"}
    record["self"] = record

    HttpSink(client).report(record)

    assert client.posts == []


def test_http_sink_tolerates_response_without_close() -> None:
    class BareClient:
        def post(self, url, data=None, **kwargs):
            return None

    HttpSink(BareClient()).report({"command": "up"})


def test_http_sink_over_requests_session_ignores_server_error() -> None:
    adapter = RecordingAdapter(status_code=500)

    HttpSink(_session_with(adapter)).report({"command": "up", "status": "success"})

    assert len(adapter.requests) == 1
    request = adapter.requests[0]
    assert request.method == "POST"
    assert request.url == USAGE_ENDPOINT
    assert request.headers["Content-Type"] == "application/json"
    assert request.body == b'{"command":"up","status":"success"}'
    assert adapter.timeouts == [1.5]


def test_http_sink_over_requests_session_ignores_connection_refused() -> None:
    adapter = RecordingAdapter(error=requests.ConnectionError("refused"))

    HttpSink(_session_with(adapter)).report({"command": "up"})

    assert len(adapter.requests) == 1


def test_http_sink_posts_nothing_for_unencodable_records(unencodable_record) -> None:
    client = StubClient()

    HttpSink(client).report(unencodable_record)

    assert client.posts == []
