# tests/application/test_requests_client.py
import socket
import threading
import time

import pytest
import requests

from application.ports.http_client import HttpTimeoutError, HttpTransportError
from application.ports.requests_client import RequestsSessionHttpClient


class FakeRaw:
    def __init__(self, headers):
        self.headers = headers


class FakeResponse:
    def __init__(self, status_code=200, reason="OK", chunks=(b"",), headers=None, encoding="utf-8", error=None):
        self.status_code = status_code
        self.reason = reason
        self.url = "http://api.test/x"
        self.encoding = encoding
        self.raw = FakeRaw(headers or {"Content-Type": "application/json"})
        self.closed = False
        self._chunks = chunks
        self._error = error

    def iter_content(self, chunk_size=1):
        for c in self._chunks:
            yield c
        if self._error is not None:
            raise self._error

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.kwargs = None

    def request(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.response


def test_send_returns_decoded_response():
    # Arrange
    resp = FakeResponse(chunks=(b'{"a":', b" 1}"))
    session = FakeSession(response=resp)
    client = RequestsSessionHttpClient(base_headers={"User-Agent": "apitester"}, session=session)

    # Act
    out = client.send("post", "http://api.test/x", headers={"X-Key": "k"}, body='{"b": 2}', timeout_sec=3)

    # Assert
    assert out.status == 200
    assert out.status_text == "OK"
    assert out.text == '{"a": 1}'
    assert out.header("content-type") == "application/json"
    assert session.kwargs["method"] == "POST"
    assert session.kwargs["headers"] == {"User-Agent": "apitester", "X-Key": "k"}
    assert session.kwargs["data"] == b'{"b": 2}'
    assert session.kwargs["timeout"] == 3
    assert session.kwargs["stream"] is True
    assert resp.closed is True


def test_default_timeout_used():
    session = FakeSession(response=FakeResponse())
    RequestsSessionHttpClient(timeout_sec=7, session=session).send("GET", "http://api.test/x")
    assert session.kwargs["timeout"] == 7
    assert session.kwargs["data"] is None


def test_unknown_encoding_falls_back_to_utf8():
    session = FakeSession(response=FakeResponse(chunks=("é".encode("utf-8"),), encoding="x-unknown"))
    out = RequestsSessionHttpClient(session=session).send("GET", "http://api.test/x")
    assert out.text == "é"


def test_connect_timeout_maps_to_timeout_error():
    session = FakeSession(error=requests.exceptions.ConnectTimeout("slow"))
    with pytest.raises(HttpTimeoutError):
        RequestsSessionHttpClient(session=session).send("GET", "http://api.test/x")


def test_connection_error_maps_to_transport_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(HttpTransportError) as exc:
        RequestsSessionHttpClient(session=session).send("GET", "http://api.test/x")
    assert not isinstance(exc.value, HttpTimeoutError)


def test_body_read_failure_maps_to_transport_error():
    resp = FakeResponse(chunks=(b"partial",), error=requests.exceptions.ChunkedEncodingError("reset"))
    session = FakeSession(response=resp)

    with pytest.raises(HttpTransportError):
        RequestsSessionHttpClient(timeout_sec=30, session=session).send("GET", "http://api.test/x")
    assert resp.closed is True


def _drip_feed_server(listener, delay):
    conn, _ = listener.accept()
    with conn:
        conn.recv(65536)
        lines = [b"HTTP/1.1 204 No Content\r\n"] + [f"X-Slow-{i}: 1\r\n".encode() for i in range(5)]
        for line in lines:
            conn.sendall(line)
            time.sleep(delay)
        conn.sendall(b"Content-Length: 0\r\nConnection: close\r\n\r\n")


def test_slow_headers_with_empty_body_time_out():
    # Arrange
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]
    server = threading.Thread(target=_drip_feed_server, args=(listener, 0.2), daemon=True)
    server.start()
    session = requests.Session()
    session.trust_env = False
    client = RequestsSessionHttpClient(timeout_sec=0.5, session=session)

    # Act / Assert
    try:
        with pytest.raises(HttpTimeoutError):
            client.send("GET", f"http://127.0.0.1:{port}/slow")
    finally:
        server.join(timeout=5)
        listener.close()
