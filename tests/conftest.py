# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# STATUS: Tests - Local HTTP server and fake checks
# PURPOSE: Scripted HTTP responses on a real socket, counted probe calls
# ============================================================================
"""
Shared fixtures.

mock_server: threaded HTTP server on 127.0.0.1 answering GET with queued
status codes (200 once the queue is empty), counting requests. Paths added
with route() get a fixed response instead.
"""

import socket
import threading
from collections import deque
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import List, Optional

import pytest

from resource_poller.core.exceptions import ProbeFailure, StatusFailure
from resource_poller.health.core import ReadinessCheck


class MockServer:
    """Scripted HTTP server; enqueue() status codes before polling."""

    def __init__(self):
        self._lock = threading.Lock()
        self._responses = deque()
        self.request_count = 0
        self.default_status = 200
        self._routes = {}

        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                route = server._routes.get(self.path)
                if route is not None:
                    status, headers, body = route
                    server._count()
                else:
                    status, headers = server._next_status(), {}
                    body = b"ok" if 200 <= status < 300 else b"not ready"
                self.send_response(status)
                for key, value in headers.items():
                    self.send_header(key, value)
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._httpd.daemon_threads = True
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    def _count(self) -> None:
        with self._lock:
            self.request_count += 1

    def _next_status(self) -> int:
        with self._lock:
            self.request_count += 1
            if self._responses:
                return self._responses.popleft()
            return self.default_status

    @property
    def port(self) -> int:
        return self._httpd.server_address[1]

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}/"

    def enqueue(self, *statuses: int) -> None:
        with self._lock:
            self._responses.extend(statuses)

    def route(self, path: str, status: int, body: bytes = b"", **headers: str) -> str:
        """Serve a fixed response on path; returns its absolute URL."""
        self._routes[path] = (status, {k.replace("_", "-"): v for k, v in headers.items()}, body)
        return f"http://127.0.0.1:{self.port}{path}"

    def start(self) -> "MockServer":
        self._thread.start()
        return self

    def shutdown(self) -> None:
        self._httpd.shutdown()
        self._httpd.server_close()


@pytest.fixture
def mock_server():
    server = MockServer().start()
    yield server
    server.shutdown()


@pytest.fixture
def second_server():
    server = MockServer().start()
    yield server
    server.shutdown()


@pytest.fixture
def closed_port_url():
    """URL of a local port nothing listens on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}/"


class ScriptedCheck(ReadinessCheck):
    """Returns scripted results in order, repeating the last one."""

    name = "scripted"

    def __init__(self, results: List[Optional[ProbeFailure]]):
        self._results = list(results)
        self.calls = 0

    def check_ready(self) -> Optional[ProbeFailure]:
        index = min(self.calls, len(self._results) - 1)
        self.calls += 1
        return self._results[index]


@pytest.fixture
def make_check():
    """Factory: make_check(failures, succeed=True)."""
    def _make(failures: int, succeed: bool = True) -> ScriptedCheck:
        results: List[Optional[ProbeFailure]] = [
            StatusFailure(f"http://svc/{i}", 503) for i in range(failures)
        ]
        if succeed:
            results.append(None)
        return ScriptedCheck(results)
    return _make


@pytest.fixture
def scripted_check():
    """The ScriptedCheck class, for tests that script exact results."""
    return ScriptedCheck
