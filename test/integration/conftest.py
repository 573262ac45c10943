from __future__ import annotations

import http.server
import json
import threading
import urllib.parse
from dataclasses import dataclass, field
from typing import Any, Generator

import pytest

from test.fixtures import sample_candidate_payload


@dataclass
class StubJobService:
    """Scripted responses and a request log for the stub HTTP server."""

    candidates: dict[str, dict[str, Any]] = field(default_factory=dict)
    jobs: list[dict[str, Any]] = field(default_factory=list)
    jobs_status: int = 200
    apply_responses: list[tuple[int, str]] = field(default_factory=list)
    requests: list[tuple[str, str, Any]] = field(default_factory=list)

    def reset(self) -> None:
        self.candidates = {"ada@example.com": sample_candidate_payload()}
        self.jobs = [{"id": "j1", "title": "Engineer"}, {"id": "j2", "title": "Designer"}]
        self.jobs_status = 200
        self.apply_responses = []
        self.requests = []

    def paths(self) -> list[str]:
        return [path for _, path, _ in self.requests]


class _StubHandler(http.server.BaseHTTPRequestHandler):
    service: StubJobService

    def do_GET(self) -> None:  # noqa: N802
        parsed = urllib.parse.urlparse(self.path)
        self.service.requests.append(("GET", parsed.path, parsed.query))
        if parsed.path == "/api/candidate/get-by-email":
            email = urllib.parse.parse_qs(parsed.query).get("email", [""])[0]
            candidate = self.service.candidates.get(email)
            if candidate is None:
                self._send(404, json.dumps({"error": "Candidate not found"}))
            else:
                self._send(200, json.dumps(candidate))
            return
        if parsed.path == "/api/jobs/get-list":
            if self.service.jobs_status != 200:
                self._send(self.service.jobs_status, json.dumps({"error": "unavailable"}))
            else:
                self._send(200, json.dumps(self.service.jobs))
            return
        self._send(404, json.dumps({"error": "not found"}))

    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", "0"))
        body = json.loads(self.rfile.read(length).decode("utf-8") or "null")
        self.service.requests.append(("POST", self.path, body))
        if self.path != "/api/candidate/apply-to-job":
            self._send(404, json.dumps({"error": "not found"}))
            return
        if self.service.apply_responses:
            status, text = self.service.apply_responses.pop(0)
        else:
            status, text = 200, json.dumps({"ok": True})
        self._send(status, text)

    def _send(self, status: int, text: str) -> None:
        data = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, *_args: object) -> None:
        pass


@pytest.fixture(scope="session")
def _stub_server() -> Generator[tuple[str, StubJobService], None, None]:
    """Start a local HTTP server speaking the job service API."""
    service = StubJobService()
    handler = type("BoundStubHandler", (_StubHandler,), {"service": service})
    server = http.server.ThreadingHTTPServer(("127.0.0.1", 0), handler)
    port = server.server_address[1]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{port}", service
    server.shutdown()


@pytest.fixture()
def stub_service(_stub_server: tuple[str, StubJobService]) -> StubJobService:
    _, service = _stub_server
    service.reset()
    return service


@pytest.fixture()
def stub_base_url(_stub_server: tuple[str, StubJobService], stub_service: StubJobService) -> str:
    base_url, _ = _stub_server
    return base_url
