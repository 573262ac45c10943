"""HTTP client for the job board service.

Three endpoints: candidate lookup by email, the open job list and the
application POST. A non-2xx response raises ``ApiStatusError`` carrying the
raw response text; transport failures propagate unchanged. The blocking
``urllib`` calls run on a worker thread so the event loop stays free.
"""

from __future__ import annotations

import asyncio
import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from domain.models import ApplicationRequest, Candidate, JobPosting
from domain.ports import ApiStatusError

DEFAULT_BASE_URL = "https://botfilter-h5ddh6dye8exb7ha.centralus-01.azurewebsites.net"


class UrllibJobBoardApiClient:
    """Implements ``JobBoardApiPort`` against the remote REST endpoints.

    ``timeout`` is only forwarded to ``urlopen`` when given; by default the
    socket's own default applies.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def get_candidate_by_email(self, email: str) -> Candidate:
        query = urllib.parse.urlencode({"email": email})
        data = await asyncio.to_thread(
            self._request_json, "GET", f"/api/candidate/get-by-email?{query}", None,
        )
        if not isinstance(data, dict):
            raise ValueError(f"unexpected candidate payload: {data!r}")
        return Candidate.from_payload(data)

    async def get_job_list(self) -> tuple[JobPosting, ...]:
        data = await asyncio.to_thread(self._request_json, "GET", "/api/jobs/get-list", None)
        if not isinstance(data, list):
            raise ValueError(f"unexpected job list payload: {data!r}")
        return tuple(JobPosting.from_payload(item) for item in data)

    async def apply_to_job(self, request: ApplicationRequest) -> None:
        # The body of an accepted application is never looked at.
        await asyncio.to_thread(
            self._request,
            "POST",
            "/api/candidate/apply-to-job",
            request.to_payload(),
            decode=False,
        )

    # -- internal helpers ---------------------------------------------------

    def _request_json(self, method: str, path: str, payload: dict[str, Any] | None) -> Any:
        return json.loads(self._request(method, path, payload))

    def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None,
        *,
        decode: bool = True,
    ) -> str:
        url = f"{self._base_url}{path}"
        body = json.dumps(payload).encode("utf-8") if payload is not None else None
        req = urllib.request.Request(url, data=body, method=method)
        req.add_header("Accept", "application/json")
        if body is not None:
            req.add_header("Content-Type", "application/json")
        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        try:
            with urllib.request.urlopen(req, **kwargs) as resp:  # nosec B310
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            raw = exc.read() if exc.fp is not None else b""
            raise ApiStatusError(
                exc.code,
                raw.decode("utf-8", errors="replace"),
                url=url,
            ) from exc
        return raw.decode("utf-8") if decode else ""
