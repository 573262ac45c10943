from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import ApplicationRequest, Candidate, FreeTextQuestionResponse, JobPosting


class ApiStatusError(Exception):
    """
    Raised by ``JobBoardApiPort`` implementations on a non-2xx response.

    ``body`` is the raw response text; decoding it is left to the caller.
    """

    def __init__(self, status: int, body: str = "", url: str | None = None) -> None:
        super().__init__(f"HTTP {status}" + (f" from {url}" if url else ""))
        self.status = status
        self.body = body
        self.url = url


@runtime_checkable
class JobBoardApiPort(Protocol):
    """
    The three calls the client makes against the remote job service.

    All methods are asynchronous; a non-2xx answer raises ``ApiStatusError``
    and transport problems propagate as whatever the adapter's transport
    raises.
    """

    async def get_candidate_by_email(self, email: str) -> Candidate:
        ...

    async def get_job_list(self) -> Sequence[JobPosting]:
        ...

    async def apply_to_job(self, request: ApplicationRequest) -> None:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured logging sink."""

    @abstractmethod
    def info(self, message: str, /, **fields: Any) -> None:
        ...

    @abstractmethod
    def warning(self, message: str, /, **fields: Any) -> None:
        ...

    @abstractmethod
    def error(self, message: str, /, **fields: Any) -> None:
        ...


@runtime_checkable
class UserInteractionPort(Protocol):
    """
    High-level user interaction abstraction (e.g. a terminal).

    All methods are asynchronous so prompts never block the event loop.
    """

    async def send_info(self, message: str) -> None:
        ...

    async def ask_free_text(
        self,
        question_id: str,
        prompt: str,
    ) -> FreeTextQuestionResponse:
        ...
