from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union


@dataclass(frozen=True)
class Candidate:
    """Identity record returned by the candidate lookup.

    Fetched once at bootstrap and shared read-only by every posting.
    """

    uuid: str
    candidate_id: str
    application_id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Candidate:
        missing = [key for key in _CANDIDATE_KEYS if key not in payload]
        if missing:
            raise ValueError(f"candidate payload missing keys: {', '.join(missing)}")
        return cls(
            uuid=str(payload["uuid"]),
            candidate_id=str(payload["candidateId"]),
            application_id=str(payload["applicationId"]),
            first_name=str(payload["firstName"]),
            last_name=str(payload["lastName"]),
            email=str(payload["email"]),
        )


_CANDIDATE_KEYS = ("uuid", "candidateId", "applicationId", "firstName", "lastName", "email")


@dataclass(frozen=True)
class JobPosting:
    """A single open position."""

    id: str
    title: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> JobPosting:
        if "id" not in payload or "title" not in payload:
            raise ValueError(f"job payload must contain id and title: {dict(payload)}")
        return cls(id=str(payload["id"]), title=str(payload["title"]))


@dataclass(frozen=True)
class ApplicationRequest:
    """Body of one apply-to-job call, built fresh for every attempt."""

    uuid: str
    job_id: str
    candidate_id: str
    application_id: str
    repo_url: str

    @classmethod
    def for_job(cls, candidate: Candidate, job: JobPosting, repo_url: str) -> ApplicationRequest:
        return cls(
            uuid=candidate.uuid,
            job_id=job.id,
            candidate_id=candidate.candidate_id,
            application_id=candidate.application_id,
            repo_url=repo_url.strip(),
        )

    def to_payload(self) -> dict[str, str]:
        return {
            "uuid": self.uuid,
            "jobId": self.job_id,
            "candidateId": self.candidate_id,
            "applicationId": self.application_id,
            "repoUrl": self.repo_url,
        }


class SubmissionStatus(str, Enum):
    """Lifecycle states of one posting's application attempt."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmissionState:
    status: SubmissionStatus = SubmissionStatus.IDLE
    message: str | None = None

    @classmethod
    def idle(cls) -> SubmissionState:
        return cls(SubmissionStatus.IDLE)

    @classmethod
    def submitting(cls) -> SubmissionState:
        return cls(SubmissionStatus.SUBMITTING)

    @classmethod
    def success(cls) -> SubmissionState:
        return cls(SubmissionStatus.SUCCESS)

    @classmethod
    def error(cls, message: str) -> SubmissionState:
        return cls(SubmissionStatus.ERROR, message)

    @property
    def is_locked(self) -> bool:
        """True while a request is in flight or after a successful submit."""
        return self.status in (SubmissionStatus.SUBMITTING, SubmissionStatus.SUCCESS)


@dataclass(frozen=True)
class BootstrapLoading:
    """Initial bootstrap state, before the sequence has finished."""


@dataclass(frozen=True)
class BootstrapReady:
    candidate: Candidate
    jobs: Sequence[JobPosting] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "jobs", tuple(self.jobs))


@dataclass(frozen=True)
class BootstrapFailed:
    message: str


BootstrapState = Union[BootstrapLoading, BootstrapReady, BootstrapFailed]


@dataclass(frozen=True)
class FieldErrorsBody:
    """
    Rejection body carrying per-field validation messages.

    Field order is the order the service sent them in.
    """

    field_errors: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(messages) for name, messages in self.field_errors.items()}
        object.__setattr__(self, "field_errors", MappingProxyType(frozen))


@dataclass(frozen=True)
class ErrorStringBody:
    error: str


@dataclass(frozen=True)
class EmptyErrorBody:
    """Rejection body with no recognised reason."""


ErrorBody = Union[FieldErrorsBody, ErrorStringBody, EmptyErrorBody]


@dataclass(frozen=True)
class FreeTextQuestionResponse:
    """Structured response to a free-text question asked to the user."""

    question_id: str
    text: str


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration loaded from config.json."""

    base_url: str
    user_email: str


__all__ = [
    "AppConfig",
    "FreeTextQuestionResponse",
    "Candidate",
    "JobPosting",
    "ApplicationRequest",
    "SubmissionStatus",
    "SubmissionState",
    "BootstrapLoading",
    "BootstrapReady",
    "BootstrapFailed",
    "BootstrapState",
    "FieldErrorsBody",
    "ErrorStringBody",
    "EmptyErrorBody",
    "ErrorBody",
]
