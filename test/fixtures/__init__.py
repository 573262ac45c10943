"""Sample records shared by unit and integration tests."""

from domain.models import Candidate, JobPosting


def sample_candidate(**overrides: str) -> Candidate:
    fields = {
        "uuid": "c-uuid-1",
        "candidate_id": "cand-42",
        "application_id": "app-7",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
    }
    fields.update(overrides)
    return Candidate(**fields)


def sample_candidate_payload() -> dict[str, str]:
    return {
        "uuid": "c-uuid-1",
        "candidateId": "cand-42",
        "applicationId": "app-7",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
    }


def sample_jobs() -> tuple[JobPosting, ...]:
    return (
        JobPosting(id="j1", title="Engineer"),
        JobPosting(id="j2", title="Designer"),
    )
