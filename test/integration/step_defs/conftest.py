"""Shared fixtures, context and steps for BDD step definitions."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers

from domain.models import BootstrapState, JobPosting
from domain.ports import ApiStatusError
from domain.services import JobBoard
from test.fixtures import sample_candidate
from test.mocks import FakeJobBoardApi, InMemoryLogger


@dataclass
class BoardContext:
    """Holds mutable state shared across BDD steps."""

    registered_emails: set[str] = field(default_factory=set)
    jobs: list[JobPosting] = field(default_factory=list)
    jobs_unavailable: bool = False
    api: FakeJobBoardApi | None = None
    board: JobBoard | None = None
    state: BootstrapState | None = None
    pending_rejection: str | None = None


@pytest.fixture()
def board_ctx() -> BoardContext:
    return BoardContext()


def load_board(ctx: BoardContext, email: str) -> None:
    """Build the fake service from the Given steps and run the bootstrap."""
    ctx.api = FakeJobBoardApi(
        candidate=sample_candidate(email=email),
        jobs=ctx.jobs,
        candidate_error=None if email in ctx.registered_emails else ApiStatusError(404),
        jobs_error=ApiStatusError(503) if ctx.jobs_unavailable else None,
    )
    ctx.board = JobBoard(api=ctx.api, email=email, logger=InMemoryLogger())
    ctx.state = asyncio.run(ctx.board.load())


@given(parsers.parse('the candidate "{email}" is registered'))
def given_registered(board_ctx: BoardContext, email: str) -> None:
    board_ctx.registered_emails.add(email)


@given(parsers.parse('the service lists the job "{job_id}" titled "{title}"'))
def given_job(board_ctx: BoardContext, job_id: str, title: str) -> None:
    board_ctx.jobs.append(JobPosting(id=job_id, title=title))


@given("the job list is unavailable")
def given_jobs_unavailable(board_ctx: BoardContext) -> None:
    board_ctx.jobs_unavailable = True
