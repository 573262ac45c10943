from __future__ import annotations

from domain.models import (
    BootstrapFailed,
    BootstrapLoading,
    BootstrapReady,
    BootstrapState,
)
from domain.ports import JobBoardApiPort, LoggerPort

CANDIDATE_FETCH_ERROR = "error fetching candidate data, check the email"
JOB_LIST_FETCH_ERROR = "error fetching job list"


class Bootstrapper:
    """
    Loads the candidate and then the job list, exactly once.

    The job list is only requested after the candidate lookup succeeded.
    A failure in either stage ends in ``BootstrapFailed`` with that stage's
    fixed message; nothing fetched before the failure is kept.
    """

    def __init__(
        self,
        *,
        api: JobBoardApiPort,
        email: str,
        logger: LoggerPort,
    ) -> None:
        self._api = api
        self._email = email
        self._logger = logger
        self._state: BootstrapState = BootstrapLoading()
        self._started = False

    @property
    def state(self) -> BootstrapState:
        return self._state

    async def run(self) -> BootstrapState:
        if self._started:
            return self._state
        self._started = True

        email = self._email.strip()
        if not email:
            self._logger.error("bootstrap aborted: no email configured")
            return self._fail(CANDIDATE_FETCH_ERROR)

        self._logger.info("fetching candidate", email=email)
        try:
            candidate = await self._api.get_candidate_by_email(email)
        except Exception as exc:
            self._logger.error(
                "candidate lookup failed",
                email=email,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return self._fail(CANDIDATE_FETCH_ERROR)

        self._logger.info("fetching job list", candidate_uuid=candidate.uuid)
        try:
            jobs = await self._api.get_job_list()
        except Exception as exc:
            self._logger.error(
                "job list fetch failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return self._fail(JOB_LIST_FETCH_ERROR)

        self._state = BootstrapReady(candidate=candidate, jobs=jobs)
        self._logger.info("bootstrap complete", job_count=len(self._state.jobs))
        return self._state

    def _fail(self, message: str) -> BootstrapState:
        self._state = BootstrapFailed(message=message)
        return self._state
