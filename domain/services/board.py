from __future__ import annotations

from typing import Sequence

from domain.models import BootstrapReady, BootstrapState, Candidate, JobPosting
from domain.ports import JobBoardApiPort, LoggerPort
from domain.services.bootstrap import Bootstrapper
from domain.services.submission import SubmissionController


class JobBoard:
    """
    Bootstrap gate plus one ``SubmissionController`` per posting.

    No controller exists until the bootstrap finished with ``BootstrapReady``.
    """

    def __init__(
        self,
        *,
        api: JobBoardApiPort,
        email: str,
        logger: LoggerPort,
    ) -> None:
        self._api = api
        self._logger = logger
        self._bootstrapper = Bootstrapper(api=api, email=email, logger=logger)
        self._controllers: dict[str, SubmissionController] = {}

    @property
    def state(self) -> BootstrapState:
        return self._bootstrapper.state

    @property
    def candidate(self) -> Candidate | None:
        state = self.state
        return state.candidate if isinstance(state, BootstrapReady) else None

    @property
    def jobs(self) -> Sequence[JobPosting]:
        state = self.state
        return state.jobs if isinstance(state, BootstrapReady) else ()

    @property
    def controllers(self) -> Sequence[SubmissionController]:
        return tuple(self._controllers.values())

    def controller(self, job_id: str) -> SubmissionController:
        return self._controllers[job_id]

    async def load(self) -> BootstrapState:
        state = await self._bootstrapper.run()
        if isinstance(state, BootstrapReady) and not self._controllers:
            for job in state.jobs:
                if job.id in self._controllers:
                    self._logger.warning("duplicate job id ignored", job_id=job.id)
                    continue
                self._controllers[job.id] = SubmissionController(
                    job=job,
                    candidate=state.candidate,
                    api=self._api,
                    logger=self._logger,
                )
        return state
