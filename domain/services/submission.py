from __future__ import annotations

from domain.models import (
    ApplicationRequest,
    Candidate,
    JobPosting,
    SubmissionState,
)
from domain.ports import ApiStatusError, JobBoardApiPort, LoggerPort
from domain.services.error_message import GENERIC_SUBMIT_ERROR, message_from_response_text

EMPTY_REPO_URL_ERROR = "Ingresá la URL de tu repositorio."


class SubmissionController:
    """
    Owns the application attempt for a single posting.

    State machine::

        IDLE/ERROR --submit(valid)--> SUBMITTING --2xx--> SUCCESS
        IDLE/ERROR --submit(blank)--> ERROR
        SUBMITTING --rejected / transport failure--> ERROR

    ``SUCCESS`` is terminal and locks the input. Controllers never share
    mutable state; the candidate is read-only.
    """

    def __init__(
        self,
        *,
        job: JobPosting,
        candidate: Candidate | None,
        api: JobBoardApiPort,
        logger: LoggerPort,
    ) -> None:
        self._job = job
        self._candidate = candidate
        self._api = api
        self._logger = logger
        self._repo_url = ""
        self._state = SubmissionState.idle()

    @property
    def job(self) -> JobPosting:
        return self._job

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def repo_url(self) -> str:
        return self._repo_url

    def set_repo_url(self, text: str) -> bool:
        """Update the pending input. Returns False if the input is locked."""
        if self._state.is_locked:
            return False
        self._repo_url = text
        return True

    async def submit(self) -> SubmissionState:
        if self._state.is_locked:
            return self._state

        repo_url = self._repo_url.strip()
        if not repo_url:
            self._state = SubmissionState.error(EMPTY_REPO_URL_ERROR)
            return self._state

        if self._candidate is None:
            return self._state

        request = ApplicationRequest.for_job(self._candidate, self._job, repo_url)
        # Set before the first await so a re-entrant submit() sees the lock.
        self._state = SubmissionState.submitting()
        self._logger.info("submitting application", job_id=self._job.id, repo_url=repo_url)

        try:
            await self._api.apply_to_job(request)
        except ApiStatusError as exc:
            self._state = SubmissionState.error(self._rejection_message(exc))
            self._logger.warning(
                "application rejected",
                job_id=self._job.id,
                status=exc.status,
                message=self._state.message,
            )
            return self._state
        except Exception as exc:
            self._state = SubmissionState.error(str(exc) or GENERIC_SUBMIT_ERROR)
            self._logger.error(
                "application request failed",
                job_id=self._job.id,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return self._state
        except BaseException:
            # Cancelled mid-flight: the outcome is unknown, leave the card editable.
            self._state = SubmissionState.error(GENERIC_SUBMIT_ERROR)
            self._logger.warning("application request cancelled", job_id=self._job.id)
            raise

        self._state = SubmissionState.success()
        self._logger.info("application accepted", job_id=self._job.id)
        return self._state

    @staticmethod
    def _rejection_message(exc: ApiStatusError) -> str:
        try:
            return message_from_response_text(exc.body)
        except ValueError as parse_exc:
            return str(parse_exc) or GENERIC_SUBMIT_ERROR


__all__ = ["SubmissionController", "EMPTY_REPO_URL_ERROR"]
