from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from domain.models import BootstrapFailed, BootstrapLoading, SubmissionStatus
from domain.services import JobBoard, SubmissionController

HEADING = "Posiciones Abiertas en Nimble Gravity"
LOADING_TEXT = "Cargando datos..."
REPO_URL_PLACEHOLDER = "https://github.com/tu-usuario/tu-repo"

_BUTTON_LABELS = {
    SubmissionStatus.IDLE: "Submit",
    SubmissionStatus.ERROR: "Submit",
    SubmissionStatus.SUBMITTING: "Enviando...",
    SubmissionStatus.SUCCESS: "¡Postulación Enviada!",
}


@dataclass(frozen=True)
class JobCardView:
    job_id: str
    title: str
    repo_url: str
    button_label: str
    input_locked: bool
    error_message: str | None = None


@dataclass(frozen=True)
class BoardView:
    heading: str
    status_text: str | None
    greeting: str | None
    cards: Sequence[JobCardView]


class JobBoardFacade:
    """
    UI-facing facade over a ``JobBoard``: what to show, per card.
    """

    def __init__(self, board: JobBoard) -> None:
        self._board = board

    def view(self) -> BoardView:
        state = self._board.state
        if isinstance(state, BootstrapLoading):
            return BoardView(heading=HEADING, status_text=LOADING_TEXT, greeting=None, cards=())
        if isinstance(state, BootstrapFailed):
            return BoardView(
                heading=HEADING,
                status_text=f"Error: {state.message}",
                greeting=None,
                cards=(),
            )
        return BoardView(
            heading=HEADING,
            status_text=None,
            greeting=self.greeting(),
            cards=tuple(self.card(c) for c in self._board.controllers),
        )

    def greeting(self) -> str | None:
        candidate = self._board.candidate
        if candidate is None:
            return None
        return (
            f"Hola, {candidate.first_name}. "
            "Ingresá el link de tu repo en la posición a la que aplicás:"
        )

    @staticmethod
    def card(controller: SubmissionController) -> JobCardView:
        state = controller.state
        return JobCardView(
            job_id=controller.job.id,
            title=controller.job.title,
            repo_url=controller.repo_url,
            button_label=_BUTTON_LABELS[state.status],
            input_locked=state.is_locked,
            error_message=state.message if state.status is SubmissionStatus.ERROR else None,
        )
