"""Application/UI layer package."""

from .facade import REPO_URL_PLACEHOLDER, BoardView, JobBoardFacade, JobCardView

__all__ = ["BoardView", "JobBoardFacade", "JobCardView", "REPO_URL_PLACEHOLDER"]
