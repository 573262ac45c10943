from .job_board_api_client import DEFAULT_BASE_URL, UrllibJobBoardApiClient

__all__ = ["DEFAULT_BASE_URL", "UrllibJobBoardApiClient"]
