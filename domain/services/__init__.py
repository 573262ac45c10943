"""
Domain services.

These services orchestrate the bootstrap and per-posting submission
workflows while depending only on domain models and ports.
"""

from .board import JobBoard
from .bootstrap import CANDIDATE_FETCH_ERROR, JOB_LIST_FETCH_ERROR, Bootstrapper
from .error_message import (
    GENERIC_SUBMIT_ERROR,
    derive_error_message,
    message_from_response_text,
    parse_error_body,
)
from .submission import EMPTY_REPO_URL_ERROR, SubmissionController

__all__ = [
    "Bootstrapper",
    "CANDIDATE_FETCH_ERROR",
    "JOB_LIST_FETCH_ERROR",
    "SubmissionController",
    "EMPTY_REPO_URL_ERROR",
    "GENERIC_SUBMIT_ERROR",
    "parse_error_body",
    "derive_error_message",
    "message_from_response_text",
    "JobBoard",
]
