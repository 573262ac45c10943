"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_job_board_api import FakeJobBoardApi
from .fake_runtime import InMemoryLogger
from .fake_user_interaction import FakeUserInteraction

__all__ = [
    "FakeJobBoardApi",
    "FakeUserInteraction",
    "InMemoryLogger",
]
