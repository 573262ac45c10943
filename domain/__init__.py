"""
Domain layer package.

This package contains pure business logic models and ports that are
independent of any specific infrastructure or frameworks.
"""

from .models import (  # noqa: F401
    AppConfig,
    ApplicationRequest,
    BootstrapFailed,
    BootstrapLoading,
    BootstrapReady,
    BootstrapState,
    Candidate,
    FreeTextQuestionResponse,
    JobPosting,
    SubmissionState,
    SubmissionStatus,
)
from .ports import (  # noqa: F401
    ApiStatusError,
    JobBoardApiPort,
    LoggerPort,
    UserInteractionPort,
)

__all__ = [
    # Models
    "AppConfig",
    "Candidate",
    "FreeTextQuestionResponse",
    "JobPosting",
    "ApplicationRequest",
    "SubmissionStatus",
    "SubmissionState",
    "BootstrapLoading",
    "BootstrapReady",
    "BootstrapFailed",
    "BootstrapState",
    # Ports
    "ApiStatusError",
    "JobBoardApiPort",
    "LoggerPort",
    "UserInteractionPort",
]
