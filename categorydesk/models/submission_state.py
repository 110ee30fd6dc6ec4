"""
CategoryDesk Client - Submission State Model

Contains the SubmissionStatus enum and the immutable state/outcome
records used by the form controllers.

Author: CategoryDesk Project
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..validation import ValidationErrors


class SubmissionStatus(Enum):
    """
    Enum representing the lifecycle of one form submission.

    States:
    - IDLE: Ready for input; errors of the last attempt may be shown
    - VALIDATING: Rules are being evaluated over the draft
    - SUBMITTING: Request is in flight, submit control disabled
    - SUCCEEDED: Server accepted the submission
    - FAILED: Server rejected it or could not be reached; message shown
    """
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    """Current status of a form plus the top-level message (if any)."""
    status: SubmissionStatus = SubmissionStatus.IDLE
    message: Optional[str] = None

    @property
    def in_flight(self) -> bool:
        return self.status == SubmissionStatus.SUBMITTING


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Result of one submit() call.

    accepted is False when the call was ignored because another
    submission of the same form was still in flight.
    """
    accepted: bool
    status: SubmissionStatus
    errors: ValidationErrors = field(default_factory=ValidationErrors)
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == SubmissionStatus.SUCCEEDED
