from __future__ import annotations

from enum import Enum


class SubmissionStatus(str, Enum):
    """Review state of an offboarding submission."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


# Values accepted by the status-update endpoint.
DECISION_STATUSES = frozenset({SubmissionStatus.APPROVED.value, SubmissionStatus.REJECTED.value})
