from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.enums import DECISION_STATUSES, SubmissionStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Submission
from .repository import SubmissionRepository
from .validation import validate_new_submission

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Submission not found"
INVALID_STATUS_MESSAGE = "Invalid status"
NO_IDS_MESSAGE = "No IDs provided"
INVALID_IDS_MESSAGE = "Invalid submission IDs"


def parse_submission_ids(ids: Any) -> list[int]:
    """Validate a bulk-delete id list; duplicates collapse, order is kept."""

    if not isinstance(ids, list) or not ids:
        raise ValidationError(NO_IDS_MESSAGE)

    out: list[int] = []
    for raw in ids:
        if isinstance(raw, bool):
            raise ValidationError(INVALID_IDS_MESSAGE)
        if isinstance(raw, int):
            value = raw
        elif isinstance(raw, str) and raw.strip().isdigit():
            value = int(raw.strip())
        else:
            raise ValidationError(INVALID_IDS_MESSAGE)
        if value not in out:
            out.append(value)
    return out


class SubmissionService:
    """Use cases over offboarding submissions."""

    def __init__(self, submissions: SubmissionRepository):
        self._submissions = submissions

    def create_submission(self, payload: Any, *, today: Optional[date] = None) -> Submission:
        new = validate_new_submission(payload, today=today or today_local())
        created = self._submissions.create(new)
        logger.info("Created submission %s for employee %s", created.id, created.employee_id)
        return created

    def list_submissions(self) -> Sequence[Submission]:
        return self._submissions.list_all()

    def get_submission(self, submission_id: int) -> Submission:
        sub = self._submissions.get_by_id(int(submission_id))
        if not sub:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return sub

    def search_submissions(self, term: str) -> Sequence[Submission]:
        logger.debug("Searching submissions for %r", term)
        return self._submissions.search(term or "")

    def update_status(self, submission_id: int, status: Any) -> Submission:
        if not isinstance(status, str) or status not in DECISION_STATUSES:
            raise ValidationError(INVALID_STATUS_MESSAGE)

        updated = self._submissions.update_status(int(submission_id), SubmissionStatus(status))
        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Submission %s marked %s", updated.id, updated.status.value)
        return updated

    def delete_submission(self, submission_id: int) -> None:
        if not self._submissions.delete_by_id(int(submission_id)):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("Deleted submission %s", submission_id)

    def delete_submissions(self, ids: Any) -> int:
        submission_ids = parse_submission_ids(ids)
        deleted = self._submissions.delete_many(submission_ids)
        logger.info("Deleted %d of %d requested submissions", deleted, len(submission_ids))
        return deleted

    def clear_submissions(self) -> int:
        deleted = self._submissions.clear_all()
        logger.info("Cleared all submissions (%d rows)", deleted)
        return deleted
