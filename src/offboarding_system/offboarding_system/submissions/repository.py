from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import SubmissionStatus
from .model import NewSubmission, Submission


class SubmissionRepository(Protocol):
    """Store interface for submissions.

    Note (DIP): the service depends on this interface, not on a concrete database.
    Each method maps to a single statement against the store.
    """

    def create(self, new: NewSubmission) -> Submission:
        """Insert and return the stored row.

        Raises ConflictError when the employee ID or email is already taken.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[Submission]:
        raise NotImplementedError

    def get_by_id(self, submission_id: int) -> Optional[Submission]:
        raise NotImplementedError

    def search(self, term: str) -> Sequence[Submission]:
        raise NotImplementedError

    def update_status(self, submission_id: int, status: SubmissionStatus) -> Optional[Submission]:
        raise NotImplementedError

    def delete_by_id(self, submission_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, submission_ids: Iterable[int]) -> int:
        raise NotImplementedError

    def clear_all(self) -> int:
        raise NotImplementedError
