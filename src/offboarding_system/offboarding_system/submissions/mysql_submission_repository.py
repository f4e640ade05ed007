from __future__ import annotations

from typing import Iterable, Optional, Sequence

from mysql.connector import IntegrityError

from ..core.enums import SubmissionStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, duplicate_key_name, escape_like, fetchall, fetchone, placeholders
from .model import NewSubmission, Submission
from .repository import SubmissionRepository

_COLUMNS = """
    id, employee_id, full_name, email, department, designation,
    joining_date, last_day, laptop, laptop_condition, access_card,
    current_projects, pending_tasks, reason_for_leaving,
    overall_experience, feedback, status, submission_date
"""

# Unique key name fragment -> (field, message)
_CONFLICTS = (
    ("employee_id", "employeeId", "Employee ID already exists"),
    ("email", "email", "Email already exists"),
)


def conflict_for_key(key_name: Optional[str]) -> Optional[ConflictError]:
    if not key_name:
        return None
    for fragment, field, message in _CONFLICTS:
        if fragment in key_name:
            return ConflictError(message, field=field)
    return None


class MySQLSubmissionRepository(SubmissionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, new: NewSubmission) -> Submission:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO submissions(
                        employee_id, full_name, email, department, designation,
                        joining_date, last_day, laptop, laptop_condition, access_card,
                        current_projects, pending_tasks, reason_for_leaving,
                        overall_experience, feedback
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        new.employee_id,
                        new.full_name,
                        new.email,
                        new.department,
                        new.designation,
                        new.joining_date,
                        new.last_day,
                        new.laptop,
                        new.laptop_condition,
                        new.access_card,
                        new.current_projects,
                        new.pending_tasks,
                        new.reason_for_leaving,
                        int(new.overall_experience),
                        new.feedback,
                    ),
                )
                new_id = int(cur.lastrowid)
                # MySQL has no RETURNING; read back in the same transaction.
                cur.execute(f"SELECT {_COLUMNS} FROM submissions WHERE id=%s", (new_id,))
                return Submission.from_row(fetchone(cur))
        except IntegrityError as e:
            conflict = conflict_for_key(duplicate_key_name(e))
            if conflict is None:
                raise
            raise conflict from e

    def list_all(self) -> Sequence[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM submissions ORDER BY submission_date DESC, id DESC")
            return [Submission.from_row(r) for r in fetchall(cur)]

    def get_by_id(self, submission_id: int) -> Optional[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM submissions WHERE id=%s", (int(submission_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Submission.from_row(r)

    def search(self, term: str) -> Sequence[Submission]:
        pattern = f"%{escape_like(term)}%"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM submissions
                WHERE LOWER(employee_id) LIKE LOWER(%s) OR LOWER(full_name) LIKE LOWER(%s)
                ORDER BY submission_date DESC, id DESC
                """,
                (pattern, pattern),
            )
            return [Submission.from_row(r) for r in fetchall(cur)]

    def update_status(self, submission_id: int, status: SubmissionStatus) -> Optional[Submission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE submissions SET status=%s WHERE id=%s",
                (status.value, int(submission_id)),
            )
            # rowcount is 0 when the status is unchanged, so existence is decided by the read.
            cur.execute(f"SELECT {_COLUMNS} FROM submissions WHERE id=%s", (int(submission_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Submission.from_row(r)

    def delete_by_id(self, submission_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM submissions WHERE id=%s", (int(submission_id),))
            return cur.rowcount > 0

    def delete_many(self, submission_ids: Iterable[int]) -> int:
        ids = [int(i) for i in submission_ids]
        if not ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM submissions WHERE id IN ({placeholders(len(ids))})", tuple(ids))
            return int(cur.rowcount)

    def clear_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM submissions")
            return int(cur.rowcount)
