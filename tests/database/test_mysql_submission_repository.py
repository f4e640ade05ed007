from __future__ import annotations

from datetime import date, datetime

import pytest
from mysql.connector import IntegrityError, errorcode

from src.offboarding_system.offboarding_system.core.enums import SubmissionStatus
from src.offboarding_system.offboarding_system.core.exceptions import ConflictError
from src.offboarding_system.offboarding_system.submissions.model import NewSubmission
from src.offboarding_system.offboarding_system.submissions.mysql_submission_repository import (
    MySQLSubmissionRepository,
)

ROW = {
    "id": 7,
    "employee_id": "EMP001",
    "full_name": "John Carter",
    "email": "john@example.com",
    "department": "Engineering",
    "designation": "Developer",
    "joining_date": date(2024, 1, 10),
    "last_day": date(2026, 3, 10),
    "laptop": "ThinkPad",
    "laptop_condition": "Good",
    "access_card": "Returned",
    "current_projects": "Billing",
    "pending_tasks": "None",
    "reason_for_leaving": "Relocation",
    "overall_experience": 4,
    "feedback": None,
    "status": "Pending",
    "submission_date": datetime(2026, 3, 1, 10, 0, 0),
}

NEW = NewSubmission(
    employee_id="EMP001",
    full_name="John Carter",
    email="john@example.com",
    department="Engineering",
    designation="Developer",
    joining_date=date(2024, 1, 10),
    last_day=date(2026, 3, 10),
    laptop="ThinkPad",
    laptop_condition="Good",
    access_card="Returned",
    current_projects="Billing",
    pending_tasks="None",
    reason_for_leaving="Relocation",
    overall_experience=4,
)


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = None
        self.rowcount = 0

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        if self._conn.error is not None:
            raise self._conn.error
        self.lastrowid = self._conn.lastrowid
        self.rowcount = self._conn.rowcount

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, rows=(), rowcount=0, lastrowid=None, error=None):
        self.rows = list(rows)
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.error = error
        self.executed = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def _repo(**kwargs):
    conn = FakeConnection(**kwargs)
    return MySQLSubmissionRepository(FakeConnFactory(conn)), conn


def test_create_inserts_and_reads_back_row():
    repo, conn = _repo(rows=[ROW], lastrowid=7)

    sub = repo.create(NEW)

    assert sub.id == 7
    assert sub.status == SubmissionStatus.PENDING
    insert_sql, insert_params = conn.executed[0]
    assert insert_sql.startswith("INSERT INTO submissions")
    assert insert_params[0] == "EMP001"
    assert insert_params[-1] is None
    assert conn.executed[1][1] == (7,)
    assert conn.committed and conn.closed


@pytest.mark.parametrize(
    "key, field, message",
    [
        ("submissions.uq_submissions_employee_id", "employeeId", "Employee ID already exists"),
        ("uq_submissions_email", "email", "Email already exists"),
    ],
)
def test_create_maps_duplicate_keys_to_conflicts(key, field, message):
    err = IntegrityError(msg=f"Duplicate entry 'x' for key '{key}'", errno=errorcode.ER_DUP_ENTRY)
    repo, conn = _repo(error=err)

    with pytest.raises(ConflictError) as exc:
        repo.create(NEW)

    assert exc.value.field == field
    assert exc.value.message == message
    assert conn.rolled_back


def test_create_propagates_unknown_integrity_errors():
    err = IntegrityError(msg="Duplicate entry 'x' for key 'PRIMARY'", errno=errorcode.ER_DUP_ENTRY)
    repo, _ = _repo(error=err)

    with pytest.raises(IntegrityError):
        repo.create(NEW)


def test_search_binds_escaped_pattern_as_data():
    repo, conn = _repo(rows=[ROW])

    found = repo.search("o'brien%")

    assert [s.id for s in found] == [7]
    sql, params = conn.executed[0]
    assert "o'brien" not in sql
    assert params == ("%o'brien\\%%", "%o'brien\\%%")
    assert "ORDER BY submission_date DESC" in sql


def test_update_status_returns_none_for_missing_row():
    repo, conn = _repo(rows=[])

    assert repo.update_status(3, SubmissionStatus.APPROVED) is None
    assert conn.executed[0][1] == ("Approved", 3)


def test_delete_many_uses_one_placeholder_per_id():
    repo, conn = _repo(rowcount=1)

    assert repo.delete_many([4, 9]) == 1
    sql, params = conn.executed[0]
    assert sql == "DELETE FROM submissions WHERE id IN (%s,%s)"
    assert params == (4, 9)


def test_delete_by_id_reports_whether_a_row_went_away():
    repo, _ = _repo(rowcount=0)
    assert repo.delete_by_id(1) is False

    repo, _ = _repo(rowcount=1)
    assert repo.delete_by_id(1) is True
