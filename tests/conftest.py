from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from types import SimpleNamespace
from typing import Optional

import pytest

from src.offboarding_system.offboarding_system.main import create_app
from src.offboarding_system.offboarding_system.container import Container
from src.offboarding_system.offboarding_system.core.enums import SubmissionStatus
from src.offboarding_system.offboarding_system.core.exceptions import ConflictError
from src.offboarding_system.offboarding_system.submissions.model import NewSubmission, Submission
from src.offboarding_system.offboarding_system.submissions.service import SubmissionService


class InMemorySubmissions:
    """Behaves like the MySQL repository: unique employee_id/email, newest first."""

    def __init__(self):
        self._rows: dict[int, Submission] = {}
        self._next_id = 1
        self._clock = datetime(2026, 3, 1, 9, 0, 0)
        self.calls: list[str] = []

    def create(self, new: NewSubmission) -> Submission:
        self.calls.append("create")
        for row in self._rows.values():
            if row.employee_id == new.employee_id:
                raise ConflictError("Employee ID already exists", field="employeeId")
            if row.email == new.email:
                raise ConflictError("Email already exists", field="email")

        self._clock += timedelta(minutes=1)
        sub = Submission(
            id=self._next_id,
            employee_id=new.employee_id,
            full_name=new.full_name,
            email=new.email,
            department=new.department,
            designation=new.designation,
            joining_date=new.joining_date,
            last_day=new.last_day,
            laptop=new.laptop,
            laptop_condition=new.laptop_condition,
            access_card=new.access_card,
            current_projects=new.current_projects,
            pending_tasks=new.pending_tasks,
            reason_for_leaving=new.reason_for_leaving,
            overall_experience=new.overall_experience,
            feedback=new.feedback,
            status=SubmissionStatus.PENDING,
            submission_date=self._clock,
        )
        self._rows[sub.id] = sub
        self._next_id += 1
        return sub

    def _newest_first(self, rows):
        return sorted(rows, key=lambda s: (s.submission_date, s.id), reverse=True)

    def list_all(self):
        self.calls.append("list_all")
        return self._newest_first(self._rows.values())

    def get_by_id(self, submission_id: int) -> Optional[Submission]:
        self.calls.append("get_by_id")
        return self._rows.get(int(submission_id))

    def search(self, term: str):
        self.calls.append("search")
        t = term.lower()
        return self._newest_first(
            s for s in self._rows.values() if t in s.employee_id.lower() or t in s.full_name.lower()
        )

    def update_status(self, submission_id: int, status: SubmissionStatus) -> Optional[Submission]:
        self.calls.append("update_status")
        sub = self._rows.get(int(submission_id))
        if not sub:
            return None
        sub = replace(sub, status=status)
        self._rows[sub.id] = sub
        return sub

    def delete_by_id(self, submission_id: int) -> bool:
        self.calls.append("delete_by_id")
        return self._rows.pop(int(submission_id), None) is not None

    def delete_many(self, submission_ids) -> int:
        self.calls.append("delete_many")
        return sum(1 for i in submission_ids if self._rows.pop(int(i), None) is not None)

    def clear_all(self) -> int:
        self.calls.append("clear_all")
        n = len(self._rows)
        self._rows.clear()
        return n


def make_payload(today: date, **overrides) -> dict:
    payload = {
        "employeeId": "EMP001",
        "fullName": "John Carter",
        "email": "john.carter@example.com",
        "department": "Engineering",
        "designation": "Backend Developer",
        "joiningDate": (today - timedelta(days=400)).isoformat(),
        "lastDay": (today + timedelta(days=14)).isoformat(),
        "laptop": "MacBook Pro 14",
        "laptopCondition": "Good",
        "accessCard": "Returned",
        "currentProjects": "Payroll migration",
        "pendingTasks": "Hand over on-call runbook",
        "reasonForLeaving": "Relocation",
        "overallExperience": "4",
        "feedback": "Great team",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def repo() -> InMemorySubmissions:
    return InMemorySubmissions()


@pytest.fixture
def service(repo) -> SubmissionService:
    return SubmissionService(repo)


@pytest.fixture
def app(service):
    settings = SimpleNamespace(SECRET_KEY="test-secret", DEBUG=False, TESTING=True, LOG_LEVEL="WARNING", CORS_ORIGINS="*")
    return create_app(settings=settings, container=Container(submission_service=service))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def payload_factory():
    return make_payload
