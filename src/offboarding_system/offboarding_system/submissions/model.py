from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core.enums import SubmissionStatus


@dataclass(frozen=True)
class NewSubmission:
    """Validated creation input. Built only by ``validate_new_submission``."""

    employee_id: str
    full_name: str
    email: str
    department: str
    designation: str
    joining_date: date
    last_day: date
    laptop: str
    laptop_condition: str
    access_card: str
    current_projects: str
    pending_tasks: str
    reason_for_leaving: str
    overall_experience: int
    feedback: Optional[str] = None


@dataclass(frozen=True)
class Submission:
    """One stored offboarding submission."""

    id: int
    employee_id: str
    full_name: str
    email: str
    department: str
    designation: str
    joining_date: date
    last_day: date
    laptop: str
    laptop_condition: str
    access_card: str
    current_projects: str
    pending_tasks: str
    reason_for_leaving: str
    overall_experience: int
    feedback: Optional[str]
    status: SubmissionStatus
    submission_date: datetime

    @classmethod
    def from_row(cls, r: Dict[str, Any]) -> "Submission":
        return cls(
            id=int(r["id"]),
            employee_id=r["employee_id"],
            full_name=r["full_name"],
            email=r["email"],
            department=r["department"],
            designation=r["designation"],
            joining_date=r["joining_date"],
            last_day=r["last_day"],
            laptop=r["laptop"],
            laptop_condition=r["laptop_condition"],
            access_card=r["access_card"],
            current_projects=r["current_projects"],
            pending_tasks=r["pending_tasks"],
            reason_for_leaving=r["reason_for_leaving"],
            overall_experience=int(r["overall_experience"]),
            feedback=r.get("feedback"),
            status=SubmissionStatus(r["status"]),
            submission_date=r["submission_date"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
            "designation": self.designation,
            "joining_date": self.joining_date.strftime("%Y-%m-%d"),
            "last_day": self.last_day.strftime("%Y-%m-%d"),
            "laptop": self.laptop,
            "laptop_condition": self.laptop_condition,
            "access_card": self.access_card,
            "current_projects": self.current_projects,
            "pending_tasks": self.pending_tasks,
            "reason_for_leaving": self.reason_for_leaving,
            "overall_experience": self.overall_experience,
            "feedback": self.feedback,
            "status": self.status.value,
            "submission_date": self.submission_date.isoformat(),
        }
