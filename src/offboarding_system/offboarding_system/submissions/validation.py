"""Creation rules for offboarding submissions.

The date rules are applied literally:

* joining date within [1970-01-01, today]
* last working day within [today, today + 30 days], strictly after the
  joining date and no earlier than joining date + 90 days

For a recent joining date the two last-day bounds cannot both hold
(joining + 90 > today + 30), so such submissions are always rejected.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Mapping

from ..common.datetime_utils import parse_iso_date
from ..common.validators import clean_text, missing_fields, optional_text
from ..core.constants import (
    EARLIEST_JOINING_DATE,
    EMPLOYEE_ID_MAX,
    INT_MAX,
    INT_MIN,
    LAST_DAY_WINDOW_DAYS,
    LONG_TEXT_MAX,
    MIN_NOTICE_DAYS,
    NAME_MAX,
    SHORT_TEXT_MAX,
)
from ..core.exceptions import ValidationError
from .model import NewSubmission

REQUIRED_FIELDS = (
    "employeeId",
    "fullName",
    "email",
    "department",
    "designation",
    "joiningDate",
    "lastDay",
    "laptop",
    "laptopCondition",
    "accessCard",
    "currentProjects",
    "pendingTasks",
    "reasonForLeaving",
    "overallExperience",
)

MISSING_FIELDS_MESSAGE = "All required fields must be provided"
INVALID_JOINING_DATE_MESSAGE = "Invalid joining date"
INVALID_LAST_DAY_MESSAGE = "Invalid last working day"
INVALID_EXPERIENCE_MESSAGE = "Invalid overall experience"


def _parse_date(value: Any, message: str) -> date:
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(message)


def _parse_experience(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(INVALID_EXPERIENCE_MESSAGE)
    try:
        result = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            result = int(float(value))
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(INVALID_EXPERIENCE_MESSAGE)
    if not INT_MIN <= result <= INT_MAX:
        raise ValidationError(INVALID_EXPERIENCE_MESSAGE)
    return result


def check_joining_date(joining_date: date, *, today: date) -> None:
    if joining_date < EARLIEST_JOINING_DATE or joining_date > today:
        raise ValidationError(INVALID_JOINING_DATE_MESSAGE)


def check_last_day(last_day: date, *, joining_date: date, today: date) -> None:
    one_month_from_now = today + timedelta(days=LAST_DAY_WINDOW_DAYS)
    min_last_day = joining_date + timedelta(days=MIN_NOTICE_DAYS)

    if (
        last_day < today
        or last_day > one_month_from_now
        or last_day <= joining_date
        or last_day < min_last_day
    ):
        raise ValidationError(INVALID_LAST_DAY_MESSAGE)


def validate_new_submission(payload: Any, *, today: date) -> NewSubmission:
    """Check a raw creation payload and build the typed record to insert.

    Raises ValidationError with the user-facing message on the first failed rule.
    """

    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

    if missing_fields(data, REQUIRED_FIELDS):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    joining_date = _parse_date(data["joiningDate"], INVALID_JOINING_DATE_MESSAGE)
    last_day = _parse_date(data["lastDay"], INVALID_LAST_DAY_MESSAGE)

    check_joining_date(joining_date, today=today)
    check_last_day(last_day, joining_date=joining_date, today=today)

    return NewSubmission(
        employee_id=clean_text(data["employeeId"], "employeeId", max_length=EMPLOYEE_ID_MAX),
        full_name=clean_text(data["fullName"], "fullName", max_length=NAME_MAX),
        email=clean_text(data["email"], "email", max_length=NAME_MAX),
        department=clean_text(data["department"], "department", max_length=SHORT_TEXT_MAX),
        designation=clean_text(data["designation"], "designation", max_length=SHORT_TEXT_MAX),
        joining_date=joining_date,
        last_day=last_day,
        laptop=clean_text(data["laptop"], "laptop", max_length=SHORT_TEXT_MAX),
        laptop_condition=clean_text(data["laptopCondition"], "laptopCondition", max_length=SHORT_TEXT_MAX),
        access_card=clean_text(data["accessCard"], "accessCard", max_length=SHORT_TEXT_MAX),
        current_projects=clean_text(data["currentProjects"], "currentProjects", max_length=LONG_TEXT_MAX),
        pending_tasks=clean_text(data["pendingTasks"], "pendingTasks", max_length=LONG_TEXT_MAX),
        reason_for_leaving=clean_text(data["reasonForLeaving"], "reasonForLeaving", max_length=LONG_TEXT_MAX),
        overall_experience=_parse_experience(data["overallExperience"]),
        feedback=optional_text(data.get("feedback"), "feedback", max_length=LONG_TEXT_MAX),
    )
