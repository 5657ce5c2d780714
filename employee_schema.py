"""Pydantic schemas for employee drafts and records, plus the draft validator.

``validate`` is the single entry point used by the form: it takes whatever the
widgets hold (missing keys, ``None``, wrong types) and returns either a
normalized ``EmployeeDraft`` or one error message per failing field.
"""
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from config import DEPARTMENTS

FIELDS = ("name", "employee_id", "email", "phone", "department", "date_of_joining", "role")

FIELD_LABELS = {
    "name": "Name",
    "employee_id": "Employee ID",
    "email": "Email",
    "phone": "Phone",
    "department": "Department",
    "date_of_joining": "Date of Joining",
    "role": "Role",
}

EMPLOYEE_ID_MAX_LENGTH = 10

# ASCII only, always used with fullmatch (``$`` would allow a trailing newline)
_EMPLOYEE_ID_RE = re.compile(r"[a-zA-Z0-9]+")
_PHONE_RE = re.compile(r"[0-9]{10}")


def _fail(message: str):
    # PydanticCustomError keeps the message verbatim (no "Value error, " prefix)
    raise PydanticCustomError("employee_field", message)


def _required_text(value: Any, name: str) -> str:
    """Reject missing/empty values and non-strings; whitespace is kept as typed."""
    label = FIELD_LABELS[name]
    if value is None or value == "":
        _fail(f"{label} is required")
    if not isinstance(value, str):
        _fail(f"{label} must be text")
    return value


def parse_calendar_date(value: Any) -> date | None:
    """Return the calendar date *value* names, or None if it names none.

    Datetimes keep their own calendar date; they are never shifted to UTC first.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


class EmployeeDraft(BaseModel):
    """A draft that passed every field rule (the normalized draft)."""

    name: str
    employee_id: str
    email: str
    phone: str
    department: str
    date_of_joining: date
    role: str

    @field_validator("name", "role", mode="before")
    @classmethod
    def _check_required(cls, v, info: ValidationInfo):
        return _required_text(v, info.field_name)

    @field_validator("employee_id", mode="before")
    @classmethod
    def _check_employee_id(cls, v):
        v = _required_text(v, "employee_id")
        if not _EMPLOYEE_ID_RE.fullmatch(v):
            _fail("ID must be alphanumeric")
        if len(v) > EMPLOYEE_ID_MAX_LENGTH:
            _fail(f"ID must be at most {EMPLOYEE_ID_MAX_LENGTH} characters")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, v):
        v = _required_text(v, "email")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            _fail("Invalid email format")
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def _check_phone(cls, v):
        v = _required_text(v, "phone")
        if not _PHONE_RE.fullmatch(v):
            _fail("Phone number must be 10 digits")
        return v

    @field_validator("department", mode="before")
    @classmethod
    def _check_department(cls, v):
        v = _required_text(v, "department")
        if v not in DEPARTMENTS:
            _fail(f"Department must be one of {', '.join(DEPARTMENTS)}")
        return v

    @field_validator("date_of_joining", mode="before")
    @classmethod
    def _check_date_of_joining(cls, v, info: ValidationInfo):
        if v is None or v == "":
            _fail("Date of Joining is required")
        parsed = parse_calendar_date(v)
        if parsed is None:
            _fail("Invalid date")
        today = (info.context or {}).get("today") or date.today()
        if parsed > today:
            _fail("Date cannot be in the future")
        return parsed

    def to_payload(self) -> dict:
        """JSON body for POST /addEmployee (date as YYYY-MM-DD)."""
        payload = self.model_dump()
        payload["date_of_joining"] = self.date_of_joining.isoformat()
        return payload


@dataclass
class ValidationResult:
    draft: EmployeeDraft | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.draft is not None


def validate(draft: Mapping[str, Any], today: date | None = None) -> ValidationResult:
    """Validate every field of *draft* and collect one message per failure.

    *today* pins the "not in the future" boundary; defaults to the local date
    at call time.
    """
    data = {name: draft.get(name) for name in FIELDS}
    try:
        return ValidationResult(draft=EmployeeDraft.model_validate(data, context={"today": today}))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            name = str(err["loc"][0]) if err["loc"] else "__all__"
            errors.setdefault(name, err["msg"])
        return ValidationResult(errors=errors)


class Employee(BaseModel):
    """An employee record as returned by GET /getEmployees.

    The backend owns this shape; only the displayed fields are read and any
    extras are ignored.  ``id`` is accepted as ``id`` or ``_id``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    name: str | None = None
    employee_id: str | None = None
    email: str | None = None
    phone: str | None = None
    department: str | None = None
    date_of_joining: str | None = None  # ISO 8601 date or datetime
    role: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _as_row_key(cls, v):
        """Any identifier is accepted; it is only ever used as a row key."""
        if v is None or isinstance(v, (int, str)):
            return v
        if isinstance(v, dict) and len(v) == 1 and "$oid" in v:
            return str(v["$oid"])
        return str(v)

    @field_validator(*FIELDS, mode="before")
    @classmethod
    def _as_text(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)
