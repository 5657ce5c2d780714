"""UI state for the employee page, independent of Streamlit.

``EmployeeForm`` owns the draft, its per-field errors and the form's
visibility; ``submit_employee`` sends a validated draft to the service;
``EmployeeDirectory`` owns the fetched list and the details toggle.

Notifications go through a ``notify(level, message)`` callable with level
``"success"`` or ``"error"`` so the page decides how to show them.
"""
import logging
from datetime import date
from enum import Enum
from typing import Callable

from employee_client import EmployeeServiceClient, EmployeeServiceError
from employee_schema import FIELDS, Employee, EmployeeDraft, validate

logger = logging.getLogger("employee_ui.state")

Notifier = Callable[[str, str], None]

SUCCESS_MESSAGE = "Employee added successfully!"


class FormState(Enum):
    HIDDEN = "hidden"
    OPEN = "open"
    SUBMITTING = "submitting"


class SubmitOutcome(Enum):
    INVALID = "invalid"  # field errors stored, nothing sent
    CREATED = "created"
    FAILED = "failed"  # service error, draft kept
    BUSY = "busy"  # a create request is already in flight


class DetailsState(Enum):
    HIDDEN = "hidden"
    LOADING = "loading"
    SHOWN = "shown"
    LOAD_FAILED = "load_failed"  # rendered like HIDDEN


# =====================================================================
# FORM CONTROLLER
# =====================================================================

class EmployeeForm:
    def __init__(self):
        self.state = FormState.HIDDEN
        self.draft: dict = {}
        self.errors: dict[str, str] = {}

    @property
    def is_visible(self) -> bool:
        return self.state is not FormState.HIDDEN

    def show(self) -> None:
        if self.state is FormState.HIDDEN:
            self.state = FormState.OPEN
            logger.info("Form opened")

    def update_field(self, name: str, value) -> None:
        if name not in FIELDS:
            raise KeyError(name)
        self.draft[name] = value

    def reset(self) -> None:
        self.draft = {}
        self.errors = {}

    def cancel(self) -> None:
        self.state = FormState.HIDDEN

    def submit(self, client: EmployeeServiceClient, notify: Notifier, today: date | None = None) -> SubmitOutcome:
        """Validate the current draft and, if it passes, create the employee."""
        if self.state is FormState.SUBMITTING:
            logger.info("Submit ignored: create request already in flight")
            return SubmitOutcome.BUSY

        result = validate(self.draft, today=today)
        if not result.ok:
            self.errors = result.errors
            logger.info("Draft rejected: %s", ", ".join(sorted(result.errors)))
            return SubmitOutcome.INVALID

        self.errors = {}
        return submit_employee(self, result.draft, client, notify)


# =====================================================================
# SUBMISSION HANDLER
# =====================================================================

def submit_employee(form: EmployeeForm, draft: EmployeeDraft, client: EmployeeServiceClient,
                    notify: Notifier) -> SubmitOutcome:
    """Send one create request; on success clear and hide *form*."""
    payload = draft.to_payload()
    form.state = FormState.SUBMITTING
    try:
        client.add_employee(payload)
    except EmployeeServiceError as exc:
        notify("error", f"Error: {exc.message}")
        return SubmitOutcome.FAILED
    finally:
        if form.state is FormState.SUBMITTING:
            form.state = FormState.OPEN

    logger.info("Created employee %s", payload["employee_id"])
    notify("success", SUCCESS_MESSAGE)
    form.reset()
    form.cancel()
    return SubmitOutcome.CREATED


# =====================================================================
# LIST FETCHER / TOGGLE
# =====================================================================

class EmployeeDirectory:
    def __init__(self):
        self.state = DetailsState.HIDDEN
        self.employees: list[Employee] = []

    @property
    def is_shown(self) -> bool:
        return self.state is DetailsState.SHOWN

    def toggle(self, client: EmployeeServiceClient, notify: Notifier) -> DetailsState:
        """Hide the table if shown, otherwise fetch the list and show it."""
        if self.state is DetailsState.SHOWN:
            self.state = DetailsState.HIDDEN
            self.employees = []
            return self.state
        if self.state is DetailsState.LOADING:
            return self.state

        self.state = DetailsState.LOADING
        try:
            employees = client.get_employees()
        except EmployeeServiceError as exc:
            self.state = DetailsState.LOAD_FAILED
            notify("error", f"Error fetching employees: {exc.message}")
            return self.state
        finally:
            if self.state is DetailsState.LOADING:
                self.state = DetailsState.HIDDEN

        self.employees = employees
        self.state = DetailsState.SHOWN
        logger.info("Showing %d employees", len(employees))
        return self.state
