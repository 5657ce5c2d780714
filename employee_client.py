"""HTTP client for the external Employee Service.

Two endpoints, relative to the configured base URL:

    POST /addEmployee   create one record (JSON body)
    GET  /getEmployees  list every record (JSON array)

Every failure is raised as ``EmployeeServiceError`` so callers only ever catch
one exception type.
"""
import logging

import httpx
from pydantic import ValidationError

from employee_schema import Employee

logger = logging.getLogger("employee_ui.client")

_UNEXPECTED_RESPONSE = "Unexpected response from the employee service"


class EmployeeServiceError(Exception):
    """A create/read call that did not succeed.

    ``str(exc)`` is the user-facing message: the service's own ``message``
    when it sent one, otherwise a generic transport/status description.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_from_response(response: httpx.Response) -> EmployeeServiceError:
    message = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        message = body["message"]
    if message is None:
        message = f"Request failed with status code {response.status_code}"
    return EmployeeServiceError(message, status_code=response.status_code)


class EmployeeServiceClient:
    """Thin synchronous wrapper around an ``httpx.Client``.

    Args:
        base_url: Service root, e.g. ``https://hr.example.org/api``.
        timeout: Seconds per request; None waits indefinitely.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(self, base_url: str, timeout: float | None = None, transport: httpx.BaseTransport | None = None):
        if not base_url:
            raise ValueError("Employee Service base URL is not configured")
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise EmployeeServiceError(f"Could not reach the employee service: {exc}") from exc
        if not response.is_success:
            err = _error_from_response(response)
            logger.warning("%s %s -> %d: %s", method, path, response.status_code, err.message)
            raise err
        return response

    def add_employee(self, payload: dict) -> dict | None:
        """Create one employee; returns the decoded response body, if any."""
        response = self._request("POST", "/addEmployee", json=payload)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def get_employees(self) -> list[Employee]:
        """Fetch every employee record."""
        response = self._request("GET", "/getEmployees")
        try:
            body = response.json()
        except ValueError as exc:
            raise EmployeeServiceError(_UNEXPECTED_RESPONSE, status_code=response.status_code) from exc
        if not isinstance(body, list):
            raise EmployeeServiceError(_UNEXPECTED_RESPONSE, status_code=response.status_code)
        try:
            employees = [Employee.model_validate(item) for item in body]
        except ValidationError as exc:
            raise EmployeeServiceError(_UNEXPECTED_RESPONSE, status_code=response.status_code) from exc
        logger.debug("Fetched %d employees", len(employees))
        return employees
