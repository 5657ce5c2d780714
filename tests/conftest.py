"""Shared fixtures for the Employee Management test suite."""

import json
from datetime import date, timedelta
from pathlib import Path

import httpx
import pytest
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from employee_client import EmployeeServiceClient

BASE_URL = "http://employees.local/api"


# ── Drafts ───────────────────────────────────────────────────────────

@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def tomorrow(today) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def valid_draft(today) -> dict:
    """The Jane Doe draft: every field passes its rule."""
    return {
        "name": "Jane Doe",
        "employee_id": "EMP01",
        "email": "jane@co.com",
        "phone": "9876543210",
        "department": "Engineering",
        "date_of_joining": today,
        "role": "Engineer",
    }


# ── Fake Employee Service ────────────────────────────────────────────

class FakeEmployeeService:
    """Records every request and answers from a per-path queue of responses.

    A queued value may be an ``httpx.Response`` or an exception instance,
    which is raised instead (transport failures).
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, list] = {"/api/addEmployee": [], "/api/getEmployees": []}

    def reply(self, path, response):
        self.responses[f"/api{path}"].append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.responses.get(request.url.path)
        if not queue:
            return httpx.Response(404, json={"message": "Not found"})
        answer = queue.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def bodies(self, path):
        return [json.loads(r.content) for r in self.requests if r.url.path == f"/api{path}"]

    def count(self, path=None):
        if path is None:
            return len(self.requests)
        return sum(1 for r in self.requests if r.url.path == f"/api{path}")


@pytest.fixture
def service() -> FakeEmployeeService:
    return FakeEmployeeService()


@pytest.fixture
def client(service):
    with EmployeeServiceClient(BASE_URL, transport=httpx.MockTransport(service.handler)) as c:
        yield c


# ── Notifications ────────────────────────────────────────────────────

@pytest.fixture
def notices() -> list:
    return []


@pytest.fixture
def notify(notices):
    def _notify(level, message):
        notices.append((level, message))
    return _notify
