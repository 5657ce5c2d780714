"""Centralized settings and constants with env-var overrides.

Every tunable lives here.  Override any setting via the corresponding EMS_*
environment variable (or a .env file next to this module).
"""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

# =====================================================================
# DIRECTORY ROOTS (derived from this file's location)
# =====================================================================

_SCRIPT_DIR = Path(__file__).resolve().parent

load_dotenv(_SCRIPT_DIR / ".env")

# =====================================================================
# ENVIRONMENT
# =====================================================================

EMS_ENV = os.environ.get("EMS_ENV", "production")  # production | development

APP_TITLE = "Employee Management"
APP_VERSION = "0.1.0"

# =====================================================================
# EMPLOYEE SERVICE
# =====================================================================


def _get_backend_url():
    """Load the Employee Service base URL from env vars or Streamlit secrets.

    REACT_APP_BACKEND_URL is honoured so an existing frontend .env can be reused.
    Returns empty string if nothing is configured.
    """
    url = os.environ.get("EMS_BACKEND_URL") or os.environ.get("REACT_APP_BACKEND_URL")
    if url:
        return url.rstrip("/")
    try:
        import streamlit as st

        return st.secrets.get("BACKEND_URL", "").rstrip("/")
    except Exception:
        return ""


BACKEND_URL = _get_backend_url()


def _get_request_timeout():
    """Seconds before a service call gives up, and an error for a bad setting.

    Unset means wait indefinitely (None).  An unusable value also yields None
    plus a message the page shows instead of starting.
    """
    raw = os.environ.get("EMS_REQUEST_TIMEOUT", "").strip()
    if not raw:
        return None, ""
    try:
        seconds = float(raw)
    except ValueError:
        return None, f"EMS_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}"
    if not seconds > 0:
        return None, f"EMS_REQUEST_TIMEOUT must be greater than 0, got {raw!r}"
    return seconds, ""


REQUEST_TIMEOUT, REQUEST_TIMEOUT_ERROR = _get_request_timeout()

# =====================================================================
# LOGGING CONFIGURATION
# =====================================================================

LOGS_PATH = Path(os.environ.get("EMS_LOGS", str(_SCRIPT_DIR / "logs")))
LOG_LEVEL = os.environ.get(
    "EMS_LOG_LEVEL",
    "DEBUG" if EMS_ENV == "development" else "INFO",
)

# =====================================================================
# BUSINESS CONSTANTS
# =====================================================================

DEPARTMENTS = ("HR", "Engineering", "Marketing", "Finance", "Operations")

# Lower bound of the date picker only (Streamlit otherwise stops 10 years back);
# validation itself has no lower bound
EARLIEST_PICKER_DATE = date(1900, 1, 1)

# strftime pattern for the Date of Joining column
DATE_DISPLAY_FORMAT = os.environ.get("EMS_DATE_FORMAT", "%m/%d/%Y")
