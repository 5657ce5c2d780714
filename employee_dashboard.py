"""
Employee Management — Streamlit front end for the external Employee Service.
Add-employee form with inline validation plus a toggleable employee table.

Run with: python -m streamlit run employee_dashboard.py
"""

import streamlit as st

from config import (
    APP_TITLE,
    BACKEND_URL,
    DEPARTMENTS,
    EARLIEST_PICKER_DATE,
    REQUEST_TIMEOUT,
    REQUEST_TIMEOUT_ERROR,
)
from dashboard_shared import (
    employee_table,
    inject_global_styles,
    render_field_error,
    render_footer,
    render_page_title,
)
from employee_client import EmployeeServiceClient
from employee_schema import FIELD_LABELS, FIELDS
from employee_state import EmployeeDirectory, EmployeeForm, SubmitOutcome
from logger_config import setup_logger

logger = setup_logger("employee_ui")

# =====================================================================
# PAGE SETUP
# =====================================================================

st.set_page_config(
    page_title=APP_TITLE,
    page_icon="🗂️",
    layout="wide",
)
inject_global_styles()

if not BACKEND_URL:
    st.error(
        "Employee Service URL is not configured.\n\n"
        "Set EMS_BACKEND_URL (or BACKEND_URL in .streamlit/secrets.toml) and reload."
    )
    st.stop()

if REQUEST_TIMEOUT_ERROR:
    st.error(f"Invalid configuration: {REQUEST_TIMEOUT_ERROR}. Fix it and reload.")
    st.stop()


@st.cache_resource
def get_client():
    """One HTTP client per server process, shared by every session."""
    logger.info(f"Employee Service at {BACKEND_URL}")
    return EmployeeServiceClient(BACKEND_URL, timeout=REQUEST_TIMEOUT)


client = get_client()

# =====================================================================
# SESSION STATE
# =====================================================================

if "employee_form" not in st.session_state:
    st.session_state["employee_form"] = EmployeeForm()
if "employee_directory" not in st.session_state:
    st.session_state["employee_directory"] = EmployeeDirectory()
if "notices" not in st.session_state:
    st.session_state["notices"] = []

form = st.session_state["employee_form"]
directory = st.session_state["employee_directory"]

# Widget value when the draft has nothing for the field
_EMPTY_VALUES = {"date_of_joining": None}


def _widget_key(name):
    return f"field_{name}"


def _notify(level, message):
    """Queue a notification; shown once at the top of the next run."""
    st.session_state["notices"].append((level, message))


def _seed_widgets():
    """Restore widget values from the draft.

    Streamlit forgets the state of widgets that were not rendered, so a
    re-opened form is refilled from the draft it kept.
    """
    for name in FIELDS:
        key = _widget_key(name)
        if key not in st.session_state:
            st.session_state[key] = form.draft.get(name, _EMPTY_VALUES.get(name, ""))


def _clear_widgets():
    for name in FIELDS:
        st.session_state.pop(_widget_key(name), None)


def _sync_draft():
    for name in FIELDS:
        form.update_field(name, st.session_state.get(_widget_key(name)))


# =====================================================================
# CALLBACKS (run before the rerun that renders their result)
# =====================================================================

def _on_submit():
    _sync_draft()
    if form.submit(client, _notify) is SubmitOutcome.CREATED:
        _clear_widgets()


def _on_reset():
    form.reset()
    _clear_widgets()


def _on_cancel():
    _sync_draft()
    form.cancel()


def _on_toggle_details():
    directory.toggle(client, _notify)


# =====================================================================
# LAYOUT
# =====================================================================

render_page_title(APP_TITLE)

for level, message in st.session_state["notices"]:
    if level == "success":
        st.success(message)
    else:
        st.error(message)
st.session_state["notices"] = []

a1, a2, _ = st.columns([1, 1, 4])
with a1:
    st.button("Add Employee", key="add_employee_btn", on_click=form.show, use_container_width=True)
with a2:
    st.button(
        "Hide Details" if directory.is_shown else "Get Details",
        key="details_toggle_btn",
        on_click=_on_toggle_details,
        use_container_width=True,
    )

# ─── Add-employee form ────────────────────────────────────────────────
if form.is_visible:
    _seed_widgets()
    with st.form("employee_form"):
        for name in ("name", "employee_id", "email", "phone"):
            st.text_input(FIELD_LABELS[name], key=_widget_key(name))
            render_field_error(form.errors.get(name))

        st.selectbox(
            FIELD_LABELS["department"],
            options=["", *DEPARTMENTS],
            format_func=lambda d: d or "Select Department",
            key=_widget_key("department"),
        )
        render_field_error(form.errors.get("department"))

        st.date_input(
            FIELD_LABELS["date_of_joining"],
            value=None,
            min_value=EARLIEST_PICKER_DATE,
            key=_widget_key("date_of_joining"),
        )
        render_field_error(form.errors.get("date_of_joining"))

        st.text_input(FIELD_LABELS["role"], key=_widget_key("role"))
        render_field_error(form.errors.get("role"))

        b1, b2, b3 = st.columns(3)
        with b1:
            st.form_submit_button("Submit", type="primary", on_click=_on_submit, use_container_width=True)
        with b2:
            st.form_submit_button("Reset", on_click=_on_reset, use_container_width=True)
        with b3:
            st.form_submit_button("Cancel", on_click=_on_cancel, use_container_width=True)

# ─── Employee table ───────────────────────────────────────────────────
if directory.is_shown:
    if directory.employees:
        st.dataframe(
            employee_table(directory.employees),
            hide_index=True,
            use_container_width=True,
        )
    else:
        st.info("No employees found.")

render_footer()
