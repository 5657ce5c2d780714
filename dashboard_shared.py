"""
Shared rendering utilities for the Employee Management page.

Provides: global CSS injection, title/heading/footer rendering, inline field
errors, date formatting and the employee table DataFrame.
"""

import html
from urllib.parse import urlparse

import pandas as pd
import streamlit as st

from config import APP_VERSION, BACKEND_URL, DATE_DISPLAY_FORMAT
from employee_schema import Employee, parse_calendar_date

COLORS = {
    "header": "#1A5276",
    "error": "#b71c1c",
    "table_bg": "#fff",
}

TABLE_COLUMNS = [
    ("name", "Name"),
    ("employee_id", "Employee ID"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("department", "Department"),
    ("date_of_joining", "Date of Joining"),
    ("role", "Role"),
]


# =====================================================================
# FORMATTERS
# =====================================================================

def format_joining_date(value, fmt=DATE_DISPLAY_FORMAT):
    """Format a record's date_of_joining using its own calendar date.

    Values that do not parse are shown as-is; missing values as ''.
    """
    if value is None or value == "":
        return ""
    parsed = parse_calendar_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(fmt)


def employee_table(employees: list[Employee]) -> pd.DataFrame:
    """Build the display table: one row per record, indexed by its identifier.

    Records without an identifier fall back to their list position.
    """
    rows = []
    keys = []
    for pos, emp in enumerate(employees):
        row = {label: (getattr(emp, field) or "") for field, label in TABLE_COLUMNS}
        row["Date of Joining"] = format_joining_date(emp.date_of_joining)
        rows.append(row)
        keys.append(emp.id if emp.id is not None else pos)
    return pd.DataFrame(rows, columns=[label for _, label in TABLE_COLUMNS], index=pd.Index(keys, name="id"))


# =====================================================================
# RENDERING
# =====================================================================

def inject_global_styles():
    """Inject the shared CSS styles into the page."""
    st.markdown(f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Jost:wght@400;600;700&display=swap');

        html, body, [class*="st-"], .stMarkdown, .stSelectbox,
        h1, h2, h3, h4, h5, h6, p, label {{
            font-family: 'Jost', 'Futura', 'Trebuchet MS', sans-serif !important;
        }}
        /* Preserve Material Symbols ligature rendering */
        [data-testid="stIconMaterial"],
        [class*="material-symbols"] {{
            font-family: 'Material Symbols Rounded' !important;
        }}

        .stApp {{
            background-color: #F7F5F0;
        }}

        div[data-testid="stForm"] {{
            background: #fff;
            border-radius: 0.75rem;
            box-shadow: 0 2px 8px rgba(0,0,0,0.10);
        }}
        div[data-testid="stDataFrame"] {{
            background: {COLORS["table_bg"]};
            border-radius: 0.75rem;
            box-shadow: 0 2px 8px rgba(0,0,0,0.10);
            padding: 0.6rem;
        }}

        small.field-error {{
            color: {COLORS["error"]};
            font-size: 0.8rem;
        }}
    </style>
    """, unsafe_allow_html=True)


def render_page_title(text, color=COLORS["header"]):
    """Render a centered page title with consistent styling."""
    st.markdown(
        f'<h1 style="text-align:center; color:{color}; font-weight:700; '
        f'font-size:1.8rem; margin:0.8rem 0 0.6rem 0; letter-spacing:0.02em;">'
        f'{html.escape(text)}</h1>',
        unsafe_allow_html=True,
    )


def render_field_error(message):
    """Small red text under an input; renders nothing when *message* is empty."""
    if not message:
        return
    st.markdown(
        f'<small class="field-error">{html.escape(message)}</small>',
        unsafe_allow_html=True,
    )


def render_footer():
    """Render the standard page footer with version and backend host."""
    st.markdown("---")
    host = urlparse(BACKEND_URL).netloc or BACKEND_URL or "not configured"
    st.caption(f"v{APP_VERSION} · Employee Service: {host}")
