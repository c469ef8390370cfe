# CHANGELOG
# - v0.2: Report window and request timeout can be overridden in secrets.
# - v0.1: Consolidated secrets access for the email report endpoint.

# config.py - Consolidated Secrets Access and Configuration

import streamlit as st
from streamlit.errors import StreamlitAPIException


def _load_app_credentials():
    """Return the 'app_credentials' secrets section, or {} when no secrets file exists"""
    try:
        return dict(st.secrets.get("app_credentials", {}))
    except (FileNotFoundError, StreamlitAPIException):
        return {}


# --- SECRETS CONFIGURATION ---
APP_CREDENTIALS = _load_app_credentials()

# Helper function for safe type conversion with fallback defaults
def _safe_float(value, default):
    """Safely convert to float with fallback to default on error"""
    try:
        return float(value) if value is not None else default
    except (ValueError, TypeError):
        return default

# === EMAIL REPORT ENDPOINT ===
# The report endpoint and its date window are fixed for a deployment, not derived at runtime.
EMAIL_REPORT_API_URL = APP_CREDENTIALS.get(
    "EMAIL_REPORT_API_URL",
    "https://prognosis-api.leadwayhealth.com/api/EnrolleeClaims/GetEmailSent",
)
EMAIL_REPORT_FROM_DATE = APP_CREDENTIALS.get("EMAIL_REPORT_FROM_DATE", "2023-12-31")
EMAIL_REPORT_TO_DATE = APP_CREDENTIALS.get("EMAIL_REPORT_TO_DATE", "2026-12-31")

EMAIL_REPORT_TIMEOUT = _safe_float(APP_CREDENTIALS.get("EMAIL_REPORT_TIMEOUT"), 30.0)  # seconds

# --- UI CONFIGURATION ---
DASHBOARD_LANGUAGE = APP_CREDENTIALS.get("DASHBOARD_LANGUAGE", "en")
