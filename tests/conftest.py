"""
Pytest configuration and fixtures for the email dashboard tests.
"""

import json
from typing import Any, Dict, List

import httpx
import pytest

from email_report_client import EmailReportClient

TEST_REPORT_URL = "https://reports.example.com/api/GetEmailSent"


@pytest.fixture
def sample_raw_records() -> List[Dict[str, Any]]:
    """Return the two-record report used throughout the tests (oldest first)."""
    return [
        {
            "Email": "a@x.com",
            "CompanyName": "Acme",
            "FirstName": "A",
            "Surname": "B",
            "Status": "Sent",
            "SentEmail": 1,
            "NotSent": 0,
            "DateCreated": "2024-01-02",
        },
        {
            "Email": None,
            "CompanyName": "Beta",
            "FirstName": "C",
            "Surname": "D",
            "Status": "NotSent",
            "SentEmail": 0,
            "NotSent": 1,
            "DateCreated": "2024-03-01",
        },
    ]


@pytest.fixture
def mixed_raw_records() -> List[Dict[str, Any]]:
    """Return a larger report with ties, undated rows and messy counters."""
    return [
        {"Email": "ops@gamma.io", "CompanyName": "Gamma Ltd", "FirstName": "Ngozi", "Surname": "Okafor",
         "Status": "Sent", "SentEmail": 3, "NotSent": 0, "DateCreated": "2024-02-10T09:30:00"},
        {"Email": "", "CompanyName": "Delta", "FirstName": "Tunde", "Surname": "Bello",
         "Status": "NotSent", "SentEmail": None, "NotSent": "2", "DateCreated": "not a date"},
        {"Email": "hr@acme.com", "CompanyName": "Acme", "FirstName": "Ada", "Surname": "Eze",
         "Status": "Sent", "SentEmail": 2.0, "NotSent": float("nan"), "DateCreated": "2024-02-10T09:30:00"},
        {"Email": "ceo@omega.ng", "CompanyName": "Omega", "FirstName": "Bola", "Surname": "Adeyemi",
         "Status": "Sent", "SentEmail": "many", "NotSent": -4, "DateCreated": "2024-05-01T12:00:00Z"},
        {"CompanyName": "Sigma", "FirstName": "Chi", "Surname": "Obi", "Status": "NotSent",
         "NotSent": 1, "DateCreated": "2023-12-31"},
    ]


def _build_client(handler) -> EmailReportClient:
    return EmailReportClient(
        url=TEST_REPORT_URL,
        from_date="2023-12-31",
        to_date="2026-12-31",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def report_url() -> str:
    """Return the endpoint URL the test clients are configured with."""
    return TEST_REPORT_URL


@pytest.fixture
def make_client():
    """Return a factory for clients whose requests are answered by a handler."""
    return _build_client


@pytest.fixture
def json_client():
    """Return a factory for clients answering with a fixed status and JSON body."""
    def factory(body: Any, status_code: int = 200) -> EmailReportClient:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"),
                                  headers={"Content-Type": "application/json"})
        return _build_client(handler)
    return factory


@pytest.fixture
def failing_client() -> EmailReportClient:
    """Return a client whose request fails at the network level."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)
    return _build_client(handler)
