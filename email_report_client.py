"""
Email Report Client
Fetches the email-sent report from the reporting API and returns canonical records.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from config import (
    EMAIL_REPORT_API_URL,
    EMAIL_REPORT_FROM_DATE,
    EMAIL_REPORT_TIMEOUT,
    EMAIL_REPORT_TO_DATE,
)
from email_records import EmailRecord, normalize_records, sort_records

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base error for a failed email report fetch."""


class NetworkError(FetchError):
    """The request to the report endpoint could not be completed."""


class ResponseFormatError(FetchError):
    """The endpoint answered, but not with a successful, well-formed report."""


class EmailReportClient:
    """Client for the email-sent report endpoint."""

    def __init__(
        self,
        url: str = EMAIL_REPORT_API_URL,
        from_date: str = EMAIL_REPORT_FROM_DATE,
        to_date: str = EMAIL_REPORT_TO_DATE,
        timeout: Optional[float] = EMAIL_REPORT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the report client.

        Args:
            url: Report endpoint URL
            from_date: Start of the report window (YYYY-MM-DD)
            to_date: End of the report window (YYYY-MM-DD)
            timeout: Request timeout in seconds, None to disable
            transport: Optional httpx transport, used to simulate the endpoint
        """
        self.url = url
        self.params = {"fromdate": from_date, "todate": to_date}
        self.timeout = timeout
        self.transport = transport

    async def fetch_raw_records(self) -> List[Any]:
        """
        Request the report and extract the raw 'result' array.

        Raises:
            NetworkError: If the request could not be completed
            ResponseFormatError: If the status is not 2xx or the body is not the expected envelope
        """
        logger.info(f"Fetching email report: url={self.url}, params={self.params}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url, params=self.params)
        except httpx.RequestError as e:
            raise NetworkError(f"Email report request failed: {e!s}") from e

        if not response.is_success:
            raise ResponseFormatError(f"Email report request returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseFormatError("Email report body is not valid JSON") from e

        return self._extract_result(payload)

    @staticmethod
    def _extract_result(payload: Any) -> List[Any]:
        if not isinstance(payload, dict):
            raise ResponseFormatError(
                f"Email report body must be an object, got {type(payload).__name__}"
            )
        result = payload.get("result")
        if not isinstance(result, list):
            raise ResponseFormatError("Email report body has no 'result' list")
        return result

    async def fetch_records(self) -> Tuple[EmailRecord, ...]:
        """
        Fetch the report and return its records normalized and sorted, most recent first.

        Raises:
            FetchError: If the report could not be retrieved
        """
        raw_records = await self.fetch_raw_records()
        records = sort_records(normalize_records(raw_records))
        logger.info(f"Retrieved {len(records)} email records")
        return records


def summarize_request(client: EmailReportClient) -> Dict[str, Any]:
    """Describe the configured request, for the dashboard debug panel."""
    return {"url": client.url, **client.params, "timeout": client.timeout}
