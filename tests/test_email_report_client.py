"""
Tests for the email report client.
"""

import httpx
import pytest

from email_report_client import (
    EmailReportClient,
    FetchError,
    NetworkError,
    ResponseFormatError,
    summarize_request,
)


class TestFetchRecords:
    """Tests for fetching, normalizing and ordering the report."""

    @pytest.mark.asyncio
    async def test_success_returns_sorted_records(self, json_client, sample_raw_records):
        """Test that a good report comes back normalized, most recent first."""
        client = json_client({"result": sample_raw_records})

        records = await client.fetch_records()

        assert [r.company_name for r in records] == ["Beta", "Acme"]
        assert records[0].email is None

    @pytest.mark.asyncio
    async def test_request_uses_configured_url_and_window(self, make_client):
        """Test that the report window is sent as query parameters."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"result": []})

        records = await make_client(handler).fetch_records()

        assert records == ()
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.host == "reports.example.com"
        assert seen[0].url.path == "/api/GetEmailSent"
        assert seen[0].url.params["fromdate"] == "2023-12-31"
        assert seen[0].url.params["todate"] == "2026-12-31"

    @pytest.mark.asyncio
    async def test_network_failure_raises_network_error(self, failing_client):
        """Test that connection errors are wrapped."""
        with pytest.raises(NetworkError) as exc_info:
            await failing_client.fetch_records()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_raises_network_error(self, make_client):
        """Test that a timed out request is a network error."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(NetworkError):
            await make_client(handler).fetch_records()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_success_status_raises_format_error(self, json_client, status_code):
        """Test that non-2xx answers are rejected even with a valid envelope."""
        client = json_client({"result": []}, status_code=status_code)

        with pytest.raises(ResponseFormatError, match=str(status_code)):
            await client.fetch_records()

    @pytest.mark.asyncio
    async def test_invalid_json_raises_format_error(self, make_client):
        """Test that a non-JSON body is rejected."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(ResponseFormatError, match="not valid JSON"):
            await make_client(handler).fetch_records()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            [],
            "result",
            {},
            {"result": None},
            {"result": {"Email": "a@x.com"}},
            {"data": []},
        ],
    )
    async def test_bad_envelope_raises_format_error(self, json_client, body):
        """Test that bodies without a 'result' list are rejected."""
        with pytest.raises(ResponseFormatError):
            await json_client(body).fetch_records()

    @pytest.mark.asyncio
    async def test_errors_share_a_base_class(self, failing_client, json_client):
        """Test that callers can catch every failure as FetchError."""
        for client in (failing_client, json_client({}, status_code=500)):
            with pytest.raises(FetchError):
                await client.fetch_records()


def test_summarize_request(report_url):
    """Test the debug description of the configured request."""
    client = EmailReportClient(url=report_url, from_date="2024-01-01", to_date="2024-12-31", timeout=10.0)

    assert summarize_request(client) == {
        "url": report_url,
        "fromdate": "2024-01-01",
        "todate": "2024-12-31",
        "timeout": 10.0,
    }
