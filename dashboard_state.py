"""
Dashboard State
Session state of the email dashboard: fetch status, records and search query,
with pure transitions and a controller that drives the one-shot fetch.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from email_records import EmailRecord
from email_report_client import EmailReportClient, FetchError
from email_search import filter_records
from email_stats import EmailTotals, aggregate_records

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch data."


class PipelineStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """Immutable snapshot of the dashboard pipeline."""

    status: PipelineStatus = PipelineStatus.IDLE
    records: Tuple[EmailRecord, ...] = ()
    query: str = ""
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.status is PipelineStatus.READY

    @property
    def totals(self) -> EmailTotals:
        """Totals over the full record set; zero unless ready."""
        if not self.is_ready:
            return EmailTotals()
        return aggregate_records(self.records)

    @property
    def visible_records(self) -> Tuple[EmailRecord, ...]:
        """Records matching the current query, in display order; empty unless ready."""
        if not self.is_ready:
            return ()
        return filter_records(self.records, self.query)


def start_loading(state: DashboardState) -> DashboardState:
    return replace(state, status=PipelineStatus.LOADING, records=(), error=None)


def mark_ready(state: DashboardState, records: Tuple[EmailRecord, ...]) -> DashboardState:
    return replace(state, status=PipelineStatus.READY, records=tuple(records), error=None)


def mark_error(state: DashboardState, message: str = FETCH_ERROR_MESSAGE) -> DashboardState:
    return replace(state, status=PipelineStatus.ERROR, records=(), error=message)


def set_query(state: DashboardState, query: str) -> DashboardState:
    return replace(state, query=query or "")


class DashboardController:
    """
    Owns the dashboard state for one session.

    load() performs the single report fetch; set_query() updates the search
    term. Fetch failures end in the error state rather than propagating.
    """

    def __init__(self, client: Optional[EmailReportClient] = None):
        self.client = client or EmailReportClient()
        self.state = DashboardState()

    async def load(self) -> DashboardState:
        if self.state.status is not PipelineStatus.IDLE:
            logger.info(f"Email report already requested (status={self.state.status.value}), skipping fetch")
            return self.state

        loading = start_loading(self.state)
        self.state = loading
        try:
            records = await self.client.fetch_records()
        except FetchError as e:
            logger.error(f"Failed to load email report: {type(e).__name__} - {e!s}", exc_info=True)
            self.state = mark_error(loading)
        else:
            self.state = mark_ready(loading, records)
        return self.state

    def set_query(self, query: str) -> None:
        self.state = set_query(self.state, query)
