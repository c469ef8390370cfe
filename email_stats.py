"""
Email Stats
Aggregate delivery totals and the chart data derived from them.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from email_records import EmailRecord


@dataclass(frozen=True)
class EmailTotals:
    """Sent / not-sent totals over a record collection."""

    total_sent: int = 0
    total_not_sent: int = 0

    @property
    def total(self) -> int:
        return self.total_sent + self.total_not_sent

    def as_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "totalSent": self.total_sent,
            "totalNotSent": self.total_not_sent,
        }


def aggregate_records(records: Iterable[EmailRecord]) -> EmailTotals:
    """
    Sum the per-record counters over the whole collection.

    Totals come from sent_count / not_sent_count, never from the status label.
    Callers pass the full collection, not a search result.
    """
    total_sent = 0
    total_not_sent = 0
    for record in records:
        total_sent += record.sent_count
        total_not_sent += record.not_sent_count
    return EmailTotals(total_sent=total_sent, total_not_sent=total_not_sent)


def build_pie_data(totals: EmailTotals) -> pd.DataFrame:
    """Delivery status distribution: Sent vs Not Sent."""
    return pd.DataFrame(
        {
            "name": ["Sent", "Not Sent"],
            "value": [totals.total_sent, totals.total_not_sent],
        }
    )


def build_bar_data(totals: EmailTotals) -> pd.DataFrame:
    """Email statistics: Total, Sent and Not Sent side by side."""
    return pd.DataFrame(
        {
            "name": ["Total", "Sent", "Not Sent"],
            "value": [totals.total, totals.total_sent, totals.total_not_sent],
        }
    )


def format_number(num: int) -> str:
    """Format a count with thousands separators, e.g. 1234567 -> '1,234,567'."""
    return f"{num:,}"
