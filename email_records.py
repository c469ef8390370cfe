"""
Email Records
Canonical email-delivery records: normalization of the raw report payload,
display ordering, and the table view used by the dashboard.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

# Column order of the dashboard table
TABLE_COLUMNS = ["Email", "Recipient", "Company", "Status", "Date"]

# Status cell colours, green for delivered and red otherwise
SENT_BADGE_STYLE = "background-color: #dcfce7; color: #166534; font-weight: 600"
NOT_SENT_BADGE_STYLE = "background-color: #fee2e2; color: #991b1b; font-weight: 600"

# Records without a usable date sort after every dated record
_UNDATED_SORT_KEY = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class EmailRecord:
    """A single email-delivery record in canonical form."""

    email: Optional[str]
    first_name: str
    surname: str
    company_name: str
    status: str
    sent_count: int
    not_sent_count: int
    date_created: Optional[datetime]

    @property
    def recipient_name(self) -> str:
        return f"{self.first_name} {self.surname}".strip()

    @property
    def is_sent(self) -> bool:
        return self.status == "Sent"


def _coerce_count(value: Any) -> int:
    """
    Coerce a per-record counter to a non-negative integer.

    Accepts ints, finite floats (truncated) and numeric strings. Anything else,
    including booleans, NaN and negative values, counts as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if not isinstance(value, Real):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(int(value), 0)


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date-like value into a timezone-aware UTC datetime.

    Naive values are taken as UTC. Returns None for missing or unparseable values.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, (str, datetime)):
        logger.warning(f"Ignoring non date-like DateCreated value: {value!r}")
        return None
    try:
        parsed = pd.to_datetime(value, utc=True, errors="coerce")
    except (TypeError, ValueError):
        parsed = pd.NaT
    if pd.isna(parsed):
        logger.warning(f"Could not parse DateCreated '{value}'")
        return None
    return parsed.to_pydatetime()


def normalize_record(raw: Any) -> EmailRecord:
    """Map one raw report item into an EmailRecord, defaulting whatever is missing."""
    if not isinstance(raw, Mapping):
        raw = {}

    email = raw.get("Email")
    return EmailRecord(
        email=_coerce_text(email) if email else None,
        first_name=_coerce_text(raw.get("FirstName")),
        surname=_coerce_text(raw.get("Surname")),
        company_name=_coerce_text(raw.get("CompanyName")),
        status=_coerce_text(raw.get("Status")),
        sent_count=_coerce_count(raw.get("SentEmail")),
        not_sent_count=_coerce_count(raw.get("NotSent")),
        date_created=_parse_date(raw.get("DateCreated")),
    )


def normalize_records(raw_records: Iterable[Any]) -> Tuple[EmailRecord, ...]:
    """
    Normalize the raw 'result' array of the email report.

    Malformed items are never dropped; every field is coerced best-effort.

    Args:
        raw_records: Items as decoded from the report JSON

    Returns:
        Tuple of EmailRecord in input order
    """
    return tuple(normalize_record(raw) for raw in raw_records)


def _sort_key(record: EmailRecord) -> Tuple[bool, datetime]:
    if record.date_created is None:
        return (False, _UNDATED_SORT_KEY)
    return (True, record.date_created)


def sort_records(records: Iterable[EmailRecord]) -> Tuple[EmailRecord, ...]:
    """
    Order records most recent first.

    The sort is stable: records sharing a timestamp keep their input order,
    and undated records follow all dated ones in input order.
    """
    return tuple(sorted(records, key=_sort_key, reverse=True))


def records_to_dataframe(records: Iterable[EmailRecord]) -> pd.DataFrame:
    """Build the dashboard table rows, one per record, in the given order."""
    rows = [
        {
            "Email": record.email or "N/A",
            "Recipient": record.recipient_name,
            "Company": record.company_name,
            "Status": record.status,
            "Date": record.date_created.strftime("%Y-%m-%d") if record.date_created else "",
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def status_badge_styles(records: Iterable[EmailRecord]) -> List[str]:
    """CSS for each record's Status cell, in record order."""
    return [SENT_BADGE_STYLE if record.is_sent else NOT_SENT_BADGE_STYLE for record in records]


def style_status_column(df: pd.DataFrame, records: Sequence[EmailRecord], column: str = "Status"):
    """
    Colour the Status column of a table built by records_to_dataframe.

    Args:
        df: Table rows, one per record and in the same order
        records: The records the rows were built from
        column: Name of the status column (it may have been translated)

    Returns:
        pandas Styler for st.dataframe
    """
    styles = status_badge_styles(records)
    return df.style.apply(lambda _: styles, subset=[column])
