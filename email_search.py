"""
Email Search
Free-text search over the email records shown in the dashboard table.
"""

from typing import Sequence, Tuple

from email_records import EmailRecord


def record_matches(record: EmailRecord, term: str) -> bool:
    """True if the lowercased term appears in the email, company, first name or surname."""
    return (
        term in (record.email or "").lower()
        or term in record.company_name.lower()
        or term in record.first_name.lower()
        or term in record.surname.lower()
    )


def filter_records(records: Sequence[EmailRecord], query: str) -> Tuple[EmailRecord, ...]:
    """
    Filter records by a case-insensitive substring query.

    An empty or whitespace-only query returns every record. Matching records
    keep their input order; nothing is re-sorted or ranked.

    Args:
        records: Records in display order
        query: Search text as typed by the user

    Returns:
        Tuple of matching records
    """
    term = (query or "").lower()
    if not term.strip():
        return tuple(records)
    return tuple(record for record in records if record_matches(record, term))
