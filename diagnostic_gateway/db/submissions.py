"""
Submission Store
================

Two operations against the diagnostic_submissions table:

- find_existing_submission(): soft duplicate check (at most one row, zero is fine)
- insert_submission(): the authoritative write

The table carries a UNIQUE constraint on user_email. That constraint is the
only real guarantee against duplicates: two concurrent requests can both pass
the soft check, and the loser of the race sees Postgres error 23505 on insert.
insert_submission() raises DuplicateSubmissionError for exactly that case and
lets every other failure propagate unchanged.
"""

import logging
from typing import Any, Dict, Optional

from diagnostic_gateway.config import SUBMISSIONS_TABLE, UNIQUE_VIOLATION_CODE
from diagnostic_gateway.db.client import get_supabase_client

logger = logging.getLogger(__name__)


class DuplicateSubmissionError(Exception):
    """The store rejected an insert because user_email already exists."""


def is_unique_violation(error: Exception) -> bool:
    """
    True if the error is a Postgres unique_violation (SQLSTATE 23505).

    PostgREST errors expose the SQLSTATE as `.code`; the string fallback
    covers wrappers that only keep the message.
    """
    code = getattr(error, "code", None)
    if code is not None:
        return str(code) == UNIQUE_VIOLATION_CODE
    return UNIQUE_VIOLATION_CODE in str(error)


def find_existing_submission(user_email: str) -> Optional[Dict[str, Any]]:
    """
    Return the existing submission row for user_email, or None.

    Exact match on user_email. Not authoritative: see module docstring.
    """
    result = get_supabase_client().table(SUBMISSIONS_TABLE) \
        .select("user_email") \
        .eq("user_email", user_email) \
        .limit(1) \
        .execute()

    if result.data:
        return result.data[0]
    return None


def insert_submission(form_data: Dict[str, Any]) -> None:
    """
    Insert form_data as one new row.

    Raises:
        DuplicateSubmissionError: user_email already stored (unique constraint)
        Exception: any other store failure, unchanged
    """
    try:
        get_supabase_client().table(SUBMISSIONS_TABLE).insert(form_data).execute()
    except Exception as e:
        if is_unique_violation(e):
            logger.warning("⚠️  Unique constraint violation on insert (concurrent duplicate caught)")
            raise DuplicateSubmissionError(str(e)) from e
        raise
