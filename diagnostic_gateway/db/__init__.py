"""
Gateway Database Module
=======================

Provides the Supabase client and the submission store operations.
"""

from diagnostic_gateway.db.client import get_supabase_client
from diagnostic_gateway.db.submissions import (
    DuplicateSubmissionError,
    find_existing_submission,
    insert_submission,
)

__all__ = [
    "get_supabase_client",
    "DuplicateSubmissionError",
    "find_existing_submission",
    "insert_submission",
]
