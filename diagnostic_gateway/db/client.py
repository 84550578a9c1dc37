"""
Supabase Client Management
==========================

Provides a single lazily-initialized Supabase client for the gateway.

The gateway both reads (soft duplicate check) and writes (insert) the private
submissions table, so it uses the SERVICE_ROLE key for both. RLS would hide
existing rows from an ANON client and defeat the soft check.
"""

import logging
from typing import Optional

from supabase import create_client, Client

from diagnostic_gateway.config import (
    SUPABASE_URL,
    SUPABASE_SERVICE_ROLE_KEY,
)

logger = logging.getLogger(__name__)

# Singleton Client (lazily initialized)
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client for submission reads and writes (uses SERVICE_ROLE key).
    """
    global _client

    if _client is not None:
        return _client

    if not SUPABASE_URL:
        raise RuntimeError("SUPABASE_URL not configured")

    if not SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("SUPABASE_SERVICE_ROLE_KEY not configured")

    _client = create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)
    logger.info("✅ Supabase client initialized (SERVICE_ROLE_KEY)")

    return _client
