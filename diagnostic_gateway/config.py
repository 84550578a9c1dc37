"""
Gateway Configuration
====================

Loads all environment variables for the FastAPI gateway.

Environment variables should be set in .env file in project root.
"""

import os
import warnings

from dotenv import load_dotenv

load_dotenv()

# ============================================================
# Gateway Build Info
# ============================================================
BUILD_ID = os.getenv("BUILD_ID", "dev-local")
GITHUB_COMMIT = os.getenv("GITHUB_SHA", "unknown")

# ============================================================
# Supabase PostgreSQL (submission store)
# ============================================================
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
SUBMISSIONS_TABLE = os.getenv("SUBMISSIONS_TABLE", "diagnostic_submissions")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION_CODE = "23505"

# Warn if Supabase credentials missing (but don't block import for testing)
if not SUPABASE_URL:
    warnings.warn("SUPABASE_URL environment variable not set - submissions cannot be stored")
if not SUPABASE_SERVICE_ROLE_KEY:
    warnings.warn("SUPABASE_SERVICE_ROLE_KEY environment variable not set - submissions cannot be stored")

# ============================================================
# reCAPTCHA v3 (server-side verification)
# ============================================================
RECAPTCHA_SECRET_KEY = os.getenv("RECAPTCHA_SECRET_KEY")
RECAPTCHA_VERIFY_URL = os.getenv(
    "RECAPTCHA_VERIFY_URL",
    "https://www.google.com/recaptcha/api/siteverify"
)
RECAPTCHA_TIMEOUT_SECONDS = float(os.getenv("RECAPTCHA_TIMEOUT_SECONDS", "10"))

# Acceptance thresholds are part of the form contract, not deployment config
RECAPTCHA_MIN_SCORE = 0.5
RECAPTCHA_EXPECTED_ACTION = "submit"

if not RECAPTCHA_SECRET_KEY:
    warnings.warn("RECAPTCHA_SECRET_KEY environment variable not set - every submission will fail verification")

# ============================================================
# HTTP / Logging
# ============================================================
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# ============================================================
# Configuration Validation
# ============================================================

def validate_config():
    """
    Validates that all required configuration is present.
    Called on application startup.
    """
    errors = []

    if not SUPABASE_URL:
        errors.append("SUPABASE_URL is not set")
    if not SUPABASE_SERVICE_ROLE_KEY:
        errors.append("SUPABASE_SERVICE_ROLE_KEY is not set")
    if not RECAPTCHA_SECRET_KEY:
        errors.append("RECAPTCHA_SECRET_KEY is not set")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    return True


def print_config_summary():
    """
    Prints a summary of the configuration (for debugging).
    NEVER prints secrets!
    """
    print("=" * 60)
    print("Gateway Configuration Summary")
    print("=" * 60)
    print(f"Build ID: {BUILD_ID}")
    print(f"GitHub Commit: {GITHUB_COMMIT}")
    print(f"Supabase URL: {SUPABASE_URL}")
    print(f"Submissions Table: {SUBMISSIONS_TABLE}")
    print(f"reCAPTCHA Endpoint: {RECAPTCHA_VERIFY_URL}")
    print(f"reCAPTCHA Threshold: score >= {RECAPTCHA_MIN_SCORE}, action == '{RECAPTCHA_EXPECTED_ACTION}'")
    print(f"reCAPTCHA Secret: {'Configured' if RECAPTCHA_SECRET_KEY else 'MISSING'}")
    print(f"CORS Origins: {', '.join(CORS_ALLOW_ORIGINS)}")
    print(f"Log Level: {LOG_LEVEL}")
    print("=" * 60)
