"""
POST /api/submit - Validate, filter and store a diagnostic-form submission
=========================================================================

Runs an ordered chain of gates; the first failing gate ends the request.
Nothing is written until the final insert, so no gate needs a rollback.

Flow:
1. Method check (POST only, enforced by the router) -> 405
2. Honeypot check (silent fake success, no write)   -> 200
3. Email presence/shape                             -> 400
4. Disposable domain / suspicious TLD               -> 400
5. reCAPTCHA v3 (success, score >= 0.5, "submit")   -> 403
6. Soft duplicate check (read)                      -> 409
7. Insert (unique constraint is the real authority) -> 409 / 500
8. Success                                          -> 200

A duplicate found in step 6 and a race lost in step 7 return the same 409
body. Any unanticipated failure is logged here and surfaced as a bare 500.
"""

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import ValidationError

from diagnostic_gateway.db.submissions import (
    DuplicateSubmissionError,
    find_existing_submission,
    insert_submission,
)
from diagnostic_gateway.errors import (
    SubmissionError,
    InvalidInput,
    BlockedDomain,
    SecurityVerificationFailed,
    Conflict,
    InternalError,
)
from diagnostic_gateway.models.requests import SubmissionRequest
from diagnostic_gateway.models.responses import SuccessResponse
from diagnostic_gateway.utils.captcha import verify_captcha, is_verdict_acceptable
from diagnostic_gateway.utils.email_filters import has_email_shape, extract_domain, is_blocked_domain

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Submission"])

async def read_body(request: Request) -> Dict[str, Any]:
    """Read the raw JSON object. Anything unreadable is reported as an invalid email."""
    try:
        body = await request.json()
    except ValueError:
        raise InvalidInput()

    if not isinstance(body, dict):
        raise InvalidInput()

    return body


def is_honeypot_filled(body: Dict[str, Any]) -> bool:
    """Checked on the raw body so malformed sibling fields cannot mask it."""
    honeypot = body.get("honeypot")
    return isinstance(honeypot, str) and len(honeypot) > 0


def parse_submission(body: Dict[str, Any]) -> SubmissionRequest:
    try:
        return SubmissionRequest.model_validate(body)
    except ValidationError:
        raise InvalidInput()


# Non-POST methods never reach this handler: the router raises 405 and
# main.py renders it as {"error": "Method not allowed"}.
@router.post("/submit", response_model=SuccessResponse)
async def submit_diagnostic(request: Request):
    """
    Accept one diagnostic-form submission.

    Body:
        {"captchaToken": str, "honeypot": str, "formData": {"user_email": str, ...}}

    Returns:
        {"success": true}

    Raises:
        400: Invalid email address / non-professional email domain
        403: reCAPTCHA verification failed
        405: Method other than POST
        409: Email already submitted
        500: Store or runtime failure (details logged, never returned)
    """
    try:
        body = await read_body(request)

        # ========================================
        # Step 2: Honeypot (silent success)
        # ========================================
        # Return success to fool the bot, do NOT touch the store
        if is_honeypot_filled(body):
            logger.warning("🍯 Bot detected via honeypot - returning fake success")
            return SuccessResponse()

        submission = parse_submission(body)

        # ========================================
        # Step 3: Email presence/shape
        # ========================================
        user_email = submission.user_email
        if not has_email_shape(user_email):
            raise InvalidInput()

        # ========================================
        # Step 4: Disposable domain / suspicious TLD
        # ========================================
        domain = extract_domain(user_email)
        if is_blocked_domain(domain):
            logger.info(f"🚫 Blocked email domain: {domain}")
            raise BlockedDomain()

        # ========================================
        # Step 5: reCAPTCHA v3 verification
        # ========================================
        verdict = await verify_captcha(submission.captcha_token)
        if not is_verdict_acceptable(verdict):
            logger.warning(
                f"⚠️  Security verification failed. Score: {verdict.score}, Action: {verdict.action}"
            )
            raise SecurityVerificationFailed()

        # ========================================
        # Step 6: Soft duplicate check
        # ========================================
        # Latency optimization only - two racing requests can both pass this
        existing = await asyncio.to_thread(find_existing_submission, user_email)
        if existing:
            logger.info(f"🔁 Duplicate submission rejected (domain: {domain})")
            raise Conflict()

        # ========================================
        # Step 7: Insert (database is final authority)
        # ========================================
        try:
            await asyncio.to_thread(insert_submission, submission.form_data)
        except DuplicateSubmissionError:
            logger.info(f"🔁 Duplicate submission caught by unique constraint (domain: {domain})")
            raise Conflict()
        except Exception as e:
            logger.error(f"❌ Supabase insert error: {e}", exc_info=True)
            raise InternalError() from e

    except SubmissionError:
        raise
    except Exception as e:
        logger.error(f"❌ Submission handler error: {e}", exc_info=True)
        raise InternalError() from e

    logger.info(f"✅ Submission stored (domain: {domain})")
    return SuccessResponse()
