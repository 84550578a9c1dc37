"""
reCAPTCHA v3 Verification
=========================

Server-side token verification against Google's siteverify endpoint.

The secret and token go in the query string of a POST, and the JSON body is
parsed into a CaptchaVerdict. No retries: a network failure or an unreadable
body propagates to the caller, which fails the request.
"""

import logging
from typing import Optional

import httpx

from diagnostic_gateway.config import (
    RECAPTCHA_SECRET_KEY,
    RECAPTCHA_VERIFY_URL,
    RECAPTCHA_TIMEOUT_SECONDS,
    RECAPTCHA_MIN_SCORE,
    RECAPTCHA_EXPECTED_ACTION,
)
from diagnostic_gateway.models.captcha import CaptchaVerdict

logger = logging.getLogger(__name__)


async def verify_captcha(
    token: Optional[str],
    client: Optional[httpx.AsyncClient] = None,
) -> CaptchaVerdict:
    """
    Ask the verifier to score a reCAPTCHA token.

    Args:
        token: Token produced by grecaptcha.execute() on the form
        client: Optional shared AsyncClient (a short-lived one is created otherwise)

    Returns:
        CaptchaVerdict parsed from the verifier's JSON response
    """
    params = {
        "secret": RECAPTCHA_SECRET_KEY or "",
        "response": token or "",
    }

    if client is not None:
        response = await client.post(RECAPTCHA_VERIFY_URL, params=params)
    else:
        async with httpx.AsyncClient(timeout=RECAPTCHA_TIMEOUT_SECONDS) as session:
            response = await session.post(RECAPTCHA_VERIFY_URL, params=params)

    verdict = CaptchaVerdict.model_validate(response.json())

    if verdict.error_codes:
        logger.info(f"reCAPTCHA error codes: {', '.join(verdict.error_codes)}")

    return verdict


def is_verdict_acceptable(verdict: CaptchaVerdict) -> bool:
    return verdict.passes(RECAPTCHA_MIN_SCORE, RECAPTCHA_EXPECTED_ACTION)
