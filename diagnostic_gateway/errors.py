"""
Gateway Error Taxonomy
======================

Every recognized failure of POST /api/submit maps to exactly one of these
HTTPException subclasses. Each carries a fixed status code and a fixed
user-facing message; main.py renders them as {"error": message}.

Messages are deliberately generic. Store or verifier internals never reach
the caller.
"""

from fastapi import HTTPException

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
INVALID_EMAIL_MESSAGE = "Invalid email address."
BLOCKED_DOMAIN_MESSAGE = "Please use a professional email address."
SECURITY_VERIFICATION_MESSAGE = "Security verification failed. Please try again."
DUPLICATE_SUBMISSION_MESSAGE = "We've already received a submission from this email address."
INTERNAL_ERROR_MESSAGE = "Internal server error"


class SubmissionError(HTTPException):
    """Base class for all errors surfaced by the submission gateway."""

    status_code = 500
    message = INTERNAL_ERROR_MESSAGE

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.message)


class MethodNotAllowed(SubmissionError):
    status_code = 405
    message = METHOD_NOT_ALLOWED_MESSAGE


class InvalidInput(SubmissionError):
    """Missing, non-string or '@'-less user_email (or an unreadable body)."""

    status_code = 400
    message = INVALID_EMAIL_MESSAGE


class BlockedDomain(SubmissionError):
    """Disposable email provider or suspicious TLD."""

    status_code = 400
    message = BLOCKED_DOMAIN_MESSAGE


class SecurityVerificationFailed(SubmissionError):
    status_code = 403
    message = SECURITY_VERIFICATION_MESSAGE


class Conflict(SubmissionError):
    """
    Duplicate user_email.

    Raised identically from the soft pre-check and from the database unique
    constraint, so callers cannot tell a lost race from a plain duplicate.
    """

    status_code = 409
    message = DUPLICATE_SUBMISSION_MESSAGE


class InternalError(SubmissionError):
    status_code = 500
    message = INTERNAL_ERROR_MESSAGE
