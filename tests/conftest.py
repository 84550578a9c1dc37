"""
Shared fixtures: an in-memory submission store that enforces the
user_email unique constraint, and a TestClient with the store and the
reCAPTCHA verifier patched out.
"""

import threading
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from diagnostic_gateway.db.submissions import DuplicateSubmissionError
from diagnostic_gateway.main import app
from diagnostic_gateway.models.captcha import CaptchaVerdict


class FakeSubmissionStore:
    """Stands in for the diagnostic_submissions table."""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.find_calls = 0
        self.insert_calls = 0
        self._lock = threading.Lock()

    def find(self, user_email: str) -> Optional[Dict[str, Any]]:
        self.find_calls += 1
        with self._lock:
            for row in self.rows:
                if row.get("user_email") == user_email:
                    return {"user_email": row["user_email"]}
        return None

    def insert(self, form_data: Dict[str, Any]) -> None:
        self.insert_calls += 1
        with self._lock:
            if any(row.get("user_email") == form_data.get("user_email") for row in self.rows):
                raise DuplicateSubmissionError(
                    'duplicate key value violates unique constraint "diagnostic_submissions_user_email_key"'
                )
            self.rows.append(dict(form_data))


@pytest.fixture
def store():
    return FakeSubmissionStore()


@pytest.fixture
def passing_verdict():
    return CaptchaVerdict(success=True, score=0.9, action="submit")


@pytest.fixture
def captcha(passing_verdict):
    """AsyncMock replacing verify_captcha; tests may set .return_value / .side_effect."""
    return AsyncMock(return_value=passing_verdict)


@pytest.fixture
def patched_gateway(store, captcha):
    with patch("diagnostic_gateway.api.submit.find_existing_submission", side_effect=store.find), \
         patch("diagnostic_gateway.api.submit.insert_submission", side_effect=store.insert), \
         patch("diagnostic_gateway.api.submit.verify_captcha", new=captcha):
        yield


@pytest.fixture
def client(patched_gateway):
    return TestClient(app)


@pytest.fixture
def make_body():
    """Build a submission body; keyword args override formData fields."""
    def _make(honeypot: str = "", captcha_token: str = "tok-123", **form_fields):
        form_data = {
            "user_email": "jane.doe@acme-industries.com",
            "company_name": "Acme Industries",
            "team_size": "11-50",
        }
        form_data.update(form_fields)
        return {
            "captchaToken": captcha_token,
            "honeypot": honeypot,
            "formData": form_data,
        }
    return _make
