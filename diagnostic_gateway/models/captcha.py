"""
reCAPTCHA Verdict Model
=======================

Parsed body of the siteverify response. Only success, score and action take
part in the decision; the remaining fields are kept for log diagnostics.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CaptchaVerdict(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    score: Optional[float] = 0.0
    action: Optional[str] = ""
    hostname: Optional[str] = None
    challenge_ts: Optional[str] = None
    error_codes: List[str] = Field(default_factory=list, alias="error-codes")

    def passes(self, min_score: float, expected_action: str) -> bool:
        """All three must hold: success, score at or above threshold, exact action."""
        if self.score is None:
            return False
        return self.success and self.score >= min_score and self.action == expected_action
