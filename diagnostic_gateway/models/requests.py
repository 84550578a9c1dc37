"""
Gateway Request Models
======================

Pydantic models for inbound request bodies.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class SubmissionRequest(BaseModel):
    """
    Body of POST /api/submit.

    Wire names are camelCase (set by the form UI); attributes are snake_case.
    formData is forwarded to the store verbatim once every gate has passed.
    """

    model_config = ConfigDict(populate_by_name=True)

    captcha_token: Optional[str] = Field(None, alias="captchaToken", description="reCAPTCHA v3 token")
    honeypot: Optional[str] = Field(None, description="Hidden field - must be empty for humans")
    form_data: Dict[str, Any] = Field(default_factory=dict, alias="formData")

    @property
    def user_email(self) -> Any:
        return self.form_data.get("user_email")
