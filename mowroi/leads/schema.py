"""Request model and validation for lead submissions."""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class LeadValidationError(ValueError):
    """Raised when a lead is missing contact details or has a bad email."""


class LeadRequest(BaseModel):
    """Contact details plus the calculator results they were shown."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    calculator_data: dict[str, Any] = Field(default_factory=dict, alias="calculatorData")

    model_config = {"populate_by_name": True}

    @field_validator("calculator_data", mode="before")
    @classmethod
    def missing_data_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def validate_contact(self) -> LeadRequest:
        """Return a copy with trimmed fields, or raise LeadValidationError."""
        name = (self.name or "").strip()
        email = (self.email or "").strip()
        if not name or not email:
            raise LeadValidationError("Name and email are required")
        if not EMAIL_PATTERN.match(email):
            raise LeadValidationError("Invalid email address")
        return self.model_copy(
            update={
                "name": name,
                "email": email,
                "phone": (self.phone or "").strip() or None,
                "message": (self.message or "").strip() or None,
            }
        )
