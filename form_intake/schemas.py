from __future__ import annotations
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .sanitize import sanitize_email, sanitize_text_field

REQUIRED_FIELDS = ("name", "email", "phone", "plateThickness")

class SubmissionForm(BaseModel):
    """Sanitized form input; every field is a plain string, never None."""

    name: str = ""
    email: str = ""
    phone: str = ""
    plate_thickness: str = Field("", alias="plateThickness")
    comment: str = ""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name", "phone", "plate_thickness", "comment", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return sanitize_text_field(None if value is None else str(value))

    @field_validator("email", mode="before")
    @classmethod
    def _clean_email(cls, value: Any) -> str:
        return sanitize_email(None if value is None else str(value))

    def missing_fields(self) -> List[str]:
        values = self.model_dump(by_alias=True)
        return [key for key in REQUIRED_FIELDS if not values[key]]
