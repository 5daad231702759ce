"""Exception hierarchy for the intake service.

All errors carry a ``context`` dict so the HTTP layer and the logs can
report them without parsing messages.
"""

from __future__ import annotations

from typing import Any, Iterable

__all__ = (
    "FormIntakeError",
    "MissingFieldsError",
    "AccessDeniedError",
    "UploadError",
)

class FormIntakeError(Exception):
    """Base exception for all intake errors.

    Attributes:
        context: Additional context for debugging.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)

class MissingFieldsError(FormIntakeError):
    """Raised when required form fields are empty after sanitization."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}",
            context={"fields": self.fields},
        )

class AccessDeniedError(FormIntakeError):
    """Raised when a principal lacks the capability for an admin view."""

    def __init__(self, capability: str, principal: str) -> None:
        self.capability = capability
        self.principal = principal
        super().__init__(
            f"{principal} lacks capability {capability}",
            context={"capability": capability, "principal": principal},
        )

class UploadError(FormIntakeError):
    """Raised when an uploaded file cannot be written to the upload directory."""

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(f"Upload of {filename} failed: {message}", context={"filename": filename})
