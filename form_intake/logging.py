"""Logging setup for the intake service."""

from __future__ import annotations

import logfire

from .settings import Settings

__all__ = ("configure_logging", "get_logger")

def configure_logging(settings: Settings) -> None:
    """Configure logfire once per application; ``settings.send_to_logfire`` decides whether telemetry leaves the process."""
    logfire.configure(
        service_name="form-intake",
        send_to_logfire=settings.send_to_logfire,
        console=None if settings.log_console else False,
    )

def get_logger(component: str) -> logfire.Logfire:
    """Return a component-specific logger."""
    return logfire.with_settings(tags=[f"component:{component}"])
