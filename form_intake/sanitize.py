"""Input sanitizers for submitted form fields.

Text is cleaned for storage only; HTML escaping happens when rendering.
"""

from __future__ import annotations
import re

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[a-zA-Z/!?][^>]*(>|$)")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")

_EMAIL_LOCAL_RE = re.compile(r"[^a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]")
_EMAIL_LABEL_RE = re.compile(r"[^a-z0-9-]+", re.IGNORECASE)
_EMAIL_DOTS_RE = re.compile(r"\.{2,}")
_EMAIL_TRIM = " \t\n\r\0\x0b"
_MIN_EMAIL_LENGTH = 6

def sanitize_text_field(value: str | None) -> str:
    if not value:
        return ""
    cleaned = _SCRIPT_STYLE_RE.sub("", value)
    cleaned = _TAG_RE.sub("", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    # repeat until stable, removing one octet can expose another
    while True:
        stripped = _OCTET_RE.sub("", cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped
    return _WHITESPACE_RE.sub(" ", cleaned).strip()

def sanitize_email(value: str | None) -> str:
    """Return ``value`` reduced to a ``local@domain.tld`` shape, or ``''`` if it has none."""
    email = (value or "").strip()
    if len(email) < _MIN_EMAIL_LENGTH or "@" not in email[1:]:
        return ""

    local, domain = email.split("@", 1)
    local = _EMAIL_LOCAL_RE.sub("", local)
    if not local:
        return ""

    domain = _EMAIL_DOTS_RE.sub("", domain).strip(_EMAIL_TRIM + ".")
    labels = []
    for label in domain.split("."):
        label = _EMAIL_LABEL_RE.sub("", label.strip(_EMAIL_TRIM + "-"))
        if label:
            labels.append(label)
    if len(labels) < 2:
        return ""
    return f"{local}@{'.'.join(labels)}"
