from __future__ import annotations
import hmac
from dataclasses import dataclass, field
from typing import Callable, FrozenSet

from .settings import Settings

MANAGE_OPTIONS = "manage_options"

@dataclass(frozen=True)
class Principal:
    name: str
    capabilities: FrozenSet[str] = field(default_factory=frozenset)

ANONYMOUS = Principal("anonymous")
ADMIN = Principal("admin", frozenset({MANAGE_OPTIONS}))

Authorizer = Callable[[Principal], bool]

def tokens_match(expected: str, presented: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), presented.encode("utf-8"))

def principal_from_token(token: str | None, settings: Settings) -> Principal:
    if not token or not settings.admin_token:
        return ANONYMOUS
    return ADMIN if tokens_match(settings.admin_token, token) else ANONYMOUS

def has_capability(principal: Principal, capability: str) -> bool:
    return capability in principal.capabilities

def require_capability(capability: str) -> Authorizer:
    return lambda principal: has_capability(principal, capability)
