"""
Tagged outcomes returned by service operations.

Expected failures (a missing record, a payload that breaks a field rule) are
values, not exceptions. Each carries the HTTP status it maps to so the API
layer can translate any outcome in one place. Infrastructure failures are not
represented here; they propagate as exceptions.
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Ok:
    value: Any = None
    ok = True
    status_code = 200


@dataclass(frozen=True)
class NotFound:
    message: str
    ok = False
    status_code = 404


@dataclass(frozen=True)
class Invalid:
    field: Optional[str]
    message: str
    ok = False
    status_code = 400
