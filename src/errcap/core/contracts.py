"""Capability contracts recognised by errcap.

Each contract is a single-method protocol. An error satisfies a contract by
exposing a method of the same name; there is no base class to inherit from and
nothing to register. Third-party errors are detected as long as their shape
matches.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class Capability(str, Enum):
    """Capabilities an error can expose."""

    TEMPORARY = "temporary"
    CODE = "code"
    STATUS = "status"
    PUBLIC = "public"


@runtime_checkable
class Temporary(Protocol):
    """Errors that report whether retrying may succeed."""

    def temporary(self) -> bool: ...


@runtime_checkable
class Coder(Protocol):
    """Errors carrying an application-specific string code."""

    def code(self) -> str: ...


@runtime_checkable
class StatusCoder(Protocol):
    """Errors carrying a numeric status, usually an HTTP status."""

    def status_code(self) -> int: ...


@runtime_checkable
class Statuser(Protocol):
    """Alternative spelling of StatusCoder used by some libraries."""

    def status(self) -> int: ...


@runtime_checkable
class Publicer(Protocol):
    """Errors whose message is safe to show to a requesting client."""

    def public(self) -> bool: ...


@runtime_checkable
class Causer(Protocol):
    """Errors wrapping an inner error."""

    def cause(self) -> BaseException | None: ...
