"""Error classes built by the errcap constructors."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any

from errcap.core.chain import ContextError


class _MessageError(Exception):
    message: str

    def with_context(self, **context: Any) -> ContextError:
        """Wrap this error with key/value context.

        The returned error is a new value whose cause is this one, so it does
        not keep the public capability of this error.
        """
        return ContextError("", self, tuple(context.items()))

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild from the fields; args is empty when fields were passed by keyword.
        return (type(self), astuple(self))

    def __str__(self) -> str:
        return self.message


@dataclass
class PublicStatusError(_MessageError):
    """Public error with a status."""

    message: str
    status_value: int

    def status_code(self) -> int:
        return self.status_value

    def status(self) -> int:
        return self.status_value

    def public(self) -> bool:
        return True


@dataclass
class PublicStatusCodeError(PublicStatusError):
    """Public error with a status and a non-empty code."""

    code_value: str

    def code(self) -> str:
        return self.code_value


@dataclass
class TemporaryError(_MessageError):
    """Error for a condition that may succeed if retried."""

    message: str

    def temporary(self) -> bool:
        return True
