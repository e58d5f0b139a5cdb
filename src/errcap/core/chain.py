"""Cause chains: wrapping errors with context and unwrapping them again."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

MAX_CAUSE_DEPTH = 100


class ContextError(Exception):
    """An error that adds a message and key/value context to an optional cause.

    A ContextError never reports itself as public, even when its cause does:
    the added context may carry implementation details.
    """

    def __init__(
        self,
        message: str = "",
        cause: BaseException | None = None,
        context: tuple[tuple[str, Any], ...] = (),
    ) -> None:
        self._message = message
        self._cause = cause
        self._context = context
        super().__init__(message, cause, context)

    @property
    def message(self) -> str:
        return self._message

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def cause(self) -> BaseException | None:
        return self._cause

    def with_context(self, **context: Any) -> ContextError:
        merged = dict(self._context)
        merged.update(context)
        return ContextError(self._message, self._cause, tuple(merged.items()))

    def __str__(self) -> str:
        parts = [self._message] if self._message else []
        parts.extend(f"{key}={value}" for key, value in self._context)
        head = " ".join(parts)
        if self._cause is None:
            return head
        if not head:
            return str(self._cause)
        return f"{head}: {self._cause}"

    def __repr__(self) -> str:
        return f"ContextError({str(self)!r})"


def new(message: str, **context: Any) -> ContextError:
    """Create a root error with no cause."""
    return ContextError(message, None, tuple(context.items()))


def wrap(err: BaseException | None, message: str = "", **context: Any) -> ContextError | None:
    """Wrap ``err`` so that it becomes the cause of a new error.

    Wrapping ``None`` returns ``None``.
    """
    if err is None:
        return None
    return ContextError(message, err, tuple(context.items()))


def _next_cause(err: Any) -> Any:
    method = getattr(err, "cause", None)
    if not callable(method):
        return None
    return method()


def cause(err: Any, *, max_depth: int = MAX_CAUSE_DEPTH) -> Any:
    """Return the innermost error of the chain starting at ``err``.

    Only an explicit ``cause()`` method is followed. ``__cause__`` set by
    ``raise ... from`` is not part of the chain.
    """
    if err is None:
        return None
    for _ in range(max_depth):
        inner = _next_cause(err)
        if inner is None:
            return err
        err = inner
    if _next_cause(err) is None:
        return err
    logger.warning("cause chain deeper than %d errors, stopping at %r", max_depth, err)
    return err
