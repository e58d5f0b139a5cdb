"""Message helpers for the client-facing constructors."""

from __future__ import annotations

from collections.abc import Iterable


def normalize_message(default: str, messages: Iterable[str]) -> str:
    """Join the non-blank ``messages`` with a space, or return ``default`` if there are none."""
    parts = [message.strip() for message in messages]
    parts = [part for part in parts if part]
    if not parts:
        return default
    return " ".join(parts)
