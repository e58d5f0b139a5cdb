"""Capability queries.

Every query except :func:`is_public` resolves the error to the innermost cause
of its chain before testing it. A missing capability is never an error: the
queries fall back to ``False``, ``""`` or ``0``.
"""

from __future__ import annotations

from typing import Any

from errcap.core.chain import cause
from errcap.core.contracts import Capability


def _call(err: Any, name: str) -> Any:
    method = getattr(err, name, None)
    if not callable(method):
        return None
    return method()


def _code_of(err: Any) -> str | None:
    value = _call(err, "code")
    return value if isinstance(value, str) else None


def _int_of(err: Any, name: str) -> int | None:
    value = _call(err, name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def has_code(err: Any, *codes: str) -> bool:
    """Report whether the cause of ``err`` has any of ``codes``."""
    err = cause(err)
    if err is None:
        return False
    err_code = _code_of(err)
    if err_code is None:
        return False
    return any(err_code == code for code in codes)


def code(err: Any) -> str:
    """Return the string code of the cause of ``err``, or ``""`` if it has none.

    An empty result cannot tell a missing code apart from an empty one.
    """
    err = cause(err)
    if err is None:
        return ""
    return _code_of(err) or ""


def has_status(err: Any, *statuses: int) -> bool:
    """Report whether the cause of ``err`` has any of ``statuses``.

    ``status_code()`` and ``status()`` are checked independently, so a match on
    either one is enough.
    """
    err = cause(err)
    if err is None:
        return False
    err_status = _int_of(err, "status_code")
    if err_status is not None and err_status in statuses:
        return True
    err_status = _int_of(err, "status")
    return err_status is not None and err_status in statuses


def status(err: Any) -> int:
    """Return the status of the cause of ``err``, or zero if it has none."""
    err = cause(err)
    if err is None:
        return 0
    err_status = _int_of(err, "status_code")
    if err_status is not None:
        return err_status
    err_status = _int_of(err, "status")
    return err_status if err_status is not None else 0


def is_temporary(err: Any) -> bool:
    """Report whether ``err`` describes a condition that may succeed if retried."""
    err = cause(err)
    if err is None:
        return False
    return bool(_call(err, "temporary"))


def is_public(err: Any) -> bool:
    """Report whether the message of ``err`` is safe to show to external clients.

    Unlike the other queries this tests ``err`` exactly as given. Wrapping a
    public error yields an error that is not public, so callers usually resolve
    the cause first::

        err = errcap.cause(err)
        if errcap.is_public(err):
            ...
    """
    if err is None:
        return False
    return bool(_call(err, "public"))


def capabilities(err: Any) -> frozenset[Capability]:
    """Return the capabilities ``err`` exposes, using the same rules as the queries."""
    found: set[Capability] = set()
    if is_public(err):
        found.add(Capability.PUBLIC)
    root = cause(err)
    if root is None:
        return frozenset(found)
    if _call(root, "temporary"):
        found.add(Capability.TEMPORARY)
    if _code_of(root) is not None:
        found.add(Capability.CODE)
    if _int_of(root, "status_code") is not None or _int_of(root, "status") is not None:
        found.add(Capability.STATUS)
    return frozenset(found)
