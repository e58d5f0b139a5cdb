"""Constructors for common error shapes.

Messages passed to the public constructors may be shown to a requesting
client, so they should not contain implementation details.
"""

from __future__ import annotations

from errcap.core.chain import ContextError
from errcap.core.messages import normalize_message
from errcap.core.stack import caller
from errcap.core.variants import PublicStatusCodeError, PublicStatusError, TemporaryError


def public(message: str, status: int) -> PublicStatusError:
    """Return a public error with ``message`` and ``status``.

    Attaching context with ``with_context`` returns a new error that is not
    public, since the context may hold implementation details. Its cause is
    still public.
    """
    return PublicStatusError(message, status)


def public_with_code(message: str, status: int, code: str) -> PublicStatusError:
    """Return a public error with ``message``, ``status`` and ``code``.

    A blank ``code`` gives the same error as :func:`public`.
    """
    code = code.strip()
    if not code:
        return public(message, status)
    return PublicStatusCodeError(message, status, code)


def temporary(message: str) -> ContextError:
    """Return an error that reports itself as temporary."""
    return ContextError("", TemporaryError(message))


def bad_request(*messages: str) -> PublicStatusError:
    """Return a public 400 error. The message may be shown to the requesting client."""
    return public(normalize_message("bad request", messages), 400)


def unauthorized(*messages: str) -> PublicStatusError:
    """Return a public 401 error. The message may be shown to the requesting client."""
    return public(normalize_message("unauthorized", messages), 401)


def forbidden(*messages: str) -> PublicStatusError:
    """Return a public 403 error. The message may be shown to the requesting client."""
    return public(normalize_message("forbidden", messages), 403)


def not_found(*messages: str) -> PublicStatusError:
    """Return a public 404 error. The message may be shown to the requesting client."""
    return public(normalize_message("not found", messages), 404)


def conflict(*messages: str) -> PublicStatusError:
    """Return a public 409 error. The message may be shown to the requesting client."""
    return public(normalize_message("conflict", messages), 409)


def not_implemented(*messages: str) -> ContextError:
    """Return a 501 error carrying the call site as ``caller`` context.

    Because of the attached context the returned error is not public; its
    cause is.
    """
    err = public(normalize_message("not implemented", messages), 501)
    return err.with_context(caller=caller())
