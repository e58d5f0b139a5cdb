"""Core primitives for errcap."""

from errcap.core.chain import MAX_CAUSE_DEPTH, ContextError, cause, new, wrap
from errcap.core.contracts import Capability, Causer, Coder, Publicer, StatusCoder, Statuser, Temporary
from errcap.core.messages import normalize_message
from errcap.core.queries import capabilities, code, has_code, has_status, is_public, is_temporary, status
from errcap.core.stack import CallSite, caller
from errcap.core.variants import PublicStatusCodeError, PublicStatusError, TemporaryError

__all__ = [
    "MAX_CAUSE_DEPTH",
    "CallSite",
    "Capability",
    "Causer",
    "Coder",
    "ContextError",
    "PublicStatusCodeError",
    "PublicStatusError",
    "Publicer",
    "StatusCoder",
    "Statuser",
    "Temporary",
    "TemporaryError",
    "caller",
    "capabilities",
    "cause",
    "code",
    "has_code",
    "has_status",
    "is_public",
    "is_temporary",
    "new",
    "normalize_message",
    "status",
    "wrap",
]
