"""errcap public API."""

from errcap.__about__ import __version__
from errcap.constructors import (
    bad_request,
    conflict,
    forbidden,
    not_found,
    not_implemented,
    public,
    public_with_code,
    temporary,
    unauthorized,
)
from errcap.core import (
    MAX_CAUSE_DEPTH,
    CallSite,
    Capability,
    Causer,
    Coder,
    ContextError,
    PublicStatusCodeError,
    PublicStatusError,
    Publicer,
    StatusCoder,
    Statuser,
    Temporary,
    TemporaryError,
    caller,
    capabilities,
    cause,
    code,
    has_code,
    has_status,
    is_public,
    is_temporary,
    new,
    normalize_message,
    status,
    wrap,
)

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
    "__version__",
    "bad_request",
    "caller",
    "capabilities",
    "cause",
    "code",
    "conflict",
    "forbidden",
    "has_code",
    "has_status",
    "is_public",
    "is_temporary",
    "new",
    "normalize_message",
    "not_found",
    "not_implemented",
    "public",
    "public_with_code",
    "status",
    "temporary",
    "unauthorized",
    "wrap",
]
