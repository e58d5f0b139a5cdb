"""Call-site capture for diagnostic context."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    filename: str
    lineno: int
    function: str

    def __str__(self) -> str:
        return f"{os.path.basename(self.filename)}:{self.lineno}"


def caller(skip: int = 0) -> CallSite:
    """Return the call site of whoever called the function calling ``caller()``.

    ``skip`` walks that many additional frames up the stack.
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(skip + 1):
            if target is None or target.f_back is None:
                break
            target = target.f_back
        if target is None:
            return CallSite("<unknown>", 0, "<unknown>")
        return CallSite(target.f_code.co_filename, target.f_lineno, target.f_code.co_name)
    finally:
        del frame
