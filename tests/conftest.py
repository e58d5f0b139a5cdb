from __future__ import annotations

import pytest

import errcap


@pytest.fixture
def coded_error() -> errcap.PublicStatusError:
    return errcap.public_with_code("test error", 400, "CODE")


@pytest.fixture
def wrapped_coded_error(coded_error) -> errcap.ContextError:
    return coded_error.with_context(a="b")
