from __future__ import annotations

import pytest

from inflater.kernel import Trace


@pytest.fixture
def trace() -> Trace:
    return Trace()
