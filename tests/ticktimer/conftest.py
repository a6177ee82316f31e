from __future__ import annotations

import pytest

from ticktimer.runtime.clock import ManualClock


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock(0.0)
