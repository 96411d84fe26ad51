from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from dotenv import load_dotenv

load_dotenv(".env.test", override=True)

OSLO = ZoneInfo("Europe/Oslo")


@pytest.fixture
def instant() -> datetime:
    return datetime(2023, 1, 1, 11, 2, 10, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now() -> datetime:
    # a Saturday
    return datetime(2026, 10, 17, 14, 30, 15, 123456, tzinfo=OSLO)


@pytest.fixture
def frozen_clock(frozen_now):
    from calbounds.clock import fixed_clock

    return fixed_clock(frozen_now)
