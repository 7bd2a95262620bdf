"""Shared fixtures: every test runs with UTC and the 24-hour clock."""

import pytest
from hypothesis import HealthCheck, settings

from civiltime.config import CLOCK_ENV, TZ_ENV, reset_config

# Property tests do not depend on the function scoped environment fixture
settings.register_profile(
    "civiltime", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("civiltime")


@pytest.fixture(autouse=True)
def civiltime_environment(monkeypatch):
    monkeypatch.setenv(TZ_ENV, "UTC")
    monkeypatch.delenv(CLOCK_ENV, raising=False)
    reset_config()
    yield
    reset_config()
