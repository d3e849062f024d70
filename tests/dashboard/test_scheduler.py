from __future__ import annotations

import asyncio
from typing import List

import pytest

from dashboard.scheduler import RefreshScheduler
from ingestion.settings import DashboardSettings


class FakeDashboard:
    def __init__(self, loading: bool = False):
        self.is_loading = loading
        self.reasons: List[str] = []

    async def refresh(self, *, reason: str = "manual") -> bool:
        self.reasons.append(reason)
        return True


@pytest.mark.asyncio
async def test_auto_refresh_fires_periodically():
    target = FakeDashboard()
    scheduler = RefreshScheduler(target, interval_seconds=0.02, visibility_delay_seconds=10)

    scheduler.start()
    await asyncio.sleep(0.11)
    await scheduler.stop()

    assert len(target.reasons) >= 2
    assert set(target.reasons) == {"auto"}
    assert scheduler.running is False


@pytest.mark.asyncio
async def test_auto_refresh_skips_while_loading():
    target = FakeDashboard(loading=True)
    scheduler = RefreshScheduler(target, interval_seconds=0.02, visibility_delay_seconds=10)

    scheduler.start()
    await asyncio.sleep(0.08)
    await scheduler.stop()

    assert target.reasons == []


@pytest.mark.asyncio
async def test_auto_refresh_skips_while_hidden():
    target = FakeDashboard()
    scheduler = RefreshScheduler(target, interval_seconds=0.02, visibility_delay_seconds=10, visible=False)

    scheduler.start()
    await asyncio.sleep(0.08)
    await scheduler.stop()

    assert target.reasons == []


@pytest.mark.asyncio
async def test_becoming_visible_schedules_delayed_refresh():
    target = FakeDashboard()
    scheduler = RefreshScheduler(target, interval_seconds=10, visibility_delay_seconds=0.02, visible=False)

    scheduler.set_visibility(True)
    await asyncio.sleep(0.08)

    assert target.reasons == ["visibility"]
    await scheduler.stop()


@pytest.mark.asyncio
async def test_hiding_cancels_pending_visibility_refresh():
    target = FakeDashboard()
    scheduler = RefreshScheduler(target, interval_seconds=10, visibility_delay_seconds=0.05, visible=False)

    scheduler.set_visibility(True)
    await asyncio.sleep(0.01)
    scheduler.set_visibility(False)
    await asyncio.sleep(0.08)

    assert target.reasons == []
    await scheduler.stop()


@pytest.mark.asyncio
async def test_visibility_refresh_respects_in_flight_fetch():
    target = FakeDashboard(loading=True)
    scheduler = RefreshScheduler(target, interval_seconds=10, visibility_delay_seconds=0.01, visible=False)

    scheduler.set_visibility(True)
    await asyncio.sleep(0.05)

    assert target.reasons == []
    await scheduler.stop()


def test_from_settings_converts_milliseconds():
    settings = DashboardSettings(AUTO_REFRESH_INTERVAL_MS=1500, VISIBILITY_REFRESH_DELAY_MS=250)

    scheduler = RefreshScheduler.from_settings(FakeDashboard(), settings)

    assert scheduler.interval_seconds == 1.5
    assert scheduler.visibility_delay_seconds == 0.25
