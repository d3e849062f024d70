"""Background refresh triggers: periodic auto refresh and refresh-on-visible."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional, Protocol

from ingestion.settings import DashboardSettings


class Refreshable(Protocol):
    @property
    def is_loading(self) -> bool: ...  # noqa: D401

    async def refresh(self, *, reason: str = "manual") -> bool: ...  # noqa: D401


class RefreshScheduler:
    """Runs background refreshes as cancellable asyncio tasks.

    Background triggers never wait for or interrupt a running fetch; they skip
    their turn when the target reports ``is_loading``.
    """

    def __init__(
        self,
        target: Refreshable,
        *,
        interval_seconds: float,
        visibility_delay_seconds: float,
        visible: bool = True,
    ):
        self.target = target
        self.interval_seconds = interval_seconds
        self.visibility_delay_seconds = visibility_delay_seconds
        self.visible = visible
        self._auto_task: Optional[asyncio.Task] = None
        self._delayed_task: Optional[asyncio.Task] = None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, target: Refreshable, settings: DashboardSettings) -> "RefreshScheduler":
        return cls(
            target,
            interval_seconds=settings.auto_refresh_interval_ms / 1000.0,
            visibility_delay_seconds=settings.visibility_refresh_delay_ms / 1000.0,
        )

    @property
    def running(self) -> bool:
        return self._auto_task is not None and not self._auto_task.done()

    def start(self) -> None:
        if self.running:
            return
        self._auto_task = asyncio.get_running_loop().create_task(self._auto_loop())

    async def stop(self) -> None:
        tasks = [t for t in (self._auto_task, self._delayed_task) if t is not None]
        self._auto_task = None
        self._delayed_task = None
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def set_visibility(self, visible: bool) -> None:
        """Record view visibility; becoming visible schedules a delayed refresh."""
        was_visible = self.visible
        self.visible = visible
        if not visible:
            self._cancel_delayed()
            return
        if was_visible:
            return
        self._cancel_delayed()
        self._delayed_task = asyncio.get_running_loop().create_task(self._delayed_refresh())

    def _cancel_delayed(self) -> None:
        if self._delayed_task is not None and not self._delayed_task.done():
            self._delayed_task.cancel()
        self._delayed_task = None

    async def _auto_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            if not self.visible:
                continue
            await self._trigger("auto")

    async def _delayed_refresh(self) -> None:
        await asyncio.sleep(self.visibility_delay_seconds)
        await self._trigger("visibility")

    async def _trigger(self, reason: str) -> None:
        if self.target.is_loading:
            self.logger.info("scheduler.refresh.skipped", extra={"reason": reason})
            return
        self.logger.info("scheduler.refresh", extra={"reason": reason})
        try:
            await self.target.refresh(reason=reason)
        except Exception:
            self.logger.exception("scheduler.refresh_failed", extra={"reason": reason})
