"""Shared controller state: the one pump actuator behind an asyncio lock."""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from .pump_actuator import DriveResult, PumpActuator

logger = logging.getLogger(__name__)

T = TypeVar("T")

MODE_LIVE = "LIVE GPIO MODE"
MODE_SIMULATION = "SIMULATION MODE"


class ControllerState:
    """Owns the actuator for the process lifetime and serializes drives.

    Created once at startup and shared by every request handler. The lock is
    the only thing that keeps drive sequences from overlapping; queued
    requests wait on it and each runs its own full drive afterwards.
    Status reads go around the lock since the actuator variant never changes
    after construction.
    """

    def __init__(self, actuator: PumpActuator, pin: int, duration: float):
        self._actuator = actuator
        self._lock = asyncio.Lock()
        self.pin, self.duration = pin, duration

    async def with_actuator(self, fn: Callable[[PumpActuator], Awaitable[T]]) -> T:
        """Run fn on the held actuator; the lock is released on every exit path."""
        async with self._lock:
            return await fn(self._actuator)

    async def water(self) -> DriveResult:
        """Drive the pump for the configured duration."""
        if self._lock.locked():
            logger.info("Pump busy - request queued behind running drive")
        return await self.with_actuator(lambda actuator: actuator.drive(self.duration))

    def is_simulated(self) -> bool:
        return self._actuator.is_simulated()

    @property
    def server_mode(self) -> str:
        return MODE_SIMULATION if self.is_simulated() else MODE_LIVE

    def close(self):
        self._actuator.close()
