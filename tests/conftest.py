"""Shared fixtures: fake actuators and an app wired to them."""

import asyncio
import sys
import time
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from api.main import create_app
from control.controller_state import ControllerState
from control.errors import DriverFailure
from control.pump_actuator import DriveResult, PumpActuator

API_KEY = "test-secret"
PIN = 17


class RecordingActuator(PumpActuator):
    """Fake actuator recording each drive interval."""

    def __init__(self, simulated: bool = True, fail: bool = False):
        self.simulated, self.fail = simulated, fail
        self.intervals = []
        self.calls = 0
        self.closed = False

    async def drive(self, duration: float) -> DriveResult:
        self.calls += 1
        start = time.monotonic()
        await asyncio.sleep(duration)
        self.intervals.append((start, time.monotonic()))
        if self.fail:
            raise DriverFailure("gpio_write returned error -4")
        return DriveResult(simulated=self.simulated, duration=duration, pin=PIN)

    def close(self):
        self.closed = True


@pytest.fixture
def actuator():
    return RecordingActuator()


@pytest.fixture
def controller(actuator):
    return ControllerState(actuator, pin=PIN, duration=0.05)


@pytest.fixture
def app(controller):
    return create_app(controller=controller, api_secret_key=API_KEY)


@pytest.fixture
def auth_headers():
    return {"X-API-KEY": API_KEY}
