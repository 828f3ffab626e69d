"""Pump actuator: live lgpio output line or simulated timer (BCM pin, default 17)."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

try:
    import lgpio
    GPIO_AVAILABLE = True
except ImportError:
    GPIO_AVAILABLE = False
    logging.warning("lgpio not available - simulation mode")

from .errors import DriverFailure, HardwareUnavailable

logger = logging.getLogger(__name__)

LEVEL_ACTIVE, LEVEL_INACTIVE = 1, 0


@dataclass(frozen=True)
class DriveResult:
    """Outcome of one drive sequence."""
    simulated: bool
    duration: float
    pin: Optional[int] = None

    def describe(self) -> str:
        """Raw descriptor of which code path ran."""
        if self.simulated:
            return f"Simulated run: drove pump for {self.duration:g}s (no hardware)"
        return f"Live run: drove GPIO {self.pin} for {self.duration:g}s"


class PumpActuator:
    """Drives the single pump output for a fixed duration."""

    simulated = False

    async def drive(self, duration: float) -> DriveResult:
        raise NotImplementedError

    def is_simulated(self) -> bool:
        return self.simulated

    def close(self):
        """Release hardware resources."""


class LiveActuator(PumpActuator):
    """Real output line claimed through lgpio."""

    def __init__(self, pin: int, chip_number: int = 0):
        """Open the gpiochip and claim the pin as an output held LOW."""
        if not GPIO_AVAILABLE:
            raise HardwareUnavailable("lgpio not installed")
        self.pin, self.chip_number, self.chip = pin, chip_number, None
        try:
            self.chip = lgpio.gpiochip_open(chip_number)
            lgpio.gpio_claim_output(self.chip, pin, LEVEL_INACTIVE)
        except Exception as e:
            if self.chip is not None:
                lgpio.gpiochip_close(self.chip)
                self.chip = None
            raise HardwareUnavailable(f"cannot claim GPIO {pin} on gpiochip{chip_number}: {e}") from e
        logger.info(f"✓ GPIO initialized: pin {pin} configured as output (LOW)")

    def _write(self, level: int):
        lgpio.gpio_write(self.chip, self.pin, level)

    async def drive(self, duration: float) -> DriveResult:
        """Set the line HIGH, wait, set it LOW."""
        try:
            self._write(LEVEL_ACTIVE)
        except Exception as e:
            logger.error(f"GPIO write HIGH failed for pin {self.pin}: {e}")
            self._force_low()
            raise DriverFailure(f"failed to switch pump on: {e}") from e

        logger.info(f"Pump ON (GPIO {self.pin})")
        try:
            await asyncio.sleep(duration)
        except BaseException:
            # Interrupted wait: switch off, keep the original exception
            self._force_low()
            raise

        try:
            self._write(LEVEL_INACTIVE)
        except Exception as e:
            logger.error(f"GPIO write LOW failed for pin {self.pin}: {e}")
            raise DriverFailure(f"failed to switch pump off: {e}") from e
        logger.info(f"Pump OFF (GPIO {self.pin})")

        return DriveResult(simulated=False, duration=duration, pin=self.pin)

    def _force_low(self):
        try:
            self._write(LEVEL_INACTIVE)
        except Exception as e:
            logger.error(f"Could not force GPIO {self.pin} LOW: {e}")

    def close(self):
        """Drive the line LOW and release the chip."""
        if self.chip is None:
            return
        logger.info("Cleaning up GPIO resources")
        self._force_low()
        try:
            lgpio.gpio_free(self.chip, self.pin)
            lgpio.gpiochip_close(self.chip)
            logger.info("GPIO resources released")
        except Exception as e:
            logger.error(f"GPIO cleanup error: {e}")
        self.chip = None


class SimulatedActuator(PumpActuator):
    """No hardware binding; only lets the drive duration elapse."""

    simulated = True

    def __init__(self, pin: Optional[int] = None):
        self.pin = pin

    async def drive(self, duration: float) -> DriveResult:
        logger.info(f"--- [SIMULATION] pump run: {duration:g}s ---")
        await asyncio.sleep(duration)
        logger.info("--- [SIMULATION] run complete ---")
        return DriveResult(simulated=True, duration=duration, pin=self.pin)


def create_actuator(pin: int, chip_number: int = 0) -> PumpActuator:
    """Probe the hardware once; fall back to simulation on any failure."""
    try:
        return LiveActuator(pin, chip_number)
    except HardwareUnavailable as e:
        logger.warning(f"GPIO unavailable ({e}) - starting in simulation mode")
        return SimulatedActuator(pin)
