"""Actuator errors: driver failures at drive time, probe failures at startup."""


class ActuatorError(Exception):
    """Base class for pump actuator errors."""


class DriverFailure(ActuatorError):
    """GPIO driver reported an error while driving the pump line."""

    def __init__(self, message: str, output_may_be_active: bool = True):
        super().__init__(message)
        self.output_may_be_active = output_may_be_active


class HardwareUnavailable(ActuatorError):
    """GPIO line could not be claimed at startup (recovered by simulation)."""
