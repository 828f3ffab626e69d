"""Control module: pump actuator (live lgpio or simulated) behind a shared lock."""

from .controller_state import ControllerState
from .errors import ActuatorError, DriverFailure, HardwareUnavailable
from .pump_actuator import DriveResult, LiveActuator, PumpActuator, SimulatedActuator, create_actuator

__all__ = [
    'ControllerState',
    'PumpActuator', 'LiveActuator', 'SimulatedActuator', 'DriveResult', 'create_actuator',
    'ActuatorError', 'DriverFailure', 'HardwareUnavailable',
]
