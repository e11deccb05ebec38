"""
swervehw: hardware resolution for swerve drivetrains.

Turns the device entries of swerve configuration files into encoder, IMU
and motor controller drivers.
"""

__version__ = "0.1.0"

from swervehw.devices import (
    Capability,
    DeviceDescriptor,
    DeviceResolver,
    create_encoder,
    create_imu,
    create_motor,
)
from swervehw.diagnostics import Diagnostic, DiagnosticsLog
from swervehw.errors import (
    DeviceResolutionError,
    UnrecognizedTypeError,
    UnsupportedCombinationError,
    MalformedBusFieldError,
    MissingMotorContextError,
)
from swervehw.physics import DCMotor, get_motor_model
