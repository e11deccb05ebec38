"""
Base classes for swerve drive device drivers.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Any, Optional

from swervehw.physics import DCMotor

logger = logging.getLogger(__name__)

# CTRE devices treat an empty bus name as the roboRIO's own CAN bus.
DEFAULT_CANBUS = "rio"


class Capability(Enum):
    """Device roles a descriptor can be resolved into."""

    ENCODER = "encoder"
    IMU = "imu"
    MOTOR = "motor"


class SwerveDevice(ABC):
    """Base class for device drivers."""

    capability: Capability
    vendor: str = ""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize device driver.

        Args:
            config: Connection parameters of the device
        """
        self.config = config or {}
        logger.debug(f"Created {type(self).__name__} with {self.config}")

    @abstractmethod
    def describe(self) -> str:
        """
        Describe the device and how it is addressed.

        Returns:
            Human readable description
        """
        pass

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.config == other.config

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self.config.items())
        return f"{type(self).__name__}({params})"


class AbsoluteEncoder(SwerveDevice):
    """Base class for absolute encoders."""

    capability = Capability.ENCODER


class IMU(SwerveDevice):
    """Base class for gyroscopes and IMUs."""

    capability = Capability.IMU


class Motor(SwerveDevice):
    """Base class for motor controllers."""

    capability = Capability.MOTOR

    def __init__(self, can_id: int, is_drive_motor: bool, motor_model: DCMotor,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize motor controller.

        Args:
            can_id: CAN id of the controller
            is_drive_motor: Whether the motor drives the wheel or steers the module
            motor_model: Physical motor attached to the controller
            config: Additional vendor specific connection parameters
        """
        params = {"can_id": can_id}
        params.update(config or {})
        params["is_drive_motor"] = is_drive_motor
        params["motor_model"] = motor_model
        super().__init__(params)

    @property
    def can_id(self) -> int:
        return self.config["can_id"]

    @property
    def is_drive_motor(self) -> bool:
        return self.config["is_drive_motor"]

    @property
    def motor_model(self) -> DCMotor:
        return self.config["motor_model"]

    @property
    def role(self) -> str:
        return "drive" if self.is_drive_motor else "angle"
