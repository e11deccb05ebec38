"""
Registries of driver constructors, one per capability.

A registry only knows how to build drivers of a family, it never decides
which family a descriptor belongs to.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from swervehw.devices.base import Capability, SwerveDevice
from swervehw.devices.encoders import SparkFlexEncoder, DutyCycleEncoder, AnalogEncoder, CANCoder
from swervehw.devices.imus import AnalogGyro, Pigeon2
from swervehw.devices.motors import TalonFXMotor, TalonFXSMotor, SparkMaxMotor, SparkFlexMotor
from swervehw.errors import DriverNotRegisteredError

logger = logging.getLogger(__name__)


class BusAddressing(Enum):
    """How a family interprets the descriptor's canbus field."""

    NAME = "name"
    INDEX = "index"


class DriverRegistry:
    """
    Family name to driver constructor mapping.

    Usage:
        registry = default_motor_registry()
        registry.register("talonfx", TalonFXMotor, BusAddressing.NAME)
        motor = registry.create("talonfx", 3, "", True, get_kraken_x60())
    """

    def __init__(self, capability: Capability):
        self.capability = capability
        self._constructors: Dict[str, Callable[..., SwerveDevice]] = {}
        self._addressing: Dict[str, BusAddressing] = {}

    def register(self, family: str, constructor: Callable[..., SwerveDevice],
                 addressing: BusAddressing = BusAddressing.NAME) -> None:
        """
        Register a constructor for a driver family.

        Args:
            family: Family name, e.g. "cancoder" or "sparkmax"
            constructor: Callable returning the driver
            addressing: How the family reads the canbus field
        """
        if family in self._constructors:
            logger.info(f"Replacing {self.capability.value} driver for family '{family}'")
        self._constructors[family] = constructor
        self._addressing[family] = addressing

    def addressing(self, family: str) -> BusAddressing:
        self._require(family)
        return self._addressing[family]

    def create(self, family: str, *args, **kwargs) -> SwerveDevice:
        """
        Construct a driver of the given family.

        Raises:
            DriverNotRegisteredError: If no constructor is registered for the family
        """
        return self._require(family)(*args, **kwargs)

    def families(self) -> List[str]:
        return sorted(self._constructors)

    def _require(self, family: str) -> Callable[..., SwerveDevice]:
        try:
            return self._constructors[family]
        except KeyError:
            raise DriverNotRegisteredError(
                f"No {self.capability.value} driver registered for family '{family}'"
            ) from None

    def __contains__(self, family: Optional[str]) -> bool:
        return family in self._constructors


def default_encoder_registry() -> DriverRegistry:
    registry = DriverRegistry(Capability.ENCODER)
    registry.register("sparkflex_attached", SparkFlexEncoder)
    registry.register("dutycycle", DutyCycleEncoder)
    registry.register("analog", AnalogEncoder)
    registry.register("cancoder", CANCoder)
    return registry


def default_imu_registry() -> DriverRegistry:
    registry = DriverRegistry(Capability.IMU)
    registry.register("analog", AnalogGyro)
    registry.register("pigeon2", Pigeon2)
    return registry


def default_motor_registry() -> DriverRegistry:
    registry = DriverRegistry(Capability.MOTOR)
    registry.register("talonfx", TalonFXMotor, BusAddressing.NAME)
    registry.register("talonfxs", TalonFXSMotor, BusAddressing.NAME)
    registry.register("sparkmax", SparkMaxMotor, BusAddressing.INDEX)
    registry.register("sparkflex", SparkFlexMotor, BusAddressing.INDEX)
    return registry
