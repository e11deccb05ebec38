"""
Factory for resolving device descriptors into drivers.
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple, Optional

from swervehw.devices.base import Capability, AbsoluteEncoder, IMU, Motor
from swervehw.devices.descriptor import DeviceDescriptor
from swervehw.devices.registry import (
    BusAddressing,
    DriverRegistry,
    default_encoder_registry,
    default_imu_registry,
    default_motor_registry,
)
from swervehw.diagnostics import Diagnostic, DiagnosticsSink, DiagnosticsLog
from swervehw.errors import (
    MalformedBusFieldError,
    MissingMotorContextError,
    UnrecognizedTypeError,
    UnsupportedCombinationError,
)
from swervehw.physics import DCMotor, get_motor_model

logger = logging.getLogger(__name__)

DEFAULT_CAN_ID_WARNING_THRESHOLD = 40

# Type string -> encoder family. "none" is handled before the lookup.
ENCODER_TYPES: Dict[str, str] = {
    "sparkflex_integrated": "sparkflex_attached",
    "sparkflex_attached": "sparkflex_attached",
    "sparkflex_canandmag": "sparkflex_attached",
    "sparkflex_canandcoder": "sparkflex_attached",
    "ctre_mag": "dutycycle",
    "rev_hex": "dutycycle",
    "throughbore": "dutycycle",
    "am_mag": "dutycycle",
    "dutycycle": "dutycycle",
    "thrifty": "analog",
    "ma3": "analog",
    "analog": "analog",
    "cancoder": "cancoder",
}

IMU_TYPES: Dict[str, str] = {
    "analog": "analog",
    "pigeon2": "pigeon2",
}


class MotorRecipe(NamedTuple):
    """Controller family and physical motor of a motor type string."""

    family: str
    model: Optional[str]

    @property
    def supported(self) -> bool:
        return self.model is not None


MOTOR_TYPES: Dict[str, MotorRecipe] = {
    "talonfxs_neo": MotorRecipe("talonfxs", "NEO"),
    "talonfxs_neo550": MotorRecipe("talonfxs", "NEO 550"),
    "talonfxs_vortex": MotorRecipe("talonfxs", "NEO Vortex"),
    "talonfxs_minion": MotorRecipe("talonfxs", None),
    "sparkmax_neo": MotorRecipe("sparkmax", "NEO"),
    "neo": MotorRecipe("sparkmax", "NEO"),
    "sparkmax": MotorRecipe("sparkmax", "NEO"),
    "sparkmax_vortex": MotorRecipe("sparkmax", "NEO Vortex"),
    "sparkmax_minion": MotorRecipe("sparkmax", None),
    "sparkmax_neo550": MotorRecipe("sparkmax", "NEO 550"),
    "neo550": MotorRecipe("sparkmax", "NEO 550"),
    "sparkflex_vortex": MotorRecipe("sparkflex", "NEO Vortex"),
    "vortex": MotorRecipe("sparkflex", "NEO Vortex"),
    "sparkflex": MotorRecipe("sparkflex", "NEO Vortex"),
    "sparkflex_neo": MotorRecipe("sparkflex", "NEO"),
    "sparkflex_neo550": MotorRecipe("sparkflex", "NEO 550"),
    "sparkflex_minion": MotorRecipe("sparkflex", None),
    "falcon500": MotorRecipe("talonfx", "Falcon 500"),
    "falcon": MotorRecipe("talonfx", "Falcon 500"),
    "falcon500foc": MotorRecipe("talonfx", "Falcon 500 FOC"),
    "krakenx60": MotorRecipe("talonfx", "Kraken X60"),
    "talonfx": MotorRecipe("talonfx", "Kraken X60"),
    "krakenx60foc": MotorRecipe("talonfx", "Kraken X60 FOC"),
}

# Same grammar and 32-bit range as Java's Integer.parseInt.
_CONTROLLER_INDEX = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -2 ** 31
_INT_MAX = 2 ** 31 - 1


def parse_controller_index(device_type: str, canbus: Optional[str]) -> int:
    """
    Parse the canbus field of a REV Spark descriptor as a controller index.

    Raises:
        MalformedBusFieldError: If canbus is empty, absent, not an integer or out of 32-bit range
    """
    if canbus is None or not _CONTROLLER_INDEX.fullmatch(canbus):
        raise MalformedBusFieldError(device_type, canbus)
    index = int(canbus)
    if not _INT_MIN <= index <= _INT_MAX:
        raise MalformedBusFieldError(device_type, canbus)
    return index


class DeviceResolver:
    """
    Resolves device descriptors into encoder, IMU and motor drivers.

    A resolver holds no state between calls apart from its collaborators:
    the diagnostics sink it pushes hazards to, the driver registries it
    builds from and the physical motor model lookup.
    """

    def __init__(self,
                 diagnostics: Optional[DiagnosticsSink] = None,
                 encoders: Optional[DriverRegistry] = None,
                 imus: Optional[DriverRegistry] = None,
                 motors: Optional[DriverRegistry] = None,
                 motor_model_lookup: Callable[[str], DCMotor] = get_motor_model,
                 can_id_warning_threshold: int = DEFAULT_CAN_ID_WARNING_THRESHOLD):
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticsLog()
        self.encoders = encoders or default_encoder_registry()
        self.imus = imus or default_imu_registry()
        self.motors = motors or default_motor_registry()
        self.motor_model_lookup = motor_model_lookup
        self.can_id_warning_threshold = can_id_warning_threshold

    @classmethod
    def from_config(cls, cfg, diagnostics: Optional[DiagnosticsSink] = None) -> "DeviceResolver":
        """
        Create a resolver using the settings of a configuration object.

        Args:
            cfg: Object with a ``get(section, key)`` method, e.g. ``swervehw.config.config``
            diagnostics: Sink receiving configuration hazards
        """
        threshold = cfg.get("resolver", "can_id_warning_threshold")
        if threshold is None:
            threshold = DEFAULT_CAN_ID_WARNING_THRESHOLD
        return cls(diagnostics=diagnostics, can_id_warning_threshold=int(threshold))

    def _check_identifier(self, descriptor: DeviceDescriptor) -> None:
        if descriptor.identifier > self.can_id_warning_threshold:
            self.diagnostics.raise_warning(Diagnostic.CAN_ID_WARNING)

    def resolve_encoder(self, descriptor: DeviceDescriptor,
                        motor: Optional[Motor] = None) -> Optional[AbsoluteEncoder]:
        """
        Create an absolute encoder from a descriptor.

        Args:
            descriptor: Encoder descriptor
            motor: Motor an attached encoder is read through, only used for
                the "sparkflex_*" attached types

        Returns:
            Encoder driver, or None when the type is "none"

        Raises:
            UnrecognizedTypeError: If the type is not an encoder type
            MissingMotorContextError: If an attached type is given without a motor
        """
        self._check_identifier(descriptor)
        device_type = descriptor.type

        if device_type == "none":
            logger.debug("Encoder type 'none', no absolute encoder created")
            return None

        family = ENCODER_TYPES.get(device_type)
        if family is None:
            raise UnrecognizedTypeError(device_type, "absolute encoder")

        logger.debug(f"Resolving encoder '{device_type}' as {family}")
        if family == "sparkflex_attached":
            # Addressed through the motor, id and canbus are ignored.
            if motor is None:
                raise MissingMotorContextError(
                    f"Encoder type '{device_type}' is attached to a motor but no motor was given",
                    device_type,
                )
            return self.encoders.create(family, motor, 360)
        if family == "cancoder":
            return self.encoders.create(family, descriptor.identifier, descriptor.canbus)
        # Duty cycle and analog encoders are wired to a roboRIO channel.
        return self.encoders.create(family, descriptor.identifier)

    def resolve_imu(self, descriptor: DeviceDescriptor) -> IMU:
        """
        Create an IMU from a descriptor.

        Raises:
            UnrecognizedTypeError: If the type is not an IMU type
        """
        self._check_identifier(descriptor)
        family = IMU_TYPES.get(descriptor.type)
        if family is None:
            raise UnrecognizedTypeError(descriptor.type, "imu/gyroscope")

        logger.debug(f"Resolving IMU '{descriptor.type}'")
        if family == "analog":
            return self.imus.create(family, descriptor.identifier)
        return self.imus.create(family, descriptor.identifier, descriptor.canbus)

    def resolve_motor(self, descriptor: DeviceDescriptor, is_drive_motor: bool) -> Motor:
        """
        Create a motor controller from a descriptor.

        Args:
            descriptor: Motor descriptor
            is_drive_motor: Whether the motor drives the wheel (True) or steers the module

        Returns:
            Motor driver

        Raises:
            UnrecognizedTypeError: If the type is not a motor type
            UnsupportedCombinationError: If the controller/motor combination is not available yet
            MalformedBusFieldError: If a REV Spark descriptor has no integer controller index in canbus
        """
        self._check_identifier(descriptor)
        device_type = descriptor.type
        recipe = MOTOR_TYPES.get(device_type)
        if recipe is None:
            raise UnrecognizedTypeError(device_type, "motor")
        if not recipe.supported:
            raise UnsupportedCombinationError(
                f"Cannot create {device_type} combination yet", device_type
            )

        motor_model = self.motor_model_lookup(recipe.model)
        logger.debug(f"Resolving motor '{device_type}' as {recipe.family} with {recipe.model}")

        # REV Spark controllers take a controller index, CTRE controllers a bus name.
        if self.motors.addressing(recipe.family) is BusAddressing.INDEX:
            controller_index = parse_controller_index(device_type, descriptor.canbus)
            return self.motors.create(recipe.family, controller_index, descriptor.identifier,
                                      is_drive_motor, motor_model)
        return self.motors.create(recipe.family, descriptor.identifier, descriptor.canbus,
                                  is_drive_motor, motor_model)

    @staticmethod
    def known_types(capability: Capability) -> List[str]:
        """
        List the type strings recognized for a capability.

        Unsupported motor combinations are included, they are recognized.
        """
        if capability is Capability.ENCODER:
            return ["none"] + list(ENCODER_TYPES)
        if capability is Capability.IMU:
            return list(IMU_TYPES)
        return list(MOTOR_TYPES)


def create_encoder(descriptor: DeviceDescriptor, motor: Optional[Motor] = None,
                   diagnostics: Optional[DiagnosticsSink] = None) -> Optional[AbsoluteEncoder]:
    """Resolve a single encoder descriptor with the default registries."""
    return DeviceResolver(diagnostics).resolve_encoder(descriptor, motor)


def create_imu(descriptor: DeviceDescriptor,
               diagnostics: Optional[DiagnosticsSink] = None) -> IMU:
    """Resolve a single IMU descriptor with the default registries."""
    return DeviceResolver(diagnostics).resolve_imu(descriptor)


def create_motor(descriptor: DeviceDescriptor, is_drive_motor: bool,
                 diagnostics: Optional[DiagnosticsSink] = None) -> Motor:
    """Resolve a single motor descriptor with the default registries."""
    return DeviceResolver(diagnostics).resolve_motor(descriptor, is_drive_motor)
