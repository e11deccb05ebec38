"""
Absolute encoder drivers.
"""

from swervehw.devices.base import AbsoluteEncoder, Motor, DEFAULT_CANBUS
from swervehw.devices.motors import SparkFlexMotor
from swervehw.errors import IncompatibleMotorContextError


class SparkFlexEncoder(AbsoluteEncoder):
    """
    Absolute encoder wired into the data port of a Spark Flex.

    The encoder has no address of its own, it is read through the motor
    controller it is attached to.
    """

    vendor = "REV"

    def __init__(self, motor: Motor, conversion_factor: float):
        """
        Initialize attached encoder.

        Args:
            motor: Spark Flex the encoder is plugged into
            conversion_factor: Position conversion factor, 360 for degrees

        Raises:
            IncompatibleMotorContextError: If the motor is not a Spark Flex
        """
        if not isinstance(motor, SparkFlexMotor):
            raise IncompatibleMotorContextError(
                f"Motor given to instantiate SparkFlexEncoder is not a Spark Flex: {motor!r}"
            )
        super().__init__({"motor": motor, "conversion_factor": conversion_factor})

    @property
    def motor(self) -> SparkFlexMotor:
        return self.config["motor"]

    @property
    def conversion_factor(self) -> float:
        return self.config["conversion_factor"]

    def describe(self) -> str:
        return f"Encoder attached to Spark Flex on CAN id {self.motor.can_id}"


class DutyCycleEncoder(AbsoluteEncoder):
    """PWM/duty cycle encoder on a roboRIO DIO channel (CTRE Mag, REV Through Bore, AM Mag)."""

    vendor = "WPILib"

    def __init__(self, channel: int):
        super().__init__({"channel": channel})

    @property
    def channel(self) -> int:
        return self.config["channel"]

    def describe(self) -> str:
        return f"Duty cycle encoder on DIO channel {self.channel}"


class AnalogEncoder(AbsoluteEncoder):
    """Analog absolute encoder (Thrifty, MA3) on a roboRIO analog input."""

    vendor = "WPILib"

    def __init__(self, channel: int):
        super().__init__({"channel": channel})

    @property
    def channel(self) -> int:
        return self.config["channel"]

    def describe(self) -> str:
        return f"Analog encoder on analog channel {self.channel}"


class CANCoder(AbsoluteEncoder):
    """CTRE CANcoder."""

    vendor = "CTRE"

    def __init__(self, can_id: int, canbus: str = ""):
        super().__init__({"can_id": can_id, "canbus": canbus or DEFAULT_CANBUS})

    @property
    def can_id(self) -> int:
        return self.config["can_id"]

    @property
    def canbus(self) -> str:
        return self.config["canbus"]

    def describe(self) -> str:
        return f"CANcoder on CAN id {self.can_id}, bus '{self.canbus}'"
