"""
Motor controller drivers.

CTRE controllers are addressed by CAN bus name, REV Spark controllers by
an integer controller index.
"""

from swervehw.devices.base import Motor, DEFAULT_CANBUS
from swervehw.physics import DCMotor


class TalonFXMotor(Motor):
    """CTRE TalonFX with an integrated Falcon 500 or Kraken X60."""

    vendor = "CTRE"

    def __init__(self, can_id: int, canbus: str, is_drive_motor: bool, motor_model: DCMotor):
        super().__init__(can_id, is_drive_motor, motor_model,
                         {"canbus": canbus or DEFAULT_CANBUS})

    @property
    def canbus(self) -> str:
        return self.config["canbus"]

    def describe(self) -> str:
        return (f"{type(self).__name__} {self.role} motor ({self.motor_model.name}) "
                f"on CAN id {self.can_id}, bus '{self.canbus}'")


class TalonFXSMotor(TalonFXMotor):
    """CTRE TalonFXS driving a brushless motor from another vendor."""
    pass


class SparkMaxMotor(Motor):
    """REV Spark MAX."""

    vendor = "REV"

    def __init__(self, controller_index: int, can_id: int, is_drive_motor: bool, motor_model: DCMotor):
        super().__init__(can_id, is_drive_motor, motor_model,
                         {"controller_index": controller_index})

    @property
    def controller_index(self) -> int:
        return self.config["controller_index"]

    def describe(self) -> str:
        return (f"{type(self).__name__} {self.role} motor ({self.motor_model.name}) "
                f"on CAN id {self.can_id}, controller {self.controller_index}")


class SparkFlexMotor(SparkMaxMotor):
    """REV Spark Flex."""
    pass
