"""
Gyroscope and IMU drivers.
"""

from swervehw.devices.base import IMU, DEFAULT_CANBUS


class AnalogGyro(IMU):
    """Single axis analog gyroscope on a roboRIO analog input."""

    vendor = "WPILib"

    def __init__(self, channel: int):
        super().__init__({"channel": channel})

    @property
    def channel(self) -> int:
        return self.config["channel"]

    def describe(self) -> str:
        return f"Analog gyro on analog channel {self.channel}"


class Pigeon2(IMU):
    """CTRE Pigeon 2.0 on a CAN bus."""

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
        return f"Pigeon2 on CAN id {self.can_id}, bus '{self.canbus}'"
