"""
Physical DC motor models.

Each model captures the stall torque and free speed characteristics of a
motor product line. Derived constants follow the WPILib ``DCMotor`` model.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict


def rpm_to_rad_per_sec(rpm: float) -> float:
    return rpm * 2.0 * math.pi / 60.0


@dataclass(frozen=True)
class DCMotor:
    """Torque/speed characterization of one or more identical DC motors."""

    name: str
    nominal_voltage_volts: float
    stall_torque_newton_meters: float
    stall_current_amps: float
    free_current_amps: float
    free_speed_rad_per_sec: float
    num_motors: int = 1

    @property
    def r_ohms(self) -> float:
        return self.nominal_voltage_volts / self.stall_current_amps

    @property
    def kv_rad_per_sec_per_volt(self) -> float:
        return self.free_speed_rad_per_sec / (
            self.nominal_voltage_volts - self.r_ohms * self.free_current_amps
        )

    @property
    def kt_newton_meters_per_amp(self) -> float:
        return self.stall_torque_newton_meters / self.stall_current_amps

    @classmethod
    def from_datasheet(cls, name: str, voltage: float, stall_torque: float,
                       stall_current: float, free_current: float, free_speed_rpm: float,
                       num_motors: int = 1) -> "DCMotor":
        """
        Build a model from single-motor datasheet values.

        Torque and currents scale with the number of motors in the gearbox,
        free speed does not.
        """
        if num_motors < 1:
            raise ValueError(f"num_motors must be at least 1, got {num_motors}")
        return cls(
            name=name,
            nominal_voltage_volts=voltage,
            stall_torque_newton_meters=stall_torque * num_motors,
            stall_current_amps=stall_current * num_motors,
            free_current_amps=free_current * num_motors,
            free_speed_rad_per_sec=rpm_to_rad_per_sec(free_speed_rpm),
            num_motors=num_motors,
        )


def get_neo(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("NEO", 12, 2.6, 105, 1.8, 5676, num_motors)


def get_neo550(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("NEO 550", 12, 0.97, 100, 1.4, 11000, num_motors)


def get_neo_vortex(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("NEO Vortex", 12, 3.6, 211, 3.6, 6784, num_motors)


def get_falcon500(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("Falcon 500", 12, 4.69, 257, 1.5, 6380, num_motors)


def get_falcon500_foc(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("Falcon 500 FOC", 12, 5.84, 304, 1.5, 6080, num_motors)


def get_kraken_x60(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("Kraken X60", 12, 7.09, 366, 2, 6000, num_motors)


def get_kraken_x60_foc(num_motors: int = 1) -> DCMotor:
    return DCMotor.from_datasheet("Kraken X60 FOC", 12, 9.37, 483, 2, 5800, num_motors)


MOTOR_MODELS: Dict[str, Callable[[int], DCMotor]] = {
    "NEO": get_neo,
    "NEO 550": get_neo550,
    "NEO Vortex": get_neo_vortex,
    "Falcon 500": get_falcon500,
    "Falcon 500 FOC": get_falcon500_foc,
    "Kraken X60": get_kraken_x60,
    "Kraken X60 FOC": get_kraken_x60_foc,
}


def get_motor_model(name: str, num_motors: int = 1) -> DCMotor:
    """
    Look up a physical motor model by its canonical name.

    Args:
        name: Canonical model name, e.g. "NEO" or "Kraken X60 FOC"
        num_motors: Number of motors sharing the gearbox

    Returns:
        Motor characterization

    Raises:
        ValueError: If the model name is unknown
    """
    try:
        factory = MOTOR_MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown motor model: {name}") from None
    return factory(num_motors)
