"""
Device drivers and the resolver that builds them from descriptors.
"""

from swervehw.devices.base import Capability, SwerveDevice, AbsoluteEncoder, IMU, Motor
from swervehw.devices.descriptor import DeviceDescriptor
from swervehw.devices.encoders import SparkFlexEncoder, DutyCycleEncoder, AnalogEncoder, CANCoder
from swervehw.devices.imus import AnalogGyro, Pigeon2
from swervehw.devices.motors import TalonFXMotor, TalonFXSMotor, SparkMaxMotor, SparkFlexMotor
from swervehw.devices.registry import BusAddressing, DriverRegistry
from swervehw.devices.factory import DeviceResolver, create_encoder, create_imu, create_motor

__all__ = [
    'Capability',
    'SwerveDevice',
    'AbsoluteEncoder',
    'IMU',
    'Motor',
    'DeviceDescriptor',
    'SparkFlexEncoder',
    'DutyCycleEncoder',
    'AnalogEncoder',
    'CANCoder',
    'AnalogGyro',
    'Pigeon2',
    'TalonFXMotor',
    'TalonFXSMotor',
    'SparkMaxMotor',
    'SparkFlexMotor',
    'BusAddressing',
    'DriverRegistry',
    'DeviceResolver',
    'create_encoder',
    'create_imu',
    'create_motor',
]
