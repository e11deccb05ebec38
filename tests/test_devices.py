"""
Tests for device drivers, registries and descriptors.
"""

import unittest

from pydantic import ValidationError

from swervehw.devices import (
    BusAddressing,
    Capability,
    CANCoder,
    DeviceDescriptor,
    DriverRegistry,
    DutyCycleEncoder,
    Pigeon2,
    SparkFlexEncoder,
    SparkFlexMotor,
    SparkMaxMotor,
    TalonFXMotor,
)
from swervehw.devices.registry import default_encoder_registry, default_imu_registry, default_motor_registry
from swervehw.errors import DriverNotRegisteredError, IncompatibleMotorContextError, InvalidDescriptorError
from swervehw.physics import get_kraken_x60, get_neo_vortex


class TestDeviceDescriptor(unittest.TestCase):
    def test_from_dict(self):
        descriptor = DeviceDescriptor.from_dict({"type": "cancoder", "id": 9, "canbus": "rio"})
        self.assertEqual(descriptor, DeviceDescriptor("cancoder", 9, "rio"))

    def test_canbus_defaults_to_empty(self):
        self.assertEqual(DeviceDescriptor.from_dict({"type": "pigeon2", "id": 1}).canbus, "")
        self.assertEqual(DeviceDescriptor("pigeon2", 1, None).canbus, "")

    def test_numeric_canbus_becomes_string(self):
        descriptor = DeviceDescriptor.from_dict({"type": "sparkmax", "id": 1, "canbus": 0})
        self.assertEqual(descriptor.canbus, "0")

    def test_missing_fields(self):
        with self.assertRaises(InvalidDescriptorError):
            DeviceDescriptor.from_dict({"id": 1})
        with self.assertRaises(InvalidDescriptorError) as ctx:
            DeviceDescriptor.from_dict({"type": "falcon"})
        self.assertEqual(ctx.exception.device_type, "falcon")

    def test_bad_id(self):
        for identifier in ["3", 2.5, True]:
            with self.subTest(identifier=identifier):
                with self.assertRaises(InvalidDescriptorError):
                    DeviceDescriptor.from_dict({"type": "falcon", "id": identifier})

    def test_not_a_mapping(self):
        with self.assertRaises(InvalidDescriptorError):
            DeviceDescriptor.from_dict(["falcon", 1])

    def test_immutable(self):
        descriptor = DeviceDescriptor("falcon", 1)
        with self.assertRaises(ValidationError):
            descriptor.identifier = 2

    def test_validation_error_is_chained(self):
        with self.assertRaises(InvalidDescriptorError) as ctx:
            DeviceDescriptor.from_dict({"type": "falcon", "id": "7"})
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)
        self.assertEqual(ctx.exception.device_type, "falcon")

    def test_direct_construction_is_validated(self):
        with self.assertRaises(InvalidDescriptorError):
            DeviceDescriptor("falcon", "7")
        with self.assertRaises(InvalidDescriptorError):
            DeviceDescriptor(None, 1)

    def test_hashable(self):
        self.assertEqual(len({DeviceDescriptor("ma3", 2), DeviceDescriptor("ma3", 2)}), 1)

    def test_to_dict(self):
        self.assertEqual(DeviceDescriptor("ma3", 2).to_dict(), {"type": "ma3", "id": 2, "canbus": ""})


class TestDrivers(unittest.TestCase):
    def test_capabilities(self):
        self.assertIs(CANCoder(1).capability, Capability.ENCODER)
        self.assertIs(Pigeon2(1).capability, Capability.IMU)
        self.assertIs(TalonFXMotor(1, "", True, get_kraken_x60()).capability, Capability.MOTOR)

    def test_equality_by_config(self):
        self.assertEqual(CANCoder(1, ""), CANCoder(1, "rio"))
        self.assertNotEqual(CANCoder(1, "rio"), CANCoder(2, "rio"))
        self.assertNotEqual(DutyCycleEncoder(1), CANCoder(1))

    def test_motor_role(self):
        drive = SparkMaxMotor(0, 5, True, get_neo_vortex())
        angle = SparkMaxMotor(0, 6, False, get_neo_vortex())
        self.assertEqual(drive.role, "drive")
        self.assertEqual(angle.role, "angle")
        self.assertIn("drive motor", drive.describe())
        self.assertIn("controller 0", drive.describe())

    def test_describe(self):
        self.assertEqual(CANCoder(9, "rio").describe(), "CANcoder on CAN id 9, bus 'rio'")
        self.assertIn("bus 'rio'", TalonFXMotor(3, "", False, get_kraken_x60()).describe())

    def test_spark_flex_encoder_requires_flex(self):
        flex = SparkFlexMotor(0, 3, False, get_neo_vortex())
        encoder = SparkFlexEncoder(flex, 360)
        self.assertIn("CAN id 3", encoder.describe())
        with self.assertRaises(IncompatibleMotorContextError):
            SparkFlexEncoder(TalonFXMotor(3, "", False, get_kraken_x60()), 360)

    def test_repr(self):
        self.assertEqual(repr(DutyCycleEncoder(4)), "DutyCycleEncoder(channel=4)")


class TestDriverRegistry(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(default_encoder_registry().families(),
                         ["analog", "cancoder", "dutycycle", "sparkflex_attached"])
        self.assertEqual(default_imu_registry().families(), ["analog", "pigeon2"])
        motors = default_motor_registry()
        self.assertIs(motors.addressing("sparkmax"), BusAddressing.INDEX)
        self.assertIs(motors.addressing("sparkflex"), BusAddressing.INDEX)
        self.assertIs(motors.addressing("talonfx"), BusAddressing.NAME)
        self.assertIs(motors.addressing("talonfxs"), BusAddressing.NAME)

    def test_register_and_create(self):
        registry = DriverRegistry(Capability.IMU)
        registry.register("pigeon2", Pigeon2)
        self.assertIn("pigeon2", registry)
        imu = registry.create("pigeon2", 3, canbus="canivore")
        self.assertEqual(imu.canbus, "canivore")

    def test_unregistered(self):
        registry = DriverRegistry(Capability.MOTOR)
        self.assertNotIn("talonfx", registry)
        with self.assertRaises(DriverNotRegisteredError):
            registry.create("talonfx", 1, "", True, get_kraken_x60())
        with self.assertRaises(LookupError):
            registry.addressing("talonfx")

    def test_fresh_registries(self):
        first = default_imu_registry()
        first.register("custom", Pigeon2)
        self.assertNotIn("custom", default_imu_registry())


if __name__ == "__main__":
    unittest.main()
