"""
Tests for physical motor models.
"""

import math
import unittest

from swervehw.physics import DCMotor, get_motor_model, get_neo, get_kraken_x60_foc, MOTOR_MODELS


class TestDCMotor(unittest.TestCase):
    def test_neo(self):
        neo = get_neo()
        self.assertEqual(neo.name, "NEO")
        self.assertAlmostEqual(neo.stall_torque_newton_meters, 2.6)
        self.assertAlmostEqual(neo.free_speed_rad_per_sec, 5676 * 2 * math.pi / 60)
        self.assertAlmostEqual(neo.r_ohms, 12 / 105)
        self.assertAlmostEqual(neo.kt_newton_meters_per_amp, 2.6 / 105)
        self.assertAlmostEqual(
            neo.kv_rad_per_sec_per_volt,
            neo.free_speed_rad_per_sec / (12 - neo.r_ohms * 1.8),
        )

    def test_multiple_motors(self):
        pair = get_kraken_x60_foc(2)
        single = get_kraken_x60_foc()
        self.assertEqual(pair.num_motors, 2)
        self.assertAlmostEqual(pair.stall_torque_newton_meters, 2 * single.stall_torque_newton_meters)
        self.assertAlmostEqual(pair.free_speed_rad_per_sec, single.free_speed_rad_per_sec)
        self.assertAlmostEqual(pair.kt_newton_meters_per_amp, single.kt_newton_meters_per_amp)

    def test_invalid_motor_count(self):
        with self.assertRaises(ValueError):
            DCMotor.from_datasheet("bad", 12, 1, 1, 1, 1, num_motors=0)

    def test_lookup(self):
        for name in MOTOR_MODELS:
            with self.subTest(name=name):
                self.assertEqual(get_motor_model(name).name, name)
        self.assertEqual(get_motor_model("NEO"), get_neo())

    def test_foc_variants_differ(self):
        self.assertNotEqual(get_motor_model("Falcon 500"), get_motor_model("Falcon 500 FOC"))
        self.assertGreater(get_motor_model("Kraken X60 FOC").stall_torque_newton_meters,
                           get_motor_model("Kraken X60").stall_torque_newton_meters)

    def test_unknown_model(self):
        with self.assertRaises(ValueError):
            get_motor_model("CIM")


if __name__ == "__main__":
    unittest.main()
