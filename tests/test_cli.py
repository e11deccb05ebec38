"""
Tests for the command-line interface.
"""

import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from swervehw import __version__
from swervehw.cli import app


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_device(self, name, device):
        path = Path(self.tmpdir.name) / name
        path.write_text(json.dumps(device))
        return str(path)

    def test_version(self):
        result = self.runner.invoke(app, ["version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.stdout)

    def test_types(self):
        result = self.runner.invoke(app, ["types", "motor"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("sparkmax_neo", result.stdout)
        self.assertNotIn("pigeon2", result.stdout)

    def test_resolve_motor(self):
        device = self.write_device("drive.json", {"type": "sparkmax_neo", "id": 5, "canbus": "0"})
        result = self.runner.invoke(app, ["resolve", device, "--capability", "motor", "--json"])
        self.assertEqual(result.exit_code, 0)
        output = json.loads(result.stdout)
        self.assertEqual(output["driver"], "SparkMaxMotor")
        self.assertEqual(output["device"], {"type": "sparkmax_neo", "id": 5, "canbus": "0"})
        self.assertEqual(output["diagnostics"], [])

    def test_resolve_attached_encoder(self):
        encoder = self.write_device("encoder.json", {"type": "sparkflex_attached", "id": 0})
        motor = self.write_device("angle.json", {"type": "sparkflex", "id": 3, "canbus": "0"})
        result = self.runner.invoke(
            app, ["resolve", encoder, "-c", "encoder", "--angle", "--motor", motor, "--json"]
        )
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.stdout)["driver"], "SparkFlexEncoder")

    def test_resolve_none_encoder(self):
        device = self.write_device("none.json", {"type": "none", "id": 0})
        result = self.runner.invoke(app, ["resolve", device, "-c", "encoder"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("no device", result.stdout)

    def test_resolve_warns_on_high_id(self):
        device = self.write_device("imu.json", {"type": "pigeon2", "id": 41})
        result = self.runner.invoke(app, ["resolve", device, "-c", "imu"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Warning", result.stdout)
        self.assertEqual(result.output.count("CAN IDs greater than 40"), 1)

    def test_resolve_failure(self):
        device = self.write_device("bad.json", {"type": "sparkmax", "id": 5, "canbus": "main"})
        result = self.runner.invoke(app, ["resolve", device, "-c", "motor"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.stdout)


if __name__ == "__main__":
    unittest.main()
