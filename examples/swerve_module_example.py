"""
Example demonstrating how to resolve the devices of a swerve module.
"""

import logging

import yaml

from swervehw import DeviceDescriptor, DeviceResolver, DiagnosticsLog
from swervehw.errors import DeviceResolutionError

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MODULE_CONFIG = """
drive:
  type: sparkflex_vortex
  id: 4
  canbus: 0
angle:
  type: sparkflex_neo
  id: 5
  canbus: 0
encoder:
  type: sparkflex_attached
  id: 0
imu:
  type: pigeon2
  id: 42
  canbus: canivore
"""


def resolve_module(module: dict, resolver: DeviceResolver):
    """Resolve the motors and absolute encoder of one swerve module."""
    drive = resolver.resolve_motor(DeviceDescriptor.from_dict(module["drive"]), True)
    angle = resolver.resolve_motor(DeviceDescriptor.from_dict(module["angle"]), False)
    # The attached encoder is read through the angle motor.
    encoder = resolver.resolve_encoder(DeviceDescriptor.from_dict(module["encoder"]), angle)
    return drive, angle, encoder


def main():
    diagnostics = DiagnosticsLog()
    resolver = DeviceResolver(diagnostics)
    module = yaml.safe_load(MODULE_CONFIG)

    try:
        for device in resolve_module(module, resolver):
            logger.info(device.describe())
        imu = resolver.resolve_imu(DeviceDescriptor.from_dict(module["imu"]))
        logger.info(imu.describe())
    except DeviceResolutionError as e:
        logger.error(f"Could not resolve module: {e}")
        return

    for warning in diagnostics.raised:
        logger.info(f"Raised diagnostic: {warning.value}")

    # Known but unavailable combinations are reported separately from typos
    try:
        resolver.resolve_motor(DeviceDescriptor("sparkmax_minion", 6, "0"), True)
    except NotImplementedError as e:
        logger.info(f"Unsupported: {e}")


if __name__ == "__main__":
    main()
