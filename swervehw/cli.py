"""
Command-line interface for swervehw.
"""

import sys
import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from swervehw import __version__
from swervehw.config import config
from swervehw.devices import Capability, DeviceDescriptor, DeviceResolver
from swervehw.diagnostics import DiagnosticsLog
from swervehw.errors import DeviceResolutionError

log = logging.getLogger("swervehw")

# Setup console
console = Console()

# Create Typer app
app = typer.Typer(
    name="swervehw",
    help="swervehw: resolve swerve drive device configuration into drivers",
    add_completion=False,
)


def _setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else config.get("logging", "level") or "INFO"
    handlers = [RichHandler(console=Console(stderr=True), rich_tracebacks=True)] if config.get("logging", "console") else []
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers or [logging.NullHandler()],
    )


def _load_device(path: Path) -> DeviceDescriptor:
    # JSON device files are valid YAML.
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    return DeviceDescriptor.from_dict(data)


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """swervehw CLI: inspect and resolve swerve device descriptors."""
    _setup_logging(debug)


@app.command()
def version():
    """Show the swervehw version."""
    console.print(f"swervehw v{__version__}")


@app.command()
def types(
    capability: Optional[Capability] = typer.Argument(
        None, help="Only list types of this capability"
    ),
):
    """List the recognized device type strings."""
    capabilities = [capability] if capability else list(Capability)
    for cap in capabilities:
        table = Table(title=f"{cap.value} types")
        table.add_column("type", style="bold")
        for device_type in DeviceResolver.known_types(cap):
            table.add_row(device_type)
        console.print(table)


@app.command()
def resolve(
    device_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON or YAML file holding one device object"
    ),
    capability: Capability = typer.Option(
        ..., "--capability", "-c", help="Capability to resolve the device as"
    ),
    drive: bool = typer.Option(
        True, "--drive/--angle", help="Resolve a motor as a drive or an angle motor"
    ),
    motor_file: Optional[Path] = typer.Option(
        None, "--motor", "-m", exists=True, dir_okay=False,
        help="Motor device file, required for encoders attached to a motor"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output in JSON format"
    ),
):
    """Resolve a device file into a driver."""
    # Warnings are printed below, not logged as well.
    diagnostics = DiagnosticsLog(log_warnings=False)
    resolver = DeviceResolver.from_config(config, diagnostics=diagnostics)

    try:
        descriptor = _load_device(device_file)
        if capability is Capability.ENCODER:
            motor = None
            if motor_file:
                motor = resolver.resolve_motor(_load_device(motor_file), drive)
            device = resolver.resolve_encoder(descriptor, motor)
        elif capability is Capability.IMU:
            device = resolver.resolve_imu(descriptor)
        else:
            device = resolver.resolve_motor(descriptor, drive)
    except (DeviceResolutionError, yaml.YAMLError) as e:
        log.debug("Resolution failed", exc_info=True)
        console.print(f"[bold red]Error: {e}[/bold red]")
        sys.exit(1)

    warnings = [category.value for category in diagnostics.raised]
    description = device.describe() if device is not None else "no device"

    if json_output:
        console.print_json(json.dumps({
            "device": descriptor.to_dict(),
            "capability": capability.value,
            "driver": type(device).__name__ if device is not None else None,
            "description": description,
            "diagnostics": warnings,
        }))
        return

    console.print(f"[bold green]{description}[/bold green]")
    for warning in diagnostics.raised:
        console.print(f"[bold yellow]Warning: {warning.message}[/bold yellow]")


# Main entry point
if __name__ == "__main__":
    app()
