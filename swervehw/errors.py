"""
Exceptions raised while resolving device descriptors into drivers.
"""

from typing import Optional


class DeviceResolutionError(Exception):
    """Base class for device resolution errors."""

    def __init__(self, message: str, device_type: Optional[str] = None):
        super().__init__(message)
        self.device_type = device_type


class UnrecognizedTypeError(DeviceResolutionError, ValueError):
    """The type string is not known for the requested capability."""

    def __init__(self, device_type: Optional[str], capability: str):
        super().__init__(
            f"{device_type} is not a recognized {capability} type.",
            device_type=device_type,
        )
        self.capability = capability


class UnsupportedCombinationError(DeviceResolutionError, NotImplementedError):
    """The type string is known but cannot be built yet."""
    pass


class MalformedBusFieldError(DeviceResolutionError, ValueError):
    """The canbus field must hold an integer controller index but does not."""

    def __init__(self, device_type: str, canbus: Optional[str]):
        super().__init__(
            f"{device_type} expects an integer controller index in canbus, got {canbus!r}",
            device_type=device_type,
        )
        self.canbus = canbus


class MotorContextError(DeviceResolutionError):
    """Base class for attached encoders created from an unusable motor."""
    pass


class MissingMotorContextError(MotorContextError):
    """An attached encoder was requested without the motor it lives on."""
    pass


class IncompatibleMotorContextError(MotorContextError):
    """An attached encoder was requested on a motor that cannot host it."""
    pass


class DriverNotRegisteredError(DeviceResolutionError, LookupError):
    """No constructor is registered for a driver family."""
    pass


class InvalidDescriptorError(DeviceResolutionError, ValueError):
    """A raw device object could not be turned into a descriptor."""
    pass
