"""
Device descriptors as read from swerve module and drive configuration files.
"""

from typing import Dict, Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from swervehw.errors import InvalidDescriptorError


class DeviceDescriptor(BaseModel):
    """
    Type, id and bus of one physical device.

    Attributes:
        type: Device type, e.g. "cancoder", "pigeon2" or "sparkmax_neo"
        identifier: CAN id, or the DIO/analog channel for wired sensors
        canbus: CAN bus name, or the controller index for REV Spark motors
    """

    model_config = ConfigDict(frozen=True)

    type: str
    identifier: StrictInt = Field(alias="id")
    canbus: Optional[str] = ""

    def __init__(self, type: str, identifier: int, canbus: Optional[str] = ""):
        try:
            super().__init__(type=type, id=identifier, canbus=canbus)
        except ValidationError as e:
            raise InvalidDescriptorError(f"Invalid device '{type}': {e}", type) from e

    @field_validator("canbus", mode="before")
    @classmethod
    def _normalize_canbus(cls, value):
        # YAML reads "canbus: 0" as an int; REV Spark indexes are parsed later.
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeviceDescriptor":
        """
        Create a descriptor from a device object of a configuration file.

        Args:
            data: Mapping with "type", "id" and optionally "canbus"

        Returns:
            Device descriptor

        Raises:
            InvalidDescriptorError: If type or id is missing, or id is not an integer
        """
        device_type = data.get("type") if isinstance(data, Mapping) else None
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidDescriptorError(f"Invalid device '{device_type}': {e}", device_type) from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
