"""models.py — Pydantic v2 models for device descriptions and socket types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    ValidationError,
    field_validator,
)

from .exceptions import InvalidDeviceOptions


class SocketType(BaseModel):
    """Display colour and label of a connector type."""

    model_config = ConfigDict(frozen=True)

    colour: str = Field(
        pattern=r"^#[0-9A-Fa-f]{6}$", description="Stem and label colour (#RRGGBB)"
    )
    label: str = Field(
        min_length=1,
        validation_alias=AliasChoices("label", "name"),
        description="Connector label drawn next to the stem",
    )

    @field_validator("colour")
    @classmethod
    def _upper_colour(cls, value: str) -> str:
        return value.upper()


class Socket(BaseModel):
    """One input or output connector on a device."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1, description="Socket type id in the registry")
    name: str = Field(default="", description="Display name of the socket")


class DeviceOptions(BaseModel):
    """Header information and layout switches for a device."""

    model_config = ConfigDict(frozen=True)

    vendor: str = Field(min_length=1, description="Manufacturer name")
    model: str = Field(min_length=1, description="Model name")
    compact: bool = Field(default=False, description="Use the compact layout")
    width: PositiveInt | None = Field(
        default=None, description="Body width, excluding the stems"
    )
    placeholders: bool = Field(
        default=False, description="Emit %vendor%/%model% tokens instead of text"
    )


class Device(BaseModel):
    """A device description as stored in the catalog."""

    model_config = ConfigDict(frozen=True)

    options: DeviceOptions
    inputs: tuple[Socket, ...] = Field(default=())
    outputs: tuple[Socket, ...] = Field(default=())

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> Device:
        """Validate raw JSON data, raising InvalidDeviceOptions on failure."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidDeviceOptions(_describe(exc), source) from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "device"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


@dataclass(frozen=True, slots=True)
class ShapeResult:
    """Generated stencil markup and its overall size."""

    markup: str
    width: int | float
    height: int | float
