"""
Custom exceptions for the draw.io device shape generator.
"""

from __future__ import annotations


class ShapeError(Exception):
    """Base exception for shape generation errors."""

    pass


class UnknownSocketType(ShapeError):
    """A device references a socket type missing from the registry."""

    def __init__(self, type_id: str, socket_name: str | None = None) -> None:
        self.type_id = type_id
        self.socket_name = socket_name
        if socket_name is None:
            message = f"Unknown socket type {type_id!r}"
        else:
            message = f"Unknown socket type {type_id!r} on socket {socket_name!r}"
        super().__init__(message)


class InvalidDeviceOptions(ShapeError):
    """Device description is missing required fields or has invalid values."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class SocketRegistryError(ShapeError):
    """Socket-type configuration could not be loaded."""

    pass


class CatalogError(ShapeError):
    """Error reading the device catalog."""

    pass


class DeviceNotFound(CatalogError):
    """No catalog entry matches the requested vendor and model."""

    def __init__(self, vendor: str, model: str) -> None:
        self.vendor = vendor
        self.model = model
        super().__init__(f"No device {vendor!r} {model!r} in catalog")


class ClipboardError(ShapeError):
    """Error writing to the system clipboard."""

    pass


class OutputError(ShapeError):
    """Error writing generated markup to a file."""

    pass
