"""
drawio_shapes package - draw.io stencil generator for AV device catalogs.

Public API:
    catalog     - Device catalog discovery and loading
    constants   - Geometry constants and the built-in socket-type table
    exceptions  - Error hierarchy
    layout      - Compact and standard stencil layouts
    markup      - Stencil markup builder
    models      - Device / socket models
    paths       - Catalog and socket-type file locations
    prompts     - Interactive device selection
    sink        - Clipboard and file output
    sockets     - Socket-type registry
"""

from . import (
    catalog,
    constants,
    exceptions,
    layout,
    markup,
    models,
    paths,
    prompts,
    sink,
    sockets,
)
from .layout import render_shape
from .models import Device, ShapeResult
from .sockets import SocketRegistry

__all__ = [
    "catalog",
    "constants",
    "exceptions",
    "layout",
    "markup",
    "models",
    "paths",
    "prompts",
    "sink",
    "sockets",
    "render_shape",
    "Device",
    "ShapeResult",
    "SocketRegistry",
]
