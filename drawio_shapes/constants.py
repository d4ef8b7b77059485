"""
constants.py
--------------------
Shared constants for the draw.io device shape generator:
  - stencil geometry (stem width, default body widths, section heights)
  - font sizes used by the text elements
  - the built-in socket-type table
  - catalog discovery rules
"""

from typing import Final

# Geometry

# Horizontal pin-lead length on each side of the body
STEM_WIDTH: Final[int] = 25

COMPACT_DEFAULT_WIDTH: Final[int] = 120
COMPACT_HEIGHT: Final[int] = 60

STANDARD_DEFAULT_WIDTH: Final[int] = 150
STANDARD_HEADER_HEIGHT: Final[int] = 50
STANDARD_FOOTER_HEIGHT: Final[int] = 40
# Vertical slot reserved for each pin row
STANDARD_PIN_OFFSET: Final[int] = 20

# Text baselines (y, relative to the top of the shape)
TITLE_Y: Final[int] = 11
SUBTITLE_Y: Final[int] = 30
COMPACT_LOCATION_Y: Final[int] = 45
STANDARD_MODEL_Y: Final[int] = 39
FOOTER_IP_OFFSET: Final[int] = 8
FOOTER_LOCATION_OFFSET: Final[int] = 22

# Label offsets around a pin
PIN_NAME_INSET: Final[int] = 5
PIN_NAME_RAISE: Final[int] = 5
SOCKET_LABEL_GAP: Final[int] = 2
SOCKET_LABEL_RAISE: Final[int] = 7
# Stems stop half a unit short of the body so the outline stroke stays clean
STEM_GAP: Final[float] = 0.5

# Fonts

FONT_TITLE: Final[int] = 13
FONT_SUBTITLE: Final[int] = 8
FONT_FOOTER: Final[int] = 10
FONT_PIN_NAME: Final[int] = 9
FONT_SOCKET_LABEL: Final[int] = 6

FONTSTYLE_PLAIN: Final[int] = 0
FONTSTYLE_BOLD: Final[int] = 1

BLACK: Final[str] = "#000000"

# Placeholder tokens resolved by draw.io from the cell's custom properties
TITLE_PLACEHOLDER: Final[str] = "%title%"
VENDOR_PLACEHOLDER: Final[str] = "%vendor%"
MODEL_PLACEHOLDER: Final[str] = "%model%"
LOCATION_PLACEHOLDER: Final[str] = "%location%"
IP_PLACEHOLDER: Final[str] = "%ip%"

# Socket types

# socket type id → display colour and label
# spare draw.io palette: 556b2f, 191970, ff4500, ffd700, 00ff00, 00bfff, 0000ff, ff1493
DEFAULT_SOCKET_TYPES: dict[str, dict[str, str]] = {
    "bnc":      {"colour": "#0000FF", "label": "BNC"},
    "ref":      {"colour": "#FFD700", "label": "BNC"},
    "hdmi":     {"colour": "#FF1493", "label": "HDMI"},
    "xlr":      {"colour": "#FF4500", "label": "XLR"},
    "rca":      {"colour": "#FF4500", "label": "RCA"},
    "rj45":     {"colour": "#00FF00", "label": "RJ45"},
    "jack":     {"colour": "#FF4500", "label": "Jack"},
    "minijack": {"colour": "#FF4500", "label": "Minijack"},
    "de9":      {"colour": "#556B2F", "label": "DE-9"},
    "usb":      {"colour": "#556B2F", "label": "USB"},
    "ltcbnc":   {"colour": "#FF4500", "label": "BNC"},
    "vga":      {"colour": "#0000FF", "label": "VGA"},
    "lc":       {"colour": "#003300", "label": "LC"},
}

# Catalog

DEVICE_SUFFIX: Final[str] = ".json"
# Any relative path containing this marker is a template or draft, not a device
EXCLUDED_MARKER: Final[str] = "_"

DEVICES_ENV: Final[str] = "DRAWIO_SHAPES_DEVICES"
SOCKETS_ENV: Final[str] = "DRAWIO_SHAPES_SOCKETS"
