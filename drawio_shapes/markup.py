"""
markup.py
--------------------
Accumulator for draw.io stencil markup.

A stencil is emitted in a fixed order:
  1. <shape> declaration (w, h, aspect)
  2. <connections>  – one <constraint> per connection point
  3. <background>   – a single <path> holding the closed outline(s)
  4. <foreground>   – <fillstroke/>, then every text element, then every stem

Fragments are collected per section and joined once in build(), so callers
may append in whatever order is convenient for them.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from .constants import BLACK

_ATTR_ENTITIES = {'"': "&quot;"}


def format_number(value: float) -> str:
    """Format a coordinate the way draw.io expects: ``85`` not ``85.0``."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _attr(value: str) -> str:
    return escape(value, _ATTR_ENTITIES)


class ShapeBuilder:
    """Collects stencil fragments for one shape of ``width`` × ``height``."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.connections: list[str] = []
        self.background: list[str] = []
        self.text: list[str] = []
        self.strokes: list[str] = []

    # connections

    def constraint(self, x: float, y: float) -> None:
        """Add a connection point in normalized (0–1) shape coordinates."""
        self.connections.append(
            f'<constraint x="{format_number(x)}" y="{format_number(y)}" />'
        )

    # background

    def rectangle(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Add a closed rectangular subpath to the background outline."""
        self.background.extend([
            f'<move x="{format_number(x1)}" y="{format_number(y1)}" />',
            f'<line x="{format_number(x2)}" y="{format_number(y1)}" />',
            f'<line x="{format_number(x2)}" y="{format_number(y2)}" />',
            f'<line x="{format_number(x1)}" y="{format_number(y2)}" />',
            "<close />",
        ])

    # foreground text

    def font_style(self, style: int) -> None:
        self.text.append(f'<fontstyle style="{style}" />')

    def font_size(self, size: int) -> None:
        self.text.append(f'<fontsize size="{size}" />')

    def font_colour(self, colour: str) -> None:
        self.text.append(f'<fontcolor color="{colour}" />')

    def label(
        self,
        value: str,
        x: float,
        y: float,
        align: str = "center",
        *,
        bold: bool = False,
        placeholders: bool = False,
    ) -> None:
        """Add a text element anchored at (x, y) with top vertical alignment."""
        parts = [
            f'<text str="{_attr(value)}" x="{format_number(x)}" y="{format_number(y)}"',
            f'align="{align}" valign="top" align-shape="1"',
        ]
        if bold:
            parts.append('fontstyle="1"')
        if placeholders:
            parts.append('placeholders="1"')
        parts.append("/>")
        self.text.append(" ".join(parts))

    def coloured_label(
        self, value: str, colour: str, x: float, y: float, align: str
    ) -> None:
        """Add a text element in ``colour``, restoring black right after it."""
        self.font_colour(colour)
        self.label(value, x, y, align)
        self.font_colour(BLACK)

    # foreground strokes

    def stem(self, colour: str, x1: float, x2: float, y: float) -> None:
        """Add a horizontal coloured line, restoring a black stroke after it."""
        self.strokes.extend([
            f'<strokecolor color="{colour}" />',
            "<path>",
            f'<move x="{format_number(x1)}" y="{format_number(y)}" />',
            f'<line x="{format_number(x2)}" y="{format_number(y)}" />',
            "</path>",
            "<stroke />",
            f'<strokecolor color="{BLACK}" />',
        ])

    def build(self) -> str:
        """Join every section into the final stencil document."""
        lines = [
            "",
            f'<shape w="{format_number(self.width)}" h="{format_number(self.height)}" '
            'aspect="relative" strokewidth="inherit">',
            "    <connections>",
            *self.connections,
            "    </connections>",
            "    <background>",
            "        <path>",
            *self.background,
            "        </path>",
            "    </background>",
            "    <foreground>",
            "        <fillstroke/>",
            *self.text,
            *self.strokes,
            "    </foreground>",
            "</shape>",
            "",
        ]
        return "\n".join(lines)
