"""
layout.py
--------------------
Stencil geometry for device shapes.

Two layouts, picked by ``device.options.compact``:

  compact   single 60-unit body, title/subtitle/location lines, and at most
            one stem per side (the first input and the first output only).
  standard  header / pin body / footer stacked vertically; one row per pin,
            the body growing with max(len(inputs), len(outputs)).

All coordinates are in shape units. Connection constraints are normalized
to 0–1 over the whole shape, stems included.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import (
    COMPACT_DEFAULT_WIDTH,
    COMPACT_HEIGHT,
    COMPACT_LOCATION_Y,
    FONT_FOOTER,
    FONT_PIN_NAME,
    FONT_SOCKET_LABEL,
    FONT_SUBTITLE,
    FONT_TITLE,
    FONTSTYLE_BOLD,
    FONTSTYLE_PLAIN,
    FOOTER_IP_OFFSET,
    FOOTER_LOCATION_OFFSET,
    IP_PLACEHOLDER,
    LOCATION_PLACEHOLDER,
    MODEL_PLACEHOLDER,
    PIN_NAME_INSET,
    PIN_NAME_RAISE,
    SOCKET_LABEL_GAP,
    SOCKET_LABEL_RAISE,
    STANDARD_DEFAULT_WIDTH,
    STANDARD_FOOTER_HEIGHT,
    STANDARD_HEADER_HEIGHT,
    STANDARD_MODEL_Y,
    STANDARD_PIN_OFFSET,
    STEM_GAP,
    STEM_WIDTH,
    SUBTITLE_Y,
    TITLE_PLACEHOLDER,
    TITLE_Y,
    VENDOR_PLACEHOLDER,
)
from .markup import ShapeBuilder
from .models import Device, ShapeResult, SocketType
from .sockets import SocketRegistry


class Layout(ABC):
    """Base for the two stencil layouts; subclasses implement ``_draw``."""

    default_width: int = STANDARD_DEFAULT_WIDTH

    def __init__(self, device: Device, registry: SocketRegistry) -> None:
        self.device = device
        # Resolve every socket up front: no markup is built for a device
        # that references an unknown type, even on sockets a layout skips.
        self.input_types: list[SocketType] = [
            registry.lookup(s.type, s.name) for s in device.inputs
        ]
        self.output_types: list[SocketType] = [
            registry.lookup(s.type, s.name) for s in device.outputs
        ]
        self.body_width: int = device.options.width or self.default_width
        self.width: int = 2 * STEM_WIDTH + self.body_width
        self.height: int = 0

    @property
    def body_right(self) -> int:
        """x of the right edge of the body."""
        return STEM_WIDTH + self.body_width

    def render(self) -> ShapeResult:
        builder = ShapeBuilder(self.width, self.height)
        self._draw(builder)
        return ShapeResult(builder.build(), self.width, self.height)

    @abstractmethod
    def _draw(self, builder: ShapeBuilder) -> None:
        """Append the outline, text and stems for this layout."""

    def _title(self, builder: ShapeBuilder) -> None:
        builder.font_style(FONTSTYLE_BOLD)
        builder.font_size(FONT_TITLE)
        builder.label(
            TITLE_PLACEHOLDER, self.width / 2, TITLE_Y, bold=True, placeholders=True
        )
        builder.font_style(FONTSTYLE_PLAIN)

    def _input_stem(self, builder: ShapeBuilder, socket_type: SocketType, y: float) -> None:
        builder.font_size(FONT_SOCKET_LABEL)
        builder.coloured_label(
            socket_type.label,
            socket_type.colour,
            STEM_WIDTH - SOCKET_LABEL_GAP,
            y - SOCKET_LABEL_RAISE,
            "right",
        )
        builder.stem(socket_type.colour, 0, STEM_WIDTH - STEM_GAP, y)

    def _output_stem(self, builder: ShapeBuilder, socket_type: SocketType, y: float) -> None:
        builder.font_size(FONT_SOCKET_LABEL)
        builder.coloured_label(
            socket_type.label,
            socket_type.colour,
            self.body_right + SOCKET_LABEL_GAP,
            y - SOCKET_LABEL_RAISE,
            "left",
        )
        builder.stem(socket_type.colour, self.body_right + STEM_GAP, self.width, y)


class CompactLayout(Layout):
    """Fixed-height shape with one connection per side."""

    default_width = COMPACT_DEFAULT_WIDTH

    def __init__(self, device: Device, registry: SocketRegistry) -> None:
        super().__init__(device, registry)
        self.height = COMPACT_HEIGHT

    def _draw(self, builder: ShapeBuilder) -> None:
        opts = self.device.options
        centre = self.width / 2
        middle = self.height / 2

        builder.rectangle(STEM_WIDTH, 0, self.body_right, self.height)

        self._title(builder)
        builder.font_size(FONT_SUBTITLE)
        subtitle = MODEL_PLACEHOLDER if opts.placeholders else f"{opts.vendor} {opts.model}"
        builder.label(subtitle, centre, SUBTITLE_Y, placeholders=True)
        builder.font_size(FONT_FOOTER)
        builder.label(LOCATION_PLACEHOLDER, centre, COMPACT_LOCATION_Y, placeholders=True)
        builder.font_size(FONT_PIN_NAME)

        # only the first socket on each side is drawn
        if self.input_types:
            builder.constraint(0, 0.5)
            self._input_stem(builder, self.input_types[0], middle)
        if self.output_types:
            builder.constraint(1, 0.5)
            self._output_stem(builder, self.output_types[0], middle)


class StandardLayout(Layout):
    """Header, pin body and footer, with one row per pin."""

    default_width = STANDARD_DEFAULT_WIDTH

    def __init__(self, device: Device, registry: SocketRegistry) -> None:
        super().__init__(device, registry)
        self.max_pins = max(len(device.inputs), len(device.outputs))
        self.pins_height = STANDARD_PIN_OFFSET * (self.max_pins + 1)
        self.height = STANDARD_HEADER_HEIGHT + self.pins_height + STANDARD_FOOTER_HEIGHT

    @property
    def footer_top(self) -> int:
        return STANDARD_HEADER_HEIGHT + self.pins_height

    def pin_fraction(self, index: int) -> float:
        """Position of pin ``index`` as a fraction of the pin body height."""
        return (index + 1) / (self.max_pins + 1)

    def pin_y(self, index: int) -> float:
        """Absolute y of pin ``index``."""
        return STANDARD_HEADER_HEIGHT + self.pins_height * self.pin_fraction(index)

    def constraint_y(self, index: int) -> float:
        """Normalized y of pin ``index`` over the whole shape."""
        return (
            self.pin_fraction(index) * (self.pins_height / self.height)
            + STANDARD_HEADER_HEIGHT / self.height
        )

    def _draw(self, builder: ShapeBuilder) -> None:
        opts = self.device.options
        centre = self.width / 2

        builder.rectangle(STEM_WIDTH, 0, self.body_right, STANDARD_HEADER_HEIGHT)
        builder.rectangle(STEM_WIDTH, STANDARD_HEADER_HEIGHT, self.body_right, self.footer_top)
        builder.rectangle(STEM_WIDTH, self.footer_top, self.body_right, self.height)

        self._title(builder)
        builder.font_size(FONT_SUBTITLE)
        vendor = VENDOR_PLACEHOLDER if opts.placeholders else opts.vendor
        model = MODEL_PLACEHOLDER if opts.placeholders else opts.model
        builder.label(vendor, centre, SUBTITLE_Y, placeholders=True)
        builder.label(model, centre, STANDARD_MODEL_Y, placeholders=True)

        # inputs and outputs share the row formula, so unequal counts
        # only line up at matching indices
        for i, (socket, socket_type) in enumerate(zip(self.device.inputs, self.input_types)):
            y = self.pin_y(i)
            builder.constraint(0, self.constraint_y(i))
            builder.font_size(FONT_PIN_NAME)
            builder.label(socket.name, STEM_WIDTH + PIN_NAME_INSET, y - PIN_NAME_RAISE, "left")
            self._input_stem(builder, socket_type, y)

        for i, (socket, socket_type) in enumerate(zip(self.device.outputs, self.output_types)):
            y = self.pin_y(i)
            builder.constraint(1, self.constraint_y(i))
            builder.font_size(FONT_PIN_NAME)
            builder.label(
                socket.name, self.width - STEM_WIDTH - PIN_NAME_INSET, y - PIN_NAME_RAISE, "right"
            )
            self._output_stem(builder, socket_type, y)

        builder.font_size(FONT_FOOTER)
        builder.label(
            IP_PLACEHOLDER, centre, self.footer_top + FOOTER_IP_OFFSET, placeholders=True
        )
        builder.label(
            LOCATION_PLACEHOLDER,
            centre,
            self.footer_top + FOOTER_LOCATION_OFFSET,
            placeholders=True,
        )
        builder.font_size(FONT_PIN_NAME)


LAYOUTS: dict[bool, type[Layout]] = {
    True: CompactLayout,
    False: StandardLayout,
}


def layout_for(device: Device, registry: SocketRegistry | None = None) -> Layout:
    """Return the layout selected by ``device.options.compact``."""
    if registry is None:
        registry = SocketRegistry.default()
    return LAYOUTS[device.options.compact](device, registry)


def render_shape(device: Device, registry: SocketRegistry | None = None) -> ShapeResult:
    """Render ``device`` to draw.io stencil markup."""
    return layout_for(device, registry).render()
