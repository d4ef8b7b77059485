"""Tests for drawio_shapes/markup module."""

from __future__ import annotations

from drawio_shapes.markup import ShapeBuilder, format_number


class TestFormatNumber:
    """Coordinates print like JavaScript numbers."""

    def test_int(self) -> None:
        assert format_number(25) == "25"

    def test_integral_float(self) -> None:
        assert format_number(85.0) == "85"

    def test_fraction(self) -> None:
        assert format_number(24.5) == "24.5"
        assert format_number(0.5) == "0.5"

    def test_shortest_repr(self) -> None:
        assert format_number(1 / 3) == "0.3333333333333333"


class TestShapeBuilder:
    """Test cases for the stencil accumulator."""

    def test_section_order(self) -> None:
        builder = ShapeBuilder(200, 130)
        # appended out of order on purpose
        builder.stem("#0000FF", 0, 24.5, 65)
        builder.label("Hello", 100, 11)
        builder.rectangle(25, 0, 175, 130)
        builder.constraint(0, 0.5)

        markup = builder.build()

        order = [
            markup.index('<shape w="200" h="130" aspect="relative" strokewidth="inherit">'),
            markup.index("<connections>"),
            markup.index("<constraint"),
            markup.index("<background>"),
            markup.index("<move x=\"25\" y=\"0\" />"),
            markup.index("<foreground>"),
            markup.index("<fillstroke/>"),
            markup.index('<text str="Hello"'),
            markup.index('<strokecolor color="#0000FF" />'),
            markup.index("</foreground>"),
        ]
        assert order == sorted(order)

    def test_rectangle_is_closed(self) -> None:
        builder = ShapeBuilder(10, 10)
        builder.rectangle(1, 2, 3, 4)
        assert builder.background == [
            '<move x="1" y="2" />',
            '<line x="3" y="2" />',
            '<line x="3" y="4" />',
            '<line x="1" y="4" />',
            "<close />",
        ]

    def test_label_attributes(self) -> None:
        builder = ShapeBuilder(10, 10)
        builder.label("%title%", 100.0, 11, bold=True, placeholders=True)
        builder.label("In1", 30, 55.0, "left")
        assert builder.text == [
            '<text str="%title%" x="100" y="11" align="center" valign="top" '
            'align-shape="1" fontstyle="1" placeholders="1" />',
            '<text str="In1" x="30" y="55" align="left" valign="top" align-shape="1" />',
        ]

    def test_label_is_escaped(self) -> None:
        builder = ShapeBuilder(10, 10)
        builder.label('L&R "main" <1>', 0, 0)
        assert 'str="L&amp;R &quot;main&quot; &lt;1&gt;"' in builder.text[0]

    def test_coloured_label_restores_black(self) -> None:
        builder = ShapeBuilder(10, 10)
        builder.coloured_label("BNC", "#0000FF", 23, 58, "right")
        assert builder.text[0] == '<fontcolor color="#0000FF" />'
        assert builder.text[1].startswith('<text str="BNC"')
        assert builder.text[2] == '<fontcolor color="#000000" />'

    def test_stem_restores_black(self) -> None:
        builder = ShapeBuilder(10, 10)
        builder.stem("#FF1493", 175.5, 200, 65.0)
        assert builder.strokes == [
            '<strokecolor color="#FF1493" />',
            "<path>",
            '<move x="175.5" y="65" />',
            '<line x="200" y="65" />',
            "</path>",
            "<stroke />",
            '<strokecolor color="#000000" />',
        ]
