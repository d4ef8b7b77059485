"""Tests for drawio_shapes/models module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from drawio_shapes.exceptions import InvalidDeviceOptions
from drawio_shapes.models import Device, ShapeResult


class TestDevice:
    """Test cases for device validation."""

    def test_defaults(self) -> None:
        device = Device.from_dict({"options": {"vendor": "Acme", "model": "X1"}})
        assert device.options.compact is False
        assert device.options.width is None
        assert device.options.placeholders is False
        assert device.inputs == ()
        assert device.outputs == ()

    def test_socket_order_preserved(self) -> None:
        device = Device.from_dict({
            "options": {"vendor": "Acme", "model": "X1"},
            "inputs": [{"type": "bnc", "name": "A"}, {"type": "xlr", "name": "B"}],
        })
        assert [s.name for s in device.inputs] == ["A", "B"]

    def test_missing_vendor(self) -> None:
        with pytest.raises(InvalidDeviceOptions, match="options.vendor"):
            Device.from_dict({"options": {"model": "X1"}})

    def test_missing_options(self) -> None:
        with pytest.raises(InvalidDeviceOptions, match="options"):
            Device.from_dict({"inputs": []})

    def test_empty_model(self) -> None:
        with pytest.raises(InvalidDeviceOptions, match="options.model"):
            Device.from_dict({"options": {"vendor": "Acme", "model": ""}})

    @pytest.mark.parametrize("width", [0, -10])
    def test_non_positive_width(self, width: int) -> None:
        with pytest.raises(InvalidDeviceOptions, match="options.width"):
            Device.from_dict({"options": {"vendor": "Acme", "model": "X1", "width": width}})

    def test_error_names_source(self) -> None:
        with pytest.raises(InvalidDeviceOptions, match="devices/acme.json"):
            Device.from_dict({"options": {}}, source="devices/acme.json")

    def test_socket_without_type(self) -> None:
        with pytest.raises(InvalidDeviceOptions, match="inputs.0.type"):
            Device.from_dict({
                "options": {"vendor": "Acme", "model": "X1"},
                "inputs": [{"name": "In"}],
            })

    def test_device_is_immutable(self, acme_x1: Device) -> None:
        with pytest.raises(ValidationError):
            acme_x1.options.vendor = "Other"  # type: ignore[misc]


class TestShapeResult:
    def test_is_immutable(self) -> None:
        result = ShapeResult(markup="<shape/>", width=200, height=130)
        with pytest.raises(AttributeError):
            result.width = 10  # type: ignore[misc]
