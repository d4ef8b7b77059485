"""Tests for drawio_shapes/prompts module."""

from __future__ import annotations

from pathlib import Path

import pytest

from drawio_shapes.catalog import discover
from drawio_shapes.exceptions import CatalogError
from drawio_shapes.prompts import choose, pick_device


def answers(*values: str):
    """Return an ask() stand-in that replays ``values`` and records prompts."""
    queue = list(values)
    asked: list[str] = []

    def ask(message: str, **kwargs) -> str:
        asked.append(message)
        assert "completer" in kwargs and "validator" in kwargs
        return queue.pop(0)

    ask.asked = asked  # type: ignore[attr-defined]
    return ask


class TestChoose:
    def test_by_number(self) -> None:
        assert choose("Pick", ["a", "b", "c"], answers("2")) == "b"

    def test_by_name(self) -> None:
        assert choose("Pick", ["a", "b", "c"], answers(" c ")) == "c"

    def test_single_choice_not_asked(self) -> None:
        ask = answers()
        assert choose("Pick", ["only"], ask) == "only"
        assert ask.asked == []

    def test_numeric_name_picked_by_name(self) -> None:
        assert choose("Pick a model", ["4K", "2110"], answers("2110")) == "2110"

    def test_numeric_name_picked_by_number(self) -> None:
        assert choose("Pick a model", ["4K", "2110"], answers("1")) == "4K"

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(CatalogError):
            choose("Pick", ["a", "b"], answers("\u00b2"))

    def test_out_of_range(self) -> None:
        with pytest.raises(CatalogError):
            choose("Pick", ["a", "b"], answers("3"))

    def test_empty(self) -> None:
        with pytest.raises(CatalogError):
            choose("Pick", [], answers())

    def test_lists_choices(self, capsys: pytest.CaptureFixture[str]) -> None:
        choose("Pick", ["a", "b"], answers("1"))
        out = capsys.readouterr().out
        assert "1) a" in out
        assert "2) b" in out


class TestPickDevice:
    def test_vendor_then_model(self, devices_dir: Path) -> None:
        ask = answers("Acme")
        entry = pick_device(discover(devices_dir), ask)
        # Acme has a single model, so only the vendor is asked
        assert (entry.vendor, entry.model) == ("Acme", "X1")
        assert ask.asked == ["Pick a vendor: "]

    def test_two_questions(self, repo_root: Path) -> None:
        catalog = discover(repo_root / "devices")
        ask = answers("Blackmagic Design", "1")
        entry = pick_device(catalog, ask)
        assert entry.vendor == "Blackmagic Design"
        assert entry.model == catalog.models("Blackmagic Design")[0]
        assert ask.asked == ["Pick a vendor: ", "Pick a model: "]
