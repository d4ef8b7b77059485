"""Pytest configuration and shared fixtures for the device shape generator."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Add the repository root to the path for imports
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from drawio_shapes.models import Device  # noqa: E402
from drawio_shapes.paths import Paths  # noqa: E402
from drawio_shapes.sockets import SocketRegistry  # noqa: E402


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root path."""
    return REPO_ROOT


@pytest.fixture(autouse=True)
def reset_paths(monkeypatch: pytest.MonkeyPatch):
    """Keep path configuration from leaking between tests."""
    monkeypatch.delenv("DRAWIO_SHAPES_DEVICES", raising=False)
    monkeypatch.delenv("DRAWIO_SHAPES_SOCKETS", raising=False)
    Paths.reset()
    yield
    Paths.reset()


@pytest.fixture
def registry() -> SocketRegistry:
    return SocketRegistry.default()


@pytest.fixture
def acme_x1() -> Device:
    """Standard-layout device with one BNC input and one HDMI output."""
    return Device.from_dict({
        "options": {"vendor": "Acme", "model": "X1"},
        "inputs": [{"type": "bnc", "name": "In1"}],
        "outputs": [{"type": "hdmi", "name": "Out1"}],
    })


def write_device(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def devices_dir(tmp_path: Path) -> Path:
    """A small catalog with two vendors, a template and a broken file."""
    root = tmp_path / "devices"
    write_device(root / "zeta" / "z9.json", {
        "options": {"vendor": "Zeta", "model": "Z9", "compact": True},
        "inputs": [{"type": "xlr", "name": "Mic"}],
        "outputs": [],
    })
    write_device(root / "acme" / "x2.json", {
        "options": {"vendor": "acme", "model": "x2"},
        "inputs": [],
        "outputs": [{"type": "rj45", "name": "LAN"}],
    })
    write_device(root / "acme" / "x1.json", {
        "options": {"vendor": "Acme", "model": "X1"},
        "inputs": [{"type": "bnc", "name": "In1"}],
        "outputs": [{"type": "hdmi", "name": "Out1"}],
    })
    write_device(root / "_template.json", {
        "options": {"vendor": "Template", "model": "T"},
    })
    write_device(root / "drafts_wip" / "d.json", {
        "options": {"vendor": "Draft", "model": "D"},
    })
    (root / "acme" / "broken.json").write_text("{not json", encoding="utf-8")
    (root / "acme" / "notes.txt").write_text("ignored", encoding="utf-8")
    return root
