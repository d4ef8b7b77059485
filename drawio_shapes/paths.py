"""
Repository-level path configuration.

Uses a class-based approach so the CLI and tests can point the generator at
another catalog or socket-type file without touching module globals.

Usage:
    # Default paths
    from drawio_shapes.paths import Paths

    devices_dir = Paths.devices_dir()
    sockets_file = Paths.sockets_file()

    # Custom paths (for testing or alternative catalogs)
    Paths.configure(devices_dir="/custom/devices", sockets_file="extra.json")

Environment variables DRAWIO_SHAPES_DEVICES and DRAWIO_SHAPES_SOCKETS are
used when nothing was configured explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .constants import DEVICES_ENV, SOCKETS_ENV


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Immutable path configuration."""

    repo_root: Path
    devices_dir: Path
    sockets_file: Path | None


class Paths:
    """
    Path configuration manager.

    Explicit ``configure`` values win over environment variables, which win
    over the repository defaults.
    """

    _repo_root: Path = Path(__file__).resolve().parent.parent
    _devices_dir: Path | None = None
    _sockets_file: Path | None = None

    @classmethod
    def configure(
        cls,
        devices_dir: Path | str | None = None,
        sockets_file: Path | str | None = None,
    ) -> None:
        """
        Configure custom paths.

        Args:
            devices_dir: Root of the device catalog
            sockets_file: JSON file with extra socket types
        """
        if devices_dir is not None:
            cls._devices_dir = Path(devices_dir).resolve()
        if sockets_file is not None:
            cls._sockets_file = Path(sockets_file).resolve()

    @classmethod
    def reset(cls) -> None:
        """Reset to default paths."""
        cls._devices_dir = None
        cls._sockets_file = None

    @classmethod
    def repo_root(cls) -> Path:
        """Root directory of the repository."""
        return cls._repo_root

    @classmethod
    def devices_dir(cls) -> Path:
        """Root directory of the device catalog."""
        if cls._devices_dir is not None:
            return cls._devices_dir
        env = os.environ.get(DEVICES_ENV)
        if env:
            return Path(env).resolve()
        return cls._repo_root / "devices"

    @classmethod
    def sockets_file(cls) -> Path | None:
        """Optional JSON file of socket types merged over the built-in table."""
        if cls._sockets_file is not None:
            return cls._sockets_file
        env = os.environ.get(SOCKETS_ENV)
        if env:
            return Path(env).resolve()
        return None

    @classmethod
    def get_config(cls) -> PathConfig:
        """Get current path configuration as an immutable dataclass."""
        return PathConfig(
            repo_root=cls.repo_root(),
            devices_dir=cls.devices_dir(),
            sockets_file=cls.sockets_file(),
        )
