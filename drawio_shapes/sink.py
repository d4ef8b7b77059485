"""Destinations for generated stencil markup."""

from __future__ import annotations

from pathlib import Path

import pyperclip

from .exceptions import ClipboardError, OutputError
from .markup import format_number
from .models import ShapeResult


def copy_to_clipboard(result: ShapeResult) -> None:
    """Place the stencil markup on the system clipboard."""
    try:
        pyperclip.copy(result.markup)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"Cannot write to clipboard: {exc}") from exc


def write_markup(result: ShapeResult, path: Path) -> Path:
    """Write the stencil markup to ``path``."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.markup, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write shape to {path}: {exc}") from exc
    return path


def report(result: ShapeResult, destination: Path | str | None = None) -> str:
    """One-line summary of where the shape went and its size."""
    where = "copied to clipboard" if destination is None else f"written to {destination}"
    return (
        f"{where} - width: {format_number(result.width)}, "
        f"height: {format_number(result.height)}"
    )
