#!/usr/bin/env python3
"""main.py — CLI entry point for the draw.io device shape generator.

Usage:
    python main.py [--devices DIR] [--sockets FILE] <command> [options]

Commands:
    pick      - Pick a device interactively and copy its shape (default)
    render    - Render one device JSON file
    list      - List the device catalog
    sockets   - List the known socket types
    help      - Show this help message

Examples:
    python main.py
    python main.py pick --print
    python main.py render devices/acme/x1.json --output x1.xml
    python main.py --devices ~/devices list
    python main.py --sockets extra_sockets.json sockets
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from drawio_shapes.exceptions import ShapeError


def _registry():
    from drawio_shapes.paths import Paths
    from drawio_shapes.sockets import SocketRegistry

    sockets_file = Paths.sockets_file()
    if sockets_file is not None:
        return SocketRegistry.from_file(sockets_file)
    return SocketRegistry.default()


def _emit(result, args: argparse.Namespace) -> None:
    """Send the rendered shape to stdout, a file, or the clipboard."""
    from drawio_shapes import sink

    if args.print:
        sys.stdout.write(result.markup)
        print(sink.report(result, "stdout"), file=sys.stderr)
    elif args.output:
        path = sink.write_markup(result, Path(args.output))
        print(sink.report(result, path))
    else:
        sink.copy_to_clipboard(result)
        print(sink.report(result))


def cmd_pick(args: argparse.Namespace) -> None:
    """Pick a vendor and model, then render the device."""
    from drawio_shapes.catalog import discover, load_device
    from drawio_shapes.layout import render_shape
    from drawio_shapes.paths import Paths
    from drawio_shapes.prompts import pick_device

    registry = _registry()
    catalog = discover(Paths.devices_dir())
    for path, reason in catalog.skipped:
        print(f"  [SKIP] {path}: {reason}", file=sys.stderr)

    entry = pick_device(catalog)
    device = load_device(entry.path)
    _emit(render_shape(device, registry), args)


def cmd_render(args: argparse.Namespace) -> None:
    """Render a single device file."""
    from drawio_shapes.catalog import load_device
    from drawio_shapes.layout import render_shape

    device = load_device(Path(args.device))
    _emit(render_shape(device, _registry()), args)


def cmd_list(args: argparse.Namespace) -> None:
    """Print every catalog entry."""
    from drawio_shapes.catalog import discover, load_device
    from drawio_shapes.paths import Paths

    devices_dir = Paths.devices_dir()
    catalog = discover(devices_dir)
    print(f"Found {len(catalog)} devices under {devices_dir}\n")

    errors = 0
    for entry in catalog.entries:
        try:
            device = load_device(entry.path)
        except ShapeError as exc:
            print(f"  [ERROR] {entry.path}: {exc}")
            errors += 1
            continue
        layout = "compact" if device.options.compact else "standard"
        print(
            f"  {entry.vendor:<20} {entry.model:<24} {layout:<9} "
            f"in={len(device.inputs):<3} out={len(device.outputs)}"
        )
    for path, reason in catalog.skipped:
        print(f"  [SKIP] {path}: {reason}")
        errors += 1

    if errors:
        print(f"\n  Errors : {errors}")


def cmd_sockets(args: argparse.Namespace) -> None:
    """Print the socket-type table."""
    registry = _registry()
    for type_id in registry:
        socket_type = registry.lookup(type_id)
        print(f"  {type_id:<10} {socket_type.colour}  {socket_type.label}")


def cmd_help(args: argparse.Namespace) -> None:
    """Show help message."""
    parser.print_help()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="draw.io device shape generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py pick --print
  python main.py render devices/acme/x1.json
  python main.py list
        """,
    )
    parser.add_argument(
        "--devices",
        default=None,
        metavar="DIR",
        help="Device catalog directory (default: ./devices or $DRAWIO_SHAPES_DEVICES)",
    )
    parser.add_argument(
        "--sockets",
        default=None,
        metavar="FILE",
        help="JSON file of extra socket types (or $DRAWIO_SHAPES_SOCKETS)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_output_flags(sub: argparse.ArgumentParser) -> None:
        group = sub.add_mutually_exclusive_group()
        group.add_argument(
            "--print",
            action="store_true",
            help="Write the shape to stdout instead of the clipboard",
        )
        group.add_argument(
            "--output",
            default=None,
            metavar="FILE",
            help="Write the shape to FILE instead of the clipboard",
        )

    # pick subcommand
    pick_parser = subparsers.add_parser(
        "pick",
        help="Pick a device interactively and copy its shape",
    )
    add_output_flags(pick_parser)

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render one device JSON file",
    )
    render_parser.add_argument("device", metavar="DEVICE_JSON", help="Device description file")
    add_output_flags(render_parser)

    # list subcommand
    subparsers.add_parser("list", help="List the device catalog")

    # sockets subcommand
    subparsers.add_parser("sockets", help="List the known socket types")

    # help subcommand
    subparsers.add_parser("help", help="Show this help message")

    return parser


COMMANDS = {
    "pick": cmd_pick,
    "render": cmd_render,
    "list": cmd_list,
    "sockets": cmd_sockets,
    "help": cmd_help,
}


def main(argv: list[str] | None = None) -> int:
    global parser

    from drawio_shapes.paths import Paths

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.devices or args.sockets:
        Paths.configure(devices_dir=args.devices, sockets_file=args.sockets)

    if args.command is None:
        args.command = "pick"
        args.print = False
        args.output = None

    try:
        COMMANDS[args.command](args)
    except ShapeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("Aborted", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
