"""CLI entry point for termtint.

Prints its arguments with ANSI styling when the output is a terminal:

    termtint -s bold -s fg-green "all checks passed"
    termtint -f "%s of %s done" 3 10 -s fg-yellow
    termtint --list-styles
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _load_config(args: argparse.Namespace):
    """Load config, falling back to defaults when no file was asked for."""
    from termtint.config import DEFAULT_CONFIG_PATH, TermtintConfig, load_config

    config_path = getattr(args, "config", None)
    if config_path is None and not Path(DEFAULT_CONFIG_PATH).exists():
        return TermtintConfig()
    path = config_path or DEFAULT_CONFIG_PATH
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot read config file {path}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)


def _build_printer(args: argparse.Namespace, config):
    """Pick the stream and color mode from the command line or config."""
    from termtint.printer import Printer
    from termtint.terminal import ColorMode

    if args.color is not None:
        mode = ColorMode(args.color)
    else:
        mode = config.output.color

    stream_name = "stderr" if args.stderr else config.output.stream
    stream = sys.stderr if stream_name == "stderr" else sys.stdout
    return Printer.for_stream(stream, mode)


def cmd_list_styles(printer) -> int:
    """Print every style name and code, each rendered in its own style."""
    from termtint.styles import Style

    for style in Style:
        printer.println(f"{style.label:<12} {style.code:>2}", style)
    return 0


def cmd_print(args: argparse.Namespace, printer, styles) -> int:
    """Print the positional words, or format them into --format."""
    if args.format is not None:
        template = args.format if args.no_newline else args.format + "\n"
        printer.printf(template, *args.text, *styles)
    elif args.no_newline:
        printer.print(" ".join(args.text), *styles)
    else:
        printer.println(" ".join(args.text), *styles)
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtint",
        description="Print text with ANSI styles when writing to a terminal.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to termtint.toml (default: ./termtint.toml if present)",
    )
    parser.add_argument(
        "--color", choices=["auto", "always", "never"],
        help="When to emit escape sequences (default: from config, else auto)",
    )
    parser.add_argument(
        "--stderr", action="store_true",
        help="Write to stderr instead of stdout",
    )
    parser.add_argument(
        "-s", "--style", action="append", default=[], metavar="STYLE",
        help="Style to apply, e.g. bold, fg-red, bg-blue (repeatable)",
    )
    parser.add_argument(
        "-n", "--no-newline", action="store_true",
        help="Do not print the trailing newline",
    )
    parser.add_argument(
        "-f", "--format", metavar="TEMPLATE",
        help="%%-format TEMPLATE with the positional arguments",
    )
    parser.add_argument(
        "--list-styles", action="store_true",
        help="List the available style names and exit",
    )
    parser.add_argument("text", nargs="*", help="Text to print")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    from termtint.styles import parse_styles

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
        printer = _build_printer(args, config)
        if args.list_styles:
            return cmd_list_styles(printer)
        styles = parse_styles(args.style) if args.style else config.styles.default
        return cmd_print(args, printer, styles)
    except ValueError as e:
        # ConfigError, UnknownStyleError and tomllib.TOMLDecodeError
        return _error(str(e))
    except TypeError as e:
        return _error(f"cannot format {args.format!r}: {e}")
    except OSError as e:
        return _error(f"write failed: {e}")


if __name__ == "__main__":
    sys.exit(main())
