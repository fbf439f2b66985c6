"""Command-line front door for tagview.

Parses CLI options, loads column definitions and records, and builds the
model. Then dispatches into the interactive table or prints it once.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .ansi import clip_ansi_line
from .runtime import run_table
from .runtime.config import ConfigError, load_columns, load_theme_name, save_theme_name
from .runtime.records import RecordsError, load_records
from .render import render_table_lines
from .table_model import Model, RecordStore
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def configure_logging(log_file: Path | None, verbose: bool, interactive: bool) -> None:
    """Route log records to a file, to stderr for one-shot output, or nowhere.

    Nothing is written to the terminal while the interactive table owns it.
    """
    level = logging.DEBUG if verbose else logging.INFO
    if log_file is not None:
        logging.basicConfig(filename=str(log_file), level=level, format=LOG_FORMAT)
    elif not interactive:
        logging.basicConfig(level=level if verbose else logging.WARNING, format=LOG_FORMAT)
    else:
        logging.getLogger("tagview").addHandler(logging.NullHandler())
        logging.getLogger("tagview").propagate = False


def render_table_view(model: Model, theme_name: str | None, no_color: bool, max_cols: int) -> str:
    """Render the whole table, each row clipped to ``max_cols`` cells."""
    theme = resolve_theme(theme_name, no_color=no_color)
    out: list[str] = []
    for line in render_table_lines(model, theme):
        row = clip_ansi_line(line, max_cols)
        out.append(row)
        if "\033" in row:
            out.append("\033[0m")
        out.append("\n")
    return "".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="View file metadata records as a sortable terminal table."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan or .json records file. Defaults to current directory.",
    )
    parser.add_argument("--config", metavar="PATH", help="Columns config file (JSON).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--hidden", action="store_true", help="Include hidden files when scanning.")
    parser.add_argument("--render", action="store_true", help="Print the table once and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write log messages to PATH.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and show the table for a directory or records file.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Output that is not a terminal always gets ``--render``.
    """
    args = build_parser().parse_args(argv)
    interactive = not args.render and sys.stdin.isatty() and sys.stdout.isatty()
    configure_logging(Path(args.log_file) if args.log_file else None, args.verbose, interactive)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    try:
        columns = load_columns(Path(args.config) if args.config else None)
        records = load_records(path, show_hidden=args.hidden)
    except (ConfigError, RecordsError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.theme:
        save_theme_name(args.theme)
    theme_name = args.theme or load_theme_name()
    model = Model(RecordStore(columns=columns, records=records))

    if not interactive:
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_table_view(model, theme_name, args.no_color, max_cols))
        return

    run_table(model, resolve_theme(theme_name, no_color=args.no_color), source_label=str(path))


if __name__ == "__main__":
    main()
