"""Entry point for termtheme."""

import argparse
import json
import sys
import traceback
from importlib.metadata import version
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from termtheme.capabilities import COLOR_MODES, CapabilitySet
from termtheme.document import COLOR_SLOTS, COLORS_SECTION, Borders, ThemeDocument, collect_raw_colors
from termtheme.errors import ThemeError
from termtheme.loader import read_theme_file
from termtheme.logger import add_sink, get_logger, remove_sink
from termtheme.resolver import resolve_candidates
from termtheme.settings import load_settings

logger = get_logger(__name__)

EXIT_THEME_ERROR = 2


def get_version() -> str:
    """Get the installed package version.

    Returns:
        The version string, or 'unknown' if it cannot be determined.
    """
    try:
        return version("termtheme")
    except Exception:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="termtheme",
        description="Validate a terminal theme file and show the resolved palette.",
    )
    parser.add_argument(
        "theme_file",
        nargs="?",
        type=Path,
        help="Theme file to load (defaults to the file configured in settings.json)",
    )
    parser.add_argument(
        "--color-mode",
        choices=COLOR_MODES,
        default=None,
        help="Override color capability detection",
    )
    parser.add_argument("--json", action="store_true", help="Print the resolved theme as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Explain how each color was picked")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def _build_table(document: ThemeDocument) -> Table:
    table = Table(title="Resolved theme")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_column("Swatch")

    for field_name in document.field_names():
        value = document.get(field_name)
        if isinstance(value, bool):
            table.add_row(field_name, str(value).lower(), "")
        elif isinstance(value, Borders):
            table.add_row(field_name, value.value, "")
        else:
            table.add_row(field_name, str(value), Text("      ", style=f"on {value.rich_color}"))
    return table


def _explain(raw: dict[str, object], caps: CapabilitySet, console: Console) -> None:
    raw_colors = collect_raw_colors(raw)
    for slot in COLOR_SLOTS:
        if slot not in raw_colors:
            continue
        outcomes = resolve_candidates(raw_colors[slot], caps)
        summary = ", ".join(f"{outcome.raw!r}={outcome.status.value}" for outcome in outcomes)
        console.print(f"{COLORS_SECTION}.{slot}: {summary or 'no candidates'}", markup=False, highlight=False)


def main(args: argparse.Namespace) -> int:
    """Load a theme and print the result.

    Args:
        args: Parsed command line arguments.

    Returns:
        Process exit code.
    """
    console = Console()
    err_console = Console(stderr=True)
    settings = load_settings()

    sink_id = add_sink(sys.stderr, level="DEBUG" if args.verbose else settings.log_level)
    try:
        caps = CapabilitySet.for_mode(args.color_mode or settings.color_mode)
        theme_path = args.theme_file or settings.theme_path()
        logger.info(f"Resolving {theme_path} (custom colors: {caps.supports_custom_color})")

        try:
            raw = read_theme_file(theme_path)
            document = ThemeDocument.load(raw, caps)
        except ThemeError as exc:
            logger.error(f"Failed to load theme: {exc}")
            err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
            return EXIT_THEME_ERROR

        if args.json:
            console.print_json(json.dumps(document.as_dict()))
            return 0

        if args.verbose:
            _explain(raw, caps, console)

        console.print(_build_table(document))
        return 0
    finally:
        remove_sink(sink_id)


def run() -> None:
    """Run the CLI with standard Python tracebacks."""
    args = parse_args()
    try:
        exit_code = main(args)
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        exit_code = 1
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    run()
