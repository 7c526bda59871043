"""CLI entry point for deformat."""

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .clipboard import read_payload
from .config import CliConfig
from .formatter import FormatResult, format_text
from .rules import ALL_CATEGORIES

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class DeformatFlags:
    """Parsed command line flags."""
    json: bool = False
    no_categories: bool = False
    list_categories: bool = False
    verbose: bool = False
    help: bool = False
    html_path: Optional[Path] = None
    text_path: Optional[Path] = None
    config_path: Optional[Path] = None
    files: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


# Options that consume the next argument, mapped to the DeformatFlags field they set.
_PATH_OPTIONS = {
    "--html": "html_path",
    "--text": "text_path",
    "--config": "config_path",
}


def extract_flags(args: list[str]) -> DeformatFlags:
    """Parse ``args`` into flags. Problems are collected in ``flags.errors``."""
    flags = DeformatFlags()

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--json":
            flags.json = True
            i += 1
        elif arg == "--no-categories":
            flags.no_categories = True
            i += 1
        elif arg == "--list-categories":
            flags.list_categories = True
            i += 1
        elif arg in ("--verbose", "-v"):
            flags.verbose = True
            i += 1
        elif arg in ("--help", "-h"):
            flags.help = True
            i += 1
        elif arg in _PATH_OPTIONS:
            if i + 1 < len(args):
                setattr(flags, _PATH_OPTIONS[arg], Path(args[i + 1]))
                i += 2
            else:
                flags.errors.append(f"option {arg} requires a path")
                i += 1
        elif arg.startswith("-") and arg != "-":
            flags.errors.append(f"unknown option {arg}")
            i += 1
        else:
            flags.files.append(arg)
            i += 1

    if len(flags.files) > 1:
        flags.errors.append("only one input file can be given")
    if flags.files and (flags.html_path or flags.text_path):
        flags.errors.append("an input file cannot be combined with --html/--text")

    return flags


def print_help() -> None:
    """Print deformat help."""
    print("deformat - Strip all formatting from rich text")
    print()
    print("Usage: deformat [options] [FILE]")
    print()
    print("Reads FILE (or stdin when FILE is omitted or '-') and prints the plain text.")
    print()
    print("Options:")
    print("  --html <path>          HTML flavour of a paste (preferred when non-empty)")
    print("  --text <path>          Plain-text flavour of a paste")
    print("  --json                 Print {\"plainText\": ..., \"categories\": [...]} as JSON")
    print("  --no-categories        Do not report removed formatting categories")
    print("  --list-categories      List every detectable formatting category")
    print("  --config <path>        Read settings from this YAML file")
    print("  --verbose, -v          Enable debug logging")
    print("  --help, -h             Show this help")
    print()
    print("Examples:")
    print("  pbpaste | deformat                         # Clean clipboard text")
    print("  deformat email.html                        # Clean a saved HTML fragment")
    print("  deformat --html paste.html --text paste.txt --json")


def print_category_list() -> None:
    """Print every category the formatter can report."""
    print("Formatting categories:")
    for category in ALL_CATEGORIES:
        print(f"  {category}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def read_stdin() -> str:
    """Read stdin as UTF-8, replacing undecodable bytes like the FILE path does."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin.read()
    return buffer.read().decode("utf-8", errors="replace")


def _read_input(flags: DeformatFlags) -> Optional[str]:
    """Return the text to format, or None after reporting an error."""
    if flags.html_path or flags.text_path:
        payload = read_payload(flags.html_path, flags.text_path)
        if payload.html is None and payload.plain is None:
            print("deformat: no readable paste flavour", file=sys.stderr)
            return None
        return payload.select()

    if flags.files and flags.files[0] != "-":
        path = Path(flags.files[0])
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"deformat: cannot read {path}: {e.strerror or e}", file=sys.stderr)
            return None

    return read_stdin()


def write_result(result: FormatResult, config: CliConfig) -> None:
    """Print ``result`` in the configured output mode."""
    if config.output == "json":
        payload = result.to_dict()
        if not config.show_categories:
            payload.pop("categories")
        print(json.dumps(payload, ensure_ascii=False))
        return

    print(result.plain_text)
    if config.show_categories and result.categories:
        print(f"Removed: {', '.join(result.categories)}", file=sys.stderr)


def run(args: Optional[list[str]] = None) -> int:
    """Run deformat with the given arguments. Returns exit code."""
    if args is None:
        args = sys.argv[1:]

    flags = extract_flags(args)
    _configure_logging(flags.verbose)

    if flags.help:
        print_help()
        return 0

    if flags.errors:
        for error in flags.errors:
            print(f"deformat: {error}", file=sys.stderr)
        print("Try 'deformat --help' for more information.", file=sys.stderr)
        return 1

    if flags.list_categories:
        print_category_list()
        return 0

    config = CliConfig.load(flags.config_path)
    if not flags.verbose:
        logging.getLogger().setLevel(config.log_level)
    if flags.json:
        config.output = "json"
    if flags.no_categories:
        config.show_categories = False

    text = _read_input(flags)
    if text is None:
        return 1

    write_result(format_text(text), config)
    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
