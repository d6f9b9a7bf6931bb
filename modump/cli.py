#!/usr/bin/env python3
"""
mo-dump - print the contents of a GNU gettext .mo catalog

Usage:
    mo-dump messages.mo keys     # list every msgid
    mo-dump messages.mo pairs    # list msgid -> msgstr pairs

Output:
    Read 2 entries:
      "Hello" -> "Merhaba"
      "Bye" -> "Hoşça kal"

Strings are printed as stored, with newline, tab, NUL, quote and backslash
shown as escapes. A file that is not a valid catalog is reported on stderr
and dumped as 0 entries.
"""

import argparse
import json
import os
import sys
from typing import Optional, TextIO

from .mo_format import load_catalog
from .render import DUMP_MODES, dump_catalog


DEFAULT_PROG = "mo_dump"


def invoked_name() -> str:
    """Program name as invoked (basename of argv[0]), or DEFAULT_PROG."""
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0]) or DEFAULT_PROG
    return DEFAULT_PROG


def format_usage(prog: Optional[str]) -> str:
    """Build the usage text for the given program name."""
    prog = prog or DEFAULT_PROG
    lines = ["Usage:"]
    for mode in DUMP_MODES:
        lines.append(f"  {prog} mo-filename {mode}")
    return "\n".join(lines) + "\n\n"


def print_usage(prog: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write the usage text to `file` (stderr by default)."""
    if file is None:
        file = sys.stderr
    file.write(format_usage(prog))
    file.flush()


class DumpArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations with the short usage and exit code 1."""

    def format_usage(self) -> str:
        return format_usage(self.prog)

    def error(self, message):
        print_usage(self.prog)
        sys.exit(1)


def build_parser(prog: Optional[str] = None) -> DumpArgumentParser:
    parser = DumpArgumentParser(
        prog=prog or invoked_name(),
        description="mo-dump - print the messages of a GNU gettext .mo file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  keys   - one quoted msgid per line
  pairs  - "msgid" -> "msgstr" per line

Examples:
  mo-dump locale/tr/LC_MESSAGES/app.mo keys
  mo-dump locale/tr/LC_MESSAGES/app.mo pairs

File names starting with '-' must follow '--':
  mo-dump -- -old.mo keys
        """,
    )
    parser.add_argument("mo_file", help="Compiled .mo catalog to read")
    parser.add_argument("mode", help="What to print: keys or pairs")
    return parser


def run(args, prog: str) -> int:
    """Load the catalog and dump it. Returns the process exit code."""
    try:
        catalog = load_catalog(args.mo_file)
    except OSError:
        print_usage(prog)
        print(f"Could not open file '{args.mo_file}'", file=sys.stderr)
        return 1

    out = sys.stdout.buffer
    known_mode = dump_catalog(catalog, args.mode, out)
    out.flush()

    if not known_mode:
        print_usage(prog)

    out.write(b"\n")
    out.flush()
    return 0


def main(argv: Optional[list[str]] = None, prog: Optional[str] = None):
    parser = build_parser(prog)
    # Extra positional arguments are ignored
    args, _ = parser.parse_known_args(argv)

    try:
        code = run(args, parser.prog)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
