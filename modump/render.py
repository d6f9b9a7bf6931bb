#!/usr/bin/env python3
"""
Output rendering for catalog dumps.

All rendering works on bytes: msgids and msgstrs are written exactly as
stored in the .mo file, apart from the escapes applied by quote_escape().
"""

from typing import BinaryIO

from .catalog import MessageCatalog


DUMP_MODES = ("keys", "pairs")


def quote_escape(s: bytes) -> bytes:
    """
    Quote a byte string for display.

    Newline, tab, NUL, double quote and backslash become backslash escapes;
    every other byte, including non-ASCII ones, is kept as-is.

    Args:
        s: Raw string bytes

    Returns:
        The escaped string wrapped in double quotes
    """
    escaped = (
        s.replace(b'\\', b'\\\\')
        .replace(b'"', b'\\"')
        .replace(b'\n', b'\\n')
        .replace(b'\t', b'\\t')
        .replace(b'\0', b'\\0')
    )
    return b'"' + escaped + b'"'


def render_key(msgid: bytes) -> bytes:
    """Format a `keys` line."""
    return b"  " + quote_escape(msgid)


def render_pair(msgid: bytes, msgstr: bytes) -> bytes:
    """Format a `pairs` line."""
    return b"  " + quote_escape(msgid) + b" -> " + quote_escape(msgstr)


def render_lines(catalog: MessageCatalog, mode: str) -> list[bytes]:
    """
    Render one line per catalog entry.

    Raises:
        ValueError: If mode is not one of DUMP_MODES
    """
    if mode == "keys":
        return [render_key(msgid) for msgid in catalog]
    if mode == "pairs":
        return [render_pair(msgid, msgstr) for msgid, msgstr in catalog.items()]
    raise ValueError(f"Unknown dump mode: {mode}. Available: {', '.join(DUMP_MODES)}")


def dump_catalog(catalog: MessageCatalog, mode: str, out: BinaryIO) -> bool:
    """
    Write the entry count and the rendered entries to a binary stream.

    The count line is written before the mode is checked, so an unknown
    mode still reports how many entries were read.

    Args:
        catalog: Decoded catalog
        mode: "keys" or "pairs"
        out: Binary output stream

    Returns:
        False if mode is unknown (nothing but the count was written)
    """
    out.write(f"Read {len(catalog)} entries:\n".encode("ascii"))

    try:
        lines = render_lines(catalog, mode)
    except ValueError:
        return False

    for line in lines:
        out.write(line + b"\n")
    return True
