"""
modump - inspect GNU gettext compiled catalogs

Decodes the msgid/msgstr table of a .mo file and prints it as a key
list or as key/value pairs.

Quick start:
    mo-dump messages.mo keys
    mo-dump messages.mo pairs

Library use:
    from modump import decode
    catalog = decode(Path("messages.mo").read_bytes())
    catalog[b"Hello"]
"""

__version__ = "1.0.0"

from .catalog import MessageCatalog
from .mo_format import (
    BadMagicError,
    BadVersionError,
    EntryOutOfBoundsError,
    MoDecodeError,
    MoDecoder,
    MoHeader,
    MoTableEntry,
    TableOutOfBoundsError,
    TooSmallError,
    decode,
    load_catalog,
)
from .render import dump_catalog, quote_escape

__all__ = [
    "MessageCatalog",
    "MoDecoder",
    "MoHeader",
    "MoTableEntry",
    "MoDecodeError",
    "TooSmallError",
    "BadMagicError",
    "BadVersionError",
    "TableOutOfBoundsError",
    "EntryOutOfBoundsError",
    "decode",
    "load_catalog",
    "dump_catalog",
    "quote_escape",
]
