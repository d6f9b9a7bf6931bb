#!/usr/bin/env python3
"""
MO (GNU gettext compiled catalog) binary format decoder.

Reads the message table out of a .mo file held fully in memory. Only the
little-endian layout is accepted; plural records and the optional hash
table are not interpreted.

Format:
    offset  0: magic                    0x950412de
    offset  4: file format revision     0 or 1
    offset  8: number of strings        N
    offset 12: offset of original table O
    offset 16: offset of translation table T
    ...
    O: N x (length, offset) pairs describing the msgids
    T: N x (length, offset) pairs describing the msgstrs

See https://www.gnu.org/software/gettext/manual/html_node/MO-Files.html
"""

import json
import struct
import sys
from dataclasses import dataclass
from pathlib import Path

from .catalog import MessageCatalog


MAGIC = 0x950412DE
SUPPORTED_VERSIONS = (0, 1)

HEADER_FORMAT = struct.Struct("<5I")
ENTRY_FORMAT = struct.Struct("<2I")

HEADER_SIZE = HEADER_FORMAT.size  # 20
ENTRY_SIZE = ENTRY_FORMAT.size    # 8


@dataclass
class MoHeader:
    """The fixed part of a .mo header (hash table fields are ignored)."""
    magic: int
    version: int
    count: int
    original_table_offset: int
    translated_table_offset: int


@dataclass
class MoTableEntry:
    """A (length, offset) descriptor locating one string in the buffer."""
    length: int
    offset: int

    @property
    def end(self) -> int:
        return self.offset + self.length


class MoDecodeError(ValueError):
    """Base class for structured .mo decoding failures."""

    error_type = "DECODE_ERROR"

    def context(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        return {
            "type": self.error_type,
            "message": str(self),
            **self.context(),
        }


class TooSmallError(MoDecodeError):
    error_type = "TOO_SMALL"

    def __init__(self, size: int, minimum: int = HEADER_SIZE):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"content too small: {size} bytes found, expected {minimum} at least"
        )

    def context(self) -> dict:
        return {"size": self.size, "minimum": self.minimum}


class BadMagicError(MoDecodeError):
    error_type = "BAD_MAGIC"

    def __init__(self, magic: int):
        self.magic = magic
        super().__init__(
            f"magic number mismatch: found {magic:#010x}, expected {MAGIC:#010x}"
        )

    def context(self) -> dict:
        return {"magic": self.magic}


class BadVersionError(MoDecodeError):
    error_type = "BAD_VERSION"

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"header version is wrong (not 0 or 1): {version}")

    def context(self) -> dict:
        return {"version": self.version}


class TableOutOfBoundsError(MoDecodeError):
    error_type = "TABLE_OUT_OF_BOUNDS"

    def __init__(self, header: MoHeader, size: int):
        self.count = header.count
        self.original_table_offset = header.original_table_offset
        self.translated_table_offset = header.translated_table_offset
        self.size = size
        super().__init__(
            f"header indicates more messages than file has space for: "
            f"{header.count} entries with tables at {header.original_table_offset} "
            f"and {header.translated_table_offset}, file size {size}"
        )

    def context(self) -> dict:
        return {
            "count": self.count,
            "original_table_offset": self.original_table_offset,
            "translated_table_offset": self.translated_table_offset,
            "size": self.size,
        }


class EntryOutOfBoundsError(MoDecodeError):
    error_type = "ENTRY_OUT_OF_BOUNDS"

    def __init__(self, index: int, table: str, entry: MoTableEntry, size: int):
        self.index = index
        self.table = table
        self.offset = entry.offset
        self.length = entry.length
        self.size = size
        super().__init__(
            f"file ended prematurely: {table} string {index} spans "
            f"{entry.offset}..{entry.end}, file size {size}"
        )

    def context(self) -> dict:
        return {
            "index": self.index,
            "table": self.table,
            "offset": self.offset,
            "length": self.length,
            "size": self.size,
        }


class MoDecoder:
    """Decode a .mo buffer into a MessageCatalog."""

    def read_header(self, data: bytes) -> MoHeader:
        """
        Parse and validate the fixed header.

        Args:
            data: Whole file contents

        Returns:
            The parsed MoHeader

        Raises:
            TooSmallError, BadMagicError, BadVersionError
        """
        if len(data) < HEADER_SIZE:
            raise TooSmallError(len(data), HEADER_SIZE)

        header = MoHeader(*HEADER_FORMAT.unpack_from(data, 0))

        if header.magic != MAGIC:
            raise BadMagicError(header.magic)
        if header.version not in SUPPORTED_VERSIONS:
            raise BadVersionError(header.version)

        return header

    def check_tables(self, header: MoHeader, size: int) -> None:
        """Ensure both descriptor tables fit inside the buffer."""
        table_span = ENTRY_SIZE * header.count
        if (header.original_table_offset + table_span > size or
                header.translated_table_offset + table_span > size):
            raise TableOutOfBoundsError(header, size)

    def read_entry(self, data: bytes, table_offset: int, index: int) -> MoTableEntry:
        """Read descriptor `index` of the table at `table_offset` (bounds already checked)."""
        return MoTableEntry(*ENTRY_FORMAT.unpack_from(data, table_offset + ENTRY_SIZE * index))

    def read_table(self, data: bytes, offset: int, count: int) -> list[MoTableEntry]:
        """Read `count` descriptors starting at `offset` (bounds already checked)."""
        return [self.read_entry(data, offset, i) for i in range(count)]

    def decode(self, data: bytes) -> MessageCatalog:
        """
        Decode a complete .mo buffer.

        The first failing check aborts decoding; no partial catalog is
        ever returned. Descriptors are read one index at a time, so a bad
        entry is reported before any later entry is touched.

        Args:
            data: Whole file contents

        Returns:
            MessageCatalog mapping msgid bytes to msgstr bytes

        Raises:
            MoDecodeError: a subclass naming the failed check
        """
        if not isinstance(data, bytes):
            data = bytes(data)
        size = len(data)

        header = self.read_header(data)
        self.check_tables(header, size)

        catalog = MessageCatalog()
        for index in range(header.count):
            original = self.read_entry(data, header.original_table_offset, index)
            translated = self.read_entry(data, header.translated_table_offset, index)
            msgid = self._slice(data, index, "original", original)
            msgstr = self._slice(data, index, "translated", translated)
            # First occurrence of a msgid wins
            catalog.add(msgid, msgstr)

        return catalog.freeze()

    def _slice(self, data: bytes, index: int, table: str, entry: MoTableEntry) -> bytes:
        if entry.end > len(data):
            raise EntryOutOfBoundsError(index, table, entry, len(data))
        return data[entry.offset:entry.end]


def decode(data: bytes) -> MessageCatalog:
    """Decode `data` with a default MoDecoder."""
    return MoDecoder().decode(data)


def load_catalog(path) -> MessageCatalog:
    """
    Read a .mo file and decode it.

    Decoding failures are reported on stderr as a one-line JSON object and
    yield an empty catalog; errors opening or reading the file propagate.

    Args:
        path: Path to the .mo file

    Returns:
        Decoded MessageCatalog (empty if the content is not a valid catalog)
    """
    data = Path(path).read_bytes()
    try:
        return decode(data)
    except MoDecodeError as e:
        print(json.dumps({
            "status": "error",
            "file": str(path),
            **e.to_dict(),
        }), file=sys.stderr)
        return MessageCatalog().freeze()
