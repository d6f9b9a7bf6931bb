"""Shared fixtures: synthetic .mo buffers."""

import struct

import pytest


MO_MAGIC = 0x950412DE


def build_mo(pairs, version=0):
    """
    Build a little-endian .mo buffer holding `pairs` in table order.

    Layout: 28-byte header (including empty hash table fields), original
    table, translated table, then the string data with a NUL after each
    string as msgfmt writes it.
    """
    pairs = [
        (k.encode() if isinstance(k, str) else k, v.encode() if isinstance(v, str) else v)
        for k, v in pairs
    ]
    count = len(pairs)
    original_offset = 28
    translated_offset = original_offset + 8 * count
    data_offset = translated_offset + 8 * count

    strings = b""
    original_table = b""
    translated_table = b""
    for msgid, _ in pairs:
        original_table += struct.pack("<2I", len(msgid), data_offset + len(strings))
        strings += msgid + b"\0"
    for _, msgstr in pairs:
        translated_table += struct.pack("<2I", len(msgstr), data_offset + len(strings))
        strings += msgstr + b"\0"

    header = struct.pack(
        "<7I", MO_MAGIC, version, count, original_offset, translated_offset, 0, 0
    )
    return header + original_table + translated_table + strings


@pytest.fixture
def make_mo():
    """Fixture returning the .mo buffer builder."""
    return build_mo


@pytest.fixture
def mo_file(tmp_path):
    """Fixture writing a .mo buffer built from pairs to a temporary file."""
    def _write(pairs, name="messages.mo"):
        path = tmp_path / name
        path.write_bytes(build_mo(pairs))
        return path
    return _write
