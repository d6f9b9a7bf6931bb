#!/usr/bin/env python3
"""
Message catalog built from a decoded .mo file.

Keys are msgids and values are msgstrs, both kept as raw bytes since no
charset conversion is performed.
"""

from collections.abc import Iterator, Mapping


class MessageCatalog(Mapping):
    """
    Read-only msgid -> msgstr mapping.

    Entries are added while decoding with add(), which keeps the first
    msgstr seen for a msgid. Once freeze() is called the catalog rejects
    further additions. Iteration follows the order entries were first added.
    """

    def __init__(self):
        self._messages: dict[bytes, bytes] = {}
        self._frozen = False

    def add(self, msgid: bytes, msgstr: bytes) -> None:
        """Store msgstr for msgid unless msgid is already present."""
        if self._frozen:
            raise TypeError("MessageCatalog is read-only once decoding has finished")
        self._messages.setdefault(msgid, msgstr)

    def freeze(self) -> "MessageCatalog":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __getitem__(self, msgid: bytes) -> bytes:
        return self._messages[msgid]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MessageCatalog({self._messages!r})"
