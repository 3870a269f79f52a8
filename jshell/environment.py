"""An ordered environment of ``NAME=value`` entries with export and unset."""

from __future__ import annotations

import os
from typing import Iterable, Mapping

EMPTY_VALUE = "''"


def _matches(entry: str, name: str) -> bool:
    """True when ``entry`` defines ``name``, that is, starts with ``name=``."""
    return entry.startswith(name) and entry[len(name):len(name) + 1] == "="


class Environment:
    """Ordered ``NAME=value`` entries, as a shell keeps them.

    Entries keep their insertion order. ``export`` replaces an existing
    definition in place and appends new ones at the end.
    """

    def __init__(self, entries: Iterable[str] | Mapping[str, str] | None = None) -> None:
        if entries is None:
            entries = os.environ
        if isinstance(entries, Mapping):
            self._entries = [f"{name}={value}" for name, value in entries.items()]
        else:
            self._entries = [str(entry) for entry in entries]

    def _index(self, name: str) -> int | None:
        return next(
            (index for index, entry in enumerate(self._entries) if _matches(entry, name)),
            None,
        )

    def get(self, name: str) -> str | None:
        """Value of the first definition of ``name``, or None."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def export(self, assignment: str) -> str:
        """Define a variable from ``NAME=value`` or a bare ``NAME``.

        An assignment replaces the existing definition of its name, or is
        appended when there is none. A bare name that is not yet defined is
        appended as ``NAME=''``; a bare name that is already defined is left
        as it is. Returns the entry now in effect.
        """
        name, equals, _ = assignment.partition("=")
        index = self._index(name)
        if equals:
            if index is None:
                self._entries.append(assignment)
            else:
                self._entries[index] = assignment
            return assignment
        if index is not None:
            return self._entries[index]
        entry = f"{assignment}={EMPTY_VALUE}"
        self._entries.append(entry)
        return entry

    def unset(self, name: str) -> bool:
        """Remove the first definition of ``name``; True if one was removed."""
        index = self._index(name)
        if index is None:
            return False
        del self._entries[index]
        return True

    def entries(self) -> list[str]:
        """All entries in their current order."""
        return list(self._entries)

    def sorted_entries(self) -> list[str]:
        """All entries in byte-wise ascending order, as ``export`` lists them."""
        return sorted(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Mapping of names to values; the first definition of a name wins."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, equals, value = entry.partition("=")
            if equals and name not in result:
                result[name] = value
        return result

    def __len__(self) -> int:
        return len(self._entries)