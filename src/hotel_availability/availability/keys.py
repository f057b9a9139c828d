"""Case-insensitive mapping used for hotel ids and room-type codes."""
from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Generic, TypeVar

V = TypeVar("V")


class CaseInsensitiveDict(MutableMapping[str, V], Generic[V]):
    """A ``dict`` keyed by lower-cased strings.

    The first spelling used for a key is the one reported by iteration, so ``"H1"``
    and ``"h1"`` address the same entry and iterate as ``"H1"``.
    """

    __slots__ = ("_store",)

    def __init__(self, data: Mapping[str, V] | None = None) -> None:
        self._store: dict[str, tuple[str, V]] = {}
        if data:
            self.update(data)

    @staticmethod
    def _fold(key: str) -> str:
        return key.lower()

    def __getitem__(self, key: str) -> V:
        return self._store[self._fold(key)][1]

    def __setitem__(self, key: str, value: V) -> None:
        folded = self._fold(key)
        existing = self._store.get(folded)
        spelling = existing[0] if existing is not None else key
        self._store[folded] = (spelling, value)

    def __delitem__(self, key: str) -> None:
        del self._store[self._fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self._store

    def __iter__(self) -> Iterator[str]:
        return (spelling for spelling, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
