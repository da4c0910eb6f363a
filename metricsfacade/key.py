"""Metric identifiers: a name plus an ordered set of labels."""

from __future__ import annotations

import functools
from collections.abc import Iterator
from typing import Union

from .label import Label, LabelsLike, into_labels

_U64_MASK = (1 << 64) - 1


@functools.total_ordering
class KeyName:
    """Name component of a key."""

    __slots__ = ("_name",)

    def __init__(self, name: Union[str, "KeyName"]) -> None:
        if isinstance(name, KeyName):
            name = name._name
        if not isinstance(name, str):
            raise TypeError(f"key name must be a string, not {type(name).__name__}")
        self._name = name

    def as_str(self) -> str:
        """Return the string used for this name."""
        return self._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"KeyName({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KeyName):
            return self._name == other._name
        if isinstance(other, str):
            return self._name == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, KeyName):
            return self._name < other._name
        if isinstance(other, str):
            return self._name < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)


@functools.total_ordering
class Key:
    """A metric identifier made of a name and labels.

    Labels keep their insertion order and are not sorted before comparison.
    """

    __slots__ = ("_name", "_labels", "_hash")

    def __init__(self, name: Union[str, KeyName], labels: LabelsLike = None) -> None:
        self._name = KeyName(name)
        self._labels: tuple[Label, ...] = tuple(into_labels(labels))
        self._hash: int | None = None

    @classmethod
    def from_name(cls, name: Union[str, KeyName]) -> "Key":
        """Create a key from a name alone."""
        return cls(name)

    @classmethod
    def from_parts(cls, name: Union[str, KeyName], labels: LabelsLike) -> "Key":
        """Create a key from a name and a set of labels."""
        return cls(name, labels)

    def name(self) -> str:
        """Return the name of this key."""
        return self._name.as_str()

    def labels(self) -> Iterator[Label]:
        """Iterate over the labels of this key."""
        return iter(self._labels)

    def into_parts(self) -> tuple[KeyName, list[Label]]:
        """Return the name and a list of the labels."""
        return self._name, list(self._labels)

    def with_extra_labels(self, extra_labels: LabelsLike) -> "Key":
        """Return a key with the given labels appended to the existing ones."""
        extra = into_labels(extra_labels)
        if not extra:
            return self
        return Key(self._name, [*self._labels, *extra])

    def get_hash(self) -> int:
        """Return a 64-bit hash of this key, computed once and cached."""
        if self._hash is None:
            self._hash = hash(self._identity()) & _U64_MASK
        return self._hash

    def _identity(self) -> tuple[str, tuple[Label, ...]]:
        return (self._name.as_str(), self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._identity() == other._identity()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._identity() < other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        name = self._name.as_str()
        if not self._labels:
            return f"Key({name})"
        parts = ", ".join(f"{label.key} = {label.value}" for label in self._labels)
        return f"Key({name}, [{parts}])"

    def __repr__(self) -> str:
        return f"Key(name={self.name()!r}, labels={list(self._labels)!r})"


__all__ = ["KeyName", "Key"]