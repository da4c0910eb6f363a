"""Key/value labels attached to metric keys."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

LabelsLike = Union[None, Mapping[str, str], Iterable[Any]]


@dataclass(frozen=True, order=True)
class Label:
    """A key/value pair giving context to a metric."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not isinstance(self.value, str):
            raise TypeError("label key and value must be strings")

    def into_parts(self) -> tuple[str, str]:
        """Return the key and value as a tuple."""
        return (self.key, self.value)


def _to_label(item: Any) -> Label:
    if isinstance(item, Label):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Label(item[0], item[1])
    raise TypeError(f"cannot convert {item!r} to a label")


def into_labels(value: LabelsLike) -> list[Label]:
    """Turn labels, key/value pairs or a mapping into a list of labels."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [Label(k, v) for k, v in value.items()]
    if isinstance(value, (str, bytes)):
        raise TypeError("a string is not a collection of labels")
    return [_to_label(item) for item in value]


__all__ = ["Label", "into_labels"]