"""Verbosity levels and metadata describing a metric event."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Level(enum.Enum):
    """Verbosity level of a metric event."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


@dataclass(frozen=True)
class Metadata:
    """Where and at what level a metric event was emitted."""

    target: str
    level: Level = Level.INFO
    module_path: Optional[str] = None


__all__ = ["Level", "Metadata"]