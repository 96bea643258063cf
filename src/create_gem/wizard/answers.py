"""Answers produced by a single wizard step."""

from dataclasses import dataclass
from enum import Enum


class Signal(Enum):
    """Answers that are navigation or deferral rather than data."""

    BACK = "back"
    BUNDLER_DEFAULT = "bundler_default"


@dataclass(frozen=True)
class Value:
    """A concrete value to store for the current option."""

    value: bool | str


Answer = Signal | Value
