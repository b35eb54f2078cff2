"""Data models for numeric field editing: options, key info and edit state."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum

from finput.errors import OptionsError


class Range(Enum):
    """Which signs a value may carry."""

    ALL = "all"
    POSITIVE = "positive"
    NEGATIVE = "negative"


class ActionType(Enum):
    """The kind of edit a keystroke requests."""

    NUMBER = "number"
    MINUS = "minus"
    DECIMAL = "decimal"
    THOUSANDS = "thousands"
    SHORTCUT = "shortcut"
    BACKSPACE = "backspace"
    DELETE = "delete"
    UNDO = "undo"
    REDO = "redo"
    UNKNOWN = "unknown"


class Modifier(Enum):
    """Modifier keys that can accompany a keystroke."""

    CTRL = "ctrl"
    META = "meta"
    SHIFT = "shift"
    ALT = "alt"


@dataclass(frozen=True)
class KeyInfo:
    """A single keystroke.

    ``name`` is a lowercase character for printable keys (``"5"``, ``"k"``,
    ``"."``) or a key name for everything else (``"backspace"``, ``"left"``).
    """

    name: str
    modifiers: frozenset[Modifier] = frozenset()

    @property
    def has_control(self) -> bool:
        """Whether the platform-primary modifier (Ctrl or Cmd) is held."""
        return Modifier.CTRL in self.modifiers or Modifier.META in self.modifiers

    @classmethod
    def parse(cls, key: str) -> KeyInfo:
        """Build a KeyInfo from a ``+``-joined key string.

        Args:
            key: A key string such as ``"5"``, ``"backspace"`` or
                ``"ctrl+shift+z"``.  Unknown modifier names are ignored.

        Returns:
            The parsed KeyInfo.
        """
        # "+" on its own is a key, not a separator.
        if key == "+" or key.endswith("++"):
            head, name = key[:-1], "+"
        else:
            head, _, name = key.rpartition("+")
        known = {m.value: m for m in Modifier}
        modifiers = frozenset(known[p] for p in head.split("+") if p in known)
        return cls(name=name if len(name) != 1 else name.lower(), modifiers=modifiers)


@dataclass
class EditState:
    """Text and caret of a field, before or after an edit.

    A state with ``valid=False`` is a rejected keystroke; its text and caret
    carry no meaning and the caller keeps the previous value.
    """

    text: str
    caret_start: int
    caret_end: int
    valid: bool = True


def _noop_focus() -> tuple[int, int] | None:
    return None


def _noop_invalid_key(key_info: KeyInfo) -> None:
    return None


def _default_shortcuts() -> dict[str, float]:
    return {"k": 1_000, "m": 1_000_000, "b": 1_000_000_000}


@dataclass(frozen=True)
class Options:
    """Formatting configuration for a numeric field.

    Attributes:
        decimal: The decimal separator character.
        thousands: The digit group separator character.
        scale: Number of decimal digits kept.
        fixed: Pad or truncate the decimal part to exactly ``scale`` digits
            when a value is committed.
        range: Which signs are allowed.
        shortcuts: Single characters mapped to a multiplier, e.g. ``k`` to
            multiply the current value by 1000.
        on_focus: Called when the field gains focus; may return a
            ``(start, end)`` selection to apply.
        on_invalid_key: Called with the rejected KeyInfo.
    """

    decimal: str = "."
    thousands: str = ","
    scale: int = 2
    fixed: bool = True
    range: Range = Range.ALL
    shortcuts: dict[str, float] = field(default_factory=_default_shortcuts)
    on_focus: Callable[[], tuple[int, int] | None] = field(default=_noop_focus, compare=False)
    on_invalid_key: Callable[[KeyInfo], None] = field(default=_noop_invalid_key, compare=False)

    def __post_init__(self) -> None:
        for label, char in (("decimal", self.decimal), ("thousands", self.thousands)):
            if not isinstance(char, str) or len(char) != 1:
                raise OptionsError(f"{label} separator must be a single character, got {char!r}")
            if char.isdigit() or char == "-":
                raise OptionsError(f"{label} separator cannot be {char!r}")
        if self.decimal == self.thousands:
            raise OptionsError("decimal and thousands separators must differ")

        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise OptionsError(f"scale must be a non-negative integer, got {self.scale!r}")

        if not isinstance(self.range, Range):
            raise OptionsError(f"range must be a Range, got {self.range!r}")

        reserved = {self.decimal, self.thousands, "-"}
        for key, multiplier in self.shortcuts.items():
            if not isinstance(key, str) or len(key) != 1 or key.isdigit() or key in reserved:
                raise OptionsError(f"invalid shortcut key {key!r}")
            if key != key.lower():
                raise OptionsError(f"shortcut key {key!r} must be lowercase")
            if (
                isinstance(multiplier, bool)
                or not isinstance(multiplier, (int, float))
                or not math.isfinite(multiplier)
                or multiplier <= 0
            ):
                raise OptionsError(f"shortcut {key!r} needs a positive multiplier, got {multiplier!r}")

    def merge(self, **changes) -> Options:
        """Return a copy with *changes* applied (validated again)."""
        return replace(self, **changes)


DEFAULT_OPTIONS = Options()
