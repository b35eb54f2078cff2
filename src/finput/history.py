"""Linear undo/redo history of committed field values."""

from __future__ import annotations


class ValueHistory:
    """Committed display strings plus a cursor.

    The history starts with the empty value.  Adding a value after an undo
    discards every entry past the cursor, as in a text editor.

    Args:
        max_size: Optional cap on stored entries; the oldest are dropped
            first.  ``None`` keeps everything.
    """

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._values: list[str] = [""]
        self._position = 0

    def __len__(self) -> int:
        return len(self._values)

    @property
    def current(self) -> str:
        """The value under the cursor."""
        return self._values[self._position]

    @property
    def can_undo(self) -> bool:
        return self._position > 0

    @property
    def can_redo(self) -> bool:
        return self._position < len(self._values) - 1

    def add_value(self, value: str) -> None:
        """Record *value*, unless it equals the value under the cursor."""
        if value == self.current:
            return
        del self._values[self._position + 1 :]
        self._values.append(value)
        if self.max_size is not None and len(self._values) > self.max_size:
            del self._values[: len(self._values) - self.max_size]
        self._position = len(self._values) - 1

    def undo(self) -> str:
        """Step back and return that value, or the current one at the start."""
        if self.can_undo:
            self._position -= 1
        return self.current

    def redo(self) -> str:
        """Step forward and return that value, or the current one at the end."""
        if self.can_redo:
            self._position += 1
        return self.current

    def clear(self) -> None:
        """Forget everything and start again from the empty value."""
        self._values = [""]
        self._position = 0
