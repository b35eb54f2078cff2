"""Keep the caret on the same digit when separators are added or removed."""

from __future__ import annotations

from finput.models import Options


def compute_offset(prev: str, curr: str, pos: int, options: Options) -> int:
    """Count how many separators reformatting added in front of *pos*.

    Args:
        prev: The text before reformatting.
        curr: The reformatted text.
        pos: Caret position in *prev*.
        options: Formatting options (only ``thousands`` is used).

    Returns:
        Separators before *pos* in *curr* minus those before *pos* in *prev*;
        add it to *pos* to get the caret in *curr*.
    """
    return curr[:pos].count(options.thousands) - prev[:pos].count(options.thousands)


def clamp_caret(pos: int, text: str) -> int:
    """Clamp *pos* to ``[0, len(text)]``."""
    return max(0, min(pos, len(text)))
