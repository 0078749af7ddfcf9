"""A bounded text buffer used to build outgoing robot messages."""

from __future__ import annotations

MAX_MSG_SIZE = 151
"""Size of the message buffer, including room for a terminating NUL."""

MAX_LENGTH = MAX_MSG_SIZE - 1
"""Largest number of characters an :class:`EString` can hold."""

_TextLike = str | bytes | bytearray | memoryview


def _as_text(value: _TextLike) -> str:
    """Turn a string or byte sequence into text, stopping at the first NUL."""
    if isinstance(value, str):
        text = value
    elif isinstance(value, (bytes, bytearray, memoryview)):
        text = bytes(value).decode("latin-1")
    else:
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    return text.split("\0", 1)[0]


def _format_decimal(value: float) -> str:
    """Format a number with exactly three truncated decimal places."""
    integer_part = int(value)
    decimal_part = int(1000 * abs(value - integer_part))
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(integer_part)}.{decimal_part:03d}"


class EString:
    """Text of at most :data:`MAX_LENGTH` characters that can be set, appended to and cleared."""

    def __init__(self) -> None:
        self._text = ""

    def clear(self) -> None:
        """Empty the contents."""
        self._text = ""

    def set(self, value: _TextLike) -> None:
        """Replace the contents with a string or the bytes of a characteristic value."""
        self._store(_as_text(value))

    def append(self, value: int | float | _TextLike) -> None:
        """Append an integer, a number with three decimals, or text."""
        if isinstance(value, (bool, int)):
            piece = str(int(value))
        elif isinstance(value, float):
            piece = _format_decimal(value)
        else:
            piece = _as_text(value)
        self._store(self._text + piece)

    def _store(self, text: str) -> None:
        if len(text) > MAX_LENGTH:
            raise ValueError(
                f"message of {len(text)} characters exceeds the limit of {MAX_LENGTH}"
            )
        self._text = text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"EString({self._text!r})"