"""Field tokenizer for comma separated address lines.

Fields are either raw (``abc``) or quoted (``"abc"``). Inside quotes a
doubled quote is a literal quote and a backslash introduces one of the
escapes ``\\n``, ``\\r`` or ``\\t``. Line breaks are never allowed in the
text of a line; quoted fields carry them as escapes instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional

from .errors import DecodingError

SEPARATOR = ","
QUOTE = '"'
ESCAPE = "\\"
LINE_BREAKS = frozenset("\r\n")

ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class _State(Enum):
    # Another field follows.
    FIELD = "field"
    # The terminal field has been produced.
    DONE = "done"


class _Cursor:
    """Peekable view over the characters of a line."""

    __slots__ = ("_text", "_position")

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def peek(self) -> Optional[str]:
        if self._position < len(self._text):
            return self._text[self._position]
        return None

    def next(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self._position += 1
        return char


class FieldTokenizer(Iterator[str]):
    """Iterate over the decoded fields of one line.

    A malformed field raises :class:`DecodingError`; the tokenizer yields
    nothing after that.
    """

    def __init__(self, line: str) -> None:
        self._cursor = _Cursor(line)
        self._state = _State.FIELD

    def __iter__(self) -> FieldTokenizer:
        return self

    def __next__(self) -> str:
        char = self._cursor.peek()

        if self._state is _State.DONE:
            if char is None:
                raise StopIteration
            # Only reachable if a field stopped before consuming its input.
            self._cursor = _Cursor("")
            raise DecodingError("input remains after the terminal field")

        if char is None:
            self._state = _State.DONE
            return ""

        try:
            if char == QUOTE:
                return self._quoted()
            return self._raw()
        except DecodingError:
            self._state = _State.DONE
            self._cursor = _Cursor("")
            raise

    def _raw(self) -> str:
        buffer: List[str] = []
        while True:
            char = self._cursor.next()
            if char is None:
                self._state = _State.DONE
                return "".join(buffer)
            if char == SEPARATOR:
                return "".join(buffer)
            if char in LINE_BREAKS:
                raise DecodingError("line break in unquoted field")
            buffer.append(char)

    def _quoted(self) -> str:
        opening = self._cursor.next()
        assert opening == QUOTE

        buffer: List[str] = []
        while True:
            char = self._cursor.next()
            if char is None or char in LINE_BREAKS:
                raise DecodingError("unterminated quoted field")

            if char == QUOTE:
                following = self._cursor.peek()
                if following == QUOTE:
                    self._cursor.next()
                    buffer.append(QUOTE)
                elif following == SEPARATOR:
                    self._cursor.next()
                    return "".join(buffer)
                elif following is None:
                    self._state = _State.DONE
                    return "".join(buffer)
                else:
                    raise DecodingError(f"unexpected {following!r} after closing quote")
            elif char == ESCAPE:
                escaped = self._cursor.next()
                if escaped not in ESCAPES:
                    raise DecodingError(f"invalid escape sequence {ESCAPE}{escaped or ''}")
                buffer.append(ESCAPES[escaped])
            else:
                buffer.append(char)


def split_fields(line: str) -> List[str]:
    """Decode every field of ``line`` at once."""
    return list(FieldTokenizer(line))
