"""A character source fed by a queue of text chunks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class CharReader:
    """Hands out characters one at a time from text chunks added in order.

    Chunks are consumed as they are read. Once every chunk has been used up,
    :meth:`read` returns an empty string, but more text may be added later
    and reading continues with it.
    """

    def __init__(self) -> None:
        self._chunks: deque[str] = deque()
        self._position = 0

    def add(self, text: str) -> None:
        """Queue ``text`` to be read after everything added before it.

        Text is taken up to its first NUL character, which marks the end of
        a chunk.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, not {type(text).__name__}")
        self._chunks.append(text.split("\0", 1)[0])

    def read(self) -> str:
        """Return the next character, or ``""`` when nothing is left."""
        while self._chunks and self._position >= len(self._chunks[0]):
            self._chunks.popleft()
            self._position = 0
        if not self._chunks:
            return ""
        char = self._chunks[0][self._position]
        self._position += 1
        return char

    def __iter__(self) -> Iterator[str]:
        """Yield the remaining characters, consuming them."""
        return iter(self.read, "")