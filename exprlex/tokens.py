"""Token kinds, tokens and the list a lexer produces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import overload


class TokenType(IntEnum):
    """The kinds of token the lexer recognises."""

    NUMBER = 0  # 123 123.313 .3123 0.1231
    IDENTIFIER = 1  # x y z
    PLUS = 2  # +
    MINUS = 3  # -
    MULTIPLY = 4  # *
    DIVIDE = 5  # /
    MODULO = 6  # %
    POWER = 7  # ^ **
    EXPONENT = 8  # 'e' or 'E' right after a number
    LPAREN = 9  # (
    RPAREN = 10  # )
    LBRACKET = 11  # [
    RBRACKET = 12  # ]
    LBRACE = 13  # {
    RBRACE = 14  # }
    INVALID = 15
    EOI = 16

    @property
    def label(self) -> str:
        """The display name of the kind, such as ``NUMBER_TOKEN``."""
        return f"{self.name}_TOKEN"


@dataclass(frozen=True)
class Token:
    """A token kind with the text it was made from.

    The end-of-input token carries no text, so its lexeme is ``None``.
    """

    type: TokenType
    lexeme: str | None


class TokenList(Sequence[Token]):
    """An immutable, ordered collection of tokens."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> TokenList: ...

    def __getitem__(self, index: int | slice) -> Token | TokenList:
        if isinstance(index, slice):
            return TokenList(self._tokens[index])
        try:
            return self._tokens[index]
        except IndexError:
            raise IndexError(
                f"token index {index} out of range for {len(self._tokens)} tokens"
            ) from None

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenList):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"TokenList({list(self._tokens)!r})"