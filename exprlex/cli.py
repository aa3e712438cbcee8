"""Command-line entry point that prints the tokens of an expression."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .char_reader import CharReader
from .lexer import lex_char_reader
from .tokens import Token

_MISSING_LEXEME = "[NULL]"


def format_token(token: Token) -> str:
    """Render ``token`` as one line of the command's output."""
    lexeme = _MISSING_LEXEME if token.lexeme is None else token.lexeme
    return f'{{ type:"{token.type.label}", lexeme:"{lexeme}" }}'


def main(argv: Sequence[str] | None = None) -> int:
    """Lex the arguments, joined by single spaces, and print each token."""
    args = list(sys.argv[1:] if argv is None else argv)

    reader = CharReader()
    for position, arg in enumerate(args):
        reader.add(arg)
        if position < len(args) - 1:
            reader.add(" ")

    for token in lex_char_reader(reader):
        print(format_token(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())