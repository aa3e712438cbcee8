"""A state-machine lexer for arithmetic expressions."""

from __future__ import annotations

from enum import Enum, auto

from .char_reader import CharReader
from .tokens import Token, TokenList, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_IDENTIFIER_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_"
)
_EXPONENT_CHARS = frozenset("eE")
# Characters that, right after a potential exponent, make the 'e' a name.
_AFTER_EXPONENT_NAME = frozenset("/%*^)]}")


class _State(Enum):
    START = auto()
    NUMBER = auto()
    DECIMAL = auto()
    IDENTIFIER = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()
    POWER = auto()
    POTENTIAL_EXPONENT = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LBRACE = auto()
    RBRACE = auto()


_SYMBOL_STATES = {
    "+": _State.PLUS,
    "-": _State.MINUS,
    "*": _State.MULTIPLY,
    "/": _State.DIVIDE,
    "%": _State.MODULO,
    "^": _State.POWER,
    "(": _State.LPAREN,
    ")": _State.RPAREN,
    "[": _State.LBRACKET,
    "]": _State.RBRACKET,
    "{": _State.LBRACE,
    "}": _State.RBRACE,
}

# States whose token is complete as soon as the next character arrives.
_SINGLE_CHAR_TOKENS = {
    _State.PLUS: TokenType.PLUS,
    _State.MINUS: TokenType.MINUS,
    _State.DIVIDE: TokenType.DIVIDE,
    _State.MODULO: TokenType.MODULO,
    _State.POWER: TokenType.POWER,
    _State.LPAREN: TokenType.LPAREN,
    _State.RPAREN: TokenType.RPAREN,
    _State.LBRACKET: TokenType.LBRACKET,
    _State.RBRACKET: TokenType.RBRACKET,
    _State.LBRACE: TokenType.LBRACE,
    _State.RBRACE: TokenType.RBRACE,
}


class _Lexer:
    """Accumulates tokens as characters are fed to it one by one."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self._lexeme: list[str] = []
        self._state = _State.START

    def feed(self, char: str) -> None:
        self._state = self._step(self._state, char)

    def finish(self) -> TokenList:
        self._state = self._step(self._state, " ")
        self.tokens.append(Token(TokenType.EOI, None))
        return TokenList(self.tokens)

    def _cut(self, token_type: TokenType) -> None:
        self.tokens.append(Token(token_type, "".join(self._lexeme)))
        self._lexeme.clear()

    def _begin(self, char: str, *, after_number: bool = False) -> _State:
        """Start a new lexeme with ``char`` and return the state it leads to."""
        self._lexeme.append(char)
        if char == ".":
            return _State.DECIMAL
        if char in _DIGITS:
            return _State.NUMBER
        if char in _IDENTIFIER_CHARS:
            if after_number and char in _EXPONENT_CHARS:
                return _State.POTENTIAL_EXPONENT
            return _State.IDENTIFIER
        state = _SYMBOL_STATES.get(char)
        if state is not None:
            return state
        self._cut(TokenType.INVALID)
        return _State.START

    def _step(self, state: _State, char: str) -> _State:
        is_space = char in _WHITESPACE

        if state is _State.START:
            return _State.START if is_space else self._begin(char)

        if state is _State.NUMBER:
            if is_space:
                self._cut(TokenType.NUMBER)
                return _State.START
            if char == ".":
                self._lexeme.append(char)
                return _State.DECIMAL
            if char in _DIGITS:
                self._lexeme.append(char)
                return _State.NUMBER
            self._cut(TokenType.NUMBER)
            return self._begin(char, after_number=True)

        if state is _State.DECIMAL:
            if is_space:
                self._cut(TokenType.NUMBER)
                return _State.START
            if char in _DIGITS:
                self._lexeme.append(char)
                return _State.DECIMAL
            self._cut(TokenType.NUMBER)
            return self._begin(char, after_number=True)

        if state is _State.IDENTIFIER:
            if is_space:
                self._cut(TokenType.IDENTIFIER)
                return _State.START
            if char in _DIGITS or char in _IDENTIFIER_CHARS:
                self._lexeme.append(char)
                return _State.IDENTIFIER
            self._cut(TokenType.IDENTIFIER)
            return self._begin(char)

        if state is _State.MULTIPLY:
            if is_space:
                self._cut(TokenType.MULTIPLY)
                return _State.START
            if char == "*":
                self._lexeme.append(char)
                return _State.POWER
            self._cut(TokenType.MULTIPLY)
            return self._begin(char)

        if state is _State.POTENTIAL_EXPONENT:
            if is_space:
                self._cut(TokenType.IDENTIFIER)
                return _State.START
            if char in _IDENTIFIER_CHARS:
                self._lexeme.append(char)
                return _State.IDENTIFIER
            if char in _AFTER_EXPONENT_NAME:
                self._cut(TokenType.IDENTIFIER)
                return self._begin(char)
            self._cut(TokenType.EXPONENT)
            return self._begin(char)

        self._cut(_SINGLE_CHAR_TOKENS[state])
        return _State.START if is_space else self._begin(char)


def lex_char_reader(reader: CharReader) -> TokenList:
    """Consume every character of ``reader`` and return the tokens found.

    The result always ends with an end-of-input token whose lexeme is ``None``.
    """
    lexer = _Lexer()
    for char in reader:
        lexer.feed(char)
    return lexer.finish()


def lex(text: str) -> TokenList:
    """Tokenise ``text`` and return the tokens found."""
    reader = CharReader()
    reader.add(text)
    return lex_char_reader(reader)