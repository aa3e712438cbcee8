import pytest

from exprlex.char_reader import CharReader
from exprlex.lexer import lex, lex_char_reader
from exprlex.tokens import Token, TokenList, TokenType

T = TokenType
EOI = (T.EOI, None)


def _pairs(tokens):
    return [(token.type, token.lexeme) for token in tokens]


def _lex_via_reader(text):
    reader = CharReader()
    reader.add(text)
    return lex_char_reader(reader)


SOURCE_CASES = [
    ("1 + 2", [(T.NUMBER, "1"), (T.PLUS, "+"), (T.NUMBER, "2"), EOI]),
    (" . ", [(T.NUMBER, "."), EOI]),
    (
        "foo123 * . + bar",
        [
            (T.IDENTIFIER, "foo123"),
            (T.MULTIPLY, "*"),
            (T.NUMBER, "."),
            (T.PLUS, "+"),
            (T.IDENTIFIER, "bar"),
            EOI,
        ],
    ),
    ("1e10", [(T.NUMBER, "1"), (T.EXPONENT, "e"), (T.NUMBER, "10"), EOI]),
    ("1$2", [(T.NUMBER, "1"), (T.INVALID, "$"), (T.NUMBER, "2"), EOI]),
    (
        "({[x]})",
        [
            (T.LPAREN, "("),
            (T.LBRACE, "{"),
            (T.LBRACKET, "["),
            (T.IDENTIFIER, "x"),
            (T.RBRACKET, "]"),
            (T.RBRACE, "}"),
            (T.RPAREN, ")"),
            EOI,
        ],
    ),
    ("", [EOI]),
    ("**", [(T.POWER, "**"), EOI]),
    ("12abc", [(T.NUMBER, "12"), (T.IDENTIFIER, "abc"), EOI]),
    (
        "3e-2",
        [(T.NUMBER, "3"), (T.EXPONENT, "e"), (T.MINUS, "-"), (T.NUMBER, "2"), EOI],
    ),
    ("1e+", [(T.NUMBER, "1"), (T.EXPONENT, "e"), (T.PLUS, "+"), EOI]),
    ("1e", [(T.NUMBER, "1"), (T.IDENTIFIER, "e"), EOI]),
    ("1efoo", [(T.NUMBER, "1"), (T.IDENTIFIER, "efoo"), EOI]),
    ("1eE2", [(T.NUMBER, "1"), (T.IDENTIFIER, "eE2"), EOI]),
    ("e2", [(T.IDENTIFIER, "e2"), EOI]),
    ("e", [(T.IDENTIFIER, "e"), EOI]),
    ("   \t\n", [EOI]),
    ("..", [(T.NUMBER, "."), (T.NUMBER, "."), EOI]),
]


@pytest.mark.parametrize(("text", "expected"), SOURCE_CASES)
def test_source_cases_via_reader(text, expected):
    assert _pairs(_lex_via_reader(text)) == expected


@pytest.mark.parametrize(("text", "expected"), SOURCE_CASES)
def test_source_cases_via_lex(text, expected):
    assert _pairs(lex(text)) == expected


EXTRA_CASES = [
    ("2**3", [(T.NUMBER, "2"), (T.POWER, "**"), (T.NUMBER, "3"), EOI]),
    ("***", [(T.POWER, "**"), (T.MULTIPLY, "*"), EOI]),
    (
        "1e*2",
        [(T.NUMBER, "1"), (T.IDENTIFIER, "e"), (T.MULTIPLY, "*"), (T.NUMBER, "2"), EOI],
    ),
    ("1e)", [(T.NUMBER, "1"), (T.IDENTIFIER, "e"), (T.RPAREN, ")"), EOI]),
    ("1e(", [(T.NUMBER, "1"), (T.EXPONENT, "e"), (T.LPAREN, "("), EOI]),
    ("1e$", [(T.NUMBER, "1"), (T.EXPONENT, "e"), (T.INVALID, "$"), EOI]),
    (
        "1.5e3",
        [(T.NUMBER, "1.5"), (T.EXPONENT, "e"), (T.NUMBER, "3"), EOI],
    ),
    ("a.b", [(T.IDENTIFIER, "a"), (T.NUMBER, "."), (T.IDENTIFIER, "b"), EOI]),
    ("1 e", [(T.NUMBER, "1"), (T.IDENTIFIER, "e"), EOI]),
    (
        "x^-y",
        [(T.IDENTIFIER, "x"), (T.POWER, "^"), (T.MINUS, "-"), (T.IDENTIFIER, "y"), EOI],
    ),
    (
        "10 % 3 / 2",
        [
            (T.NUMBER, "10"),
            (T.MODULO, "%"),
            (T.NUMBER, "3"),
            (T.DIVIDE, "/"),
            (T.NUMBER, "2"),
            EOI,
        ],
    ),
    ("\u00e9", [(T.INVALID, "\u00e9"), EOI]),
    ("\v\f\r", [EOI]),
    ("1\x002", [(T.NUMBER, "1"), EOI]),
]


@pytest.mark.parametrize(("text", "expected"), EXTRA_CASES)
def test_extra_cases(text, expected):
    assert _pairs(lex(text)) == expected


def test_result_is_token_list_of_tokens():
    tokens = lex("a + 1")
    assert tokens == TokenList(
        [
            Token(T.IDENTIFIER, "a"),
            Token(T.PLUS, "+"),
            Token(T.NUMBER, "1"),
            Token(T.EOI, None),
        ]
    )


def test_chunks_are_joined_without_separator():
    reader = CharReader()
    reader.add("1")
    reader.add("2")
    reader.add(" + x")
    assert _pairs(lex_char_reader(reader)) == [
        (T.NUMBER, "12"),
        (T.PLUS, "+"),
        (T.IDENTIFIER, "x"),
        EOI,
    ]


def test_reader_is_consumed():
    reader = CharReader()
    reader.add("1 + 2")
    lex_char_reader(reader)
    assert reader.read() == ""


def test_empty_reader_gives_only_end_token():
    assert _pairs(lex_char_reader(CharReader())) == [EOI]


@pytest.mark.parametrize("text", ["", "1+2", "foo $ bar", "({[", "1e-3 ** x"])
def test_last_token_is_end_of_input_only_once(text):
    tokens = lex(text)
    assert tokens[-1] == Token(T.EOI, None)
    assert [token.type for token in tokens].count(T.EOI) == 1


@pytest.mark.parametrize("text", ["1 + 2", "foo123*bar", "(x) [y] {z}", "3.5 % 2"])
def test_lexemes_rebuild_input_without_whitespace(text):
    tokens = lex(text)
    rebuilt = "".join(token.lexeme for token in tokens if token.lexeme is not None)
    assert rebuilt == "".join(text.split())


def test_lex_rejects_non_string():
    with pytest.raises(TypeError):
        lex(42)