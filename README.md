# exprlex

`exprlex` splits arithmetic expressions into tokens. It has no
dependencies beyond the standard library and needs Python 3.10 or later.

Recognised tokens:

| Kind         | Text                                                    |
|--------------|---------------------------------------------------------|
| `NUMBER`     | digits with an optional `.` and fraction: `12`, `1.5`, `.3`, `.` |
| `IDENTIFIER` | a letter or `_`, then letters, digits or `_`: `x`, `foo123` |
| `PLUS` `MINUS` `MULTIPLY` `DIVIDE` `MODULO` | `+ - * / %`              |
| `POWER`      | `^` or `**`                                             |
| `EXPONENT`   | `e` or `E` straight after a number, when not followed by a name character, whitespace, end of input or one of `/ % * ^ ) ] }` |
| `LPAREN` `RPAREN` `LBRACKET` `RBRACKET` `LBRACE` `RBRACE` | `( ) [ ] { }` |
| `INVALID`    | any other single character                              |
| `EOI`        | end of input, always last, with no text                 |

Some consequences of these rules: `1e10` is `NUMBER 1`, `EXPONENT e`,
`NUMBER 10`; `1e` and `1efoo` give an identifier (`e`, `efoo`) after the
number; `12abc` is `NUMBER 12` then `IDENTIFIER abc`; `..` is two numbers.

## Installation

```
pip install .
```

## Command line

The arguments are joined with single spaces, lexed, and each token is
printed on its own line:

```
$ exprlex "3e-2 * (x + 1)"
{ type:"NUMBER_TOKEN", lexeme:"3" }
{ type:"EXPONENT_TOKEN", lexeme:"e" }
{ type:"MINUS_TOKEN", lexeme:"-" }
{ type:"NUMBER_TOKEN", lexeme:"2" }
{ type:"MULTIPLY_TOKEN", lexeme:"*" }
{ type:"LPAREN_TOKEN", lexeme:"(" }
{ type:"IDENTIFIER_TOKEN", lexeme:"x" }
{ type:"PLUS_TOKEN", lexeme:"+" }
{ type:"NUMBER_TOKEN", lexeme:"1" }
{ type:"RPAREN_TOKEN", lexeme:")" }
{ type:"EOI_TOKEN", lexeme:"[NULL]" }
```

The same is available as `exprlex.cli.main(argv)`, which returns `0`, and
`exprlex.cli.format_token(token)` renders a single line.

## Library

```python
from exprlex.lexer import lex
from exprlex.tokens import TokenType

tokens = lex("foo123 * . + bar")
for token in tokens:
    print(token.type.label, token.lexeme)

assert tokens[-1].type is TokenType.EOI
assert tokens[-1].lexeme is None
```

`lex` returns a `TokenList`: an immutable sequence supporting `len()`,
indexing, slicing (which gives another `TokenList`), iteration and equality.
Each `Token` is a frozen dataclass with a `type` (a `TokenType` member) and a
`lexeme` (the matched text, or `None` for the end-of-input token).
`TokenType.label` gives the display name, such as `NUMBER_TOKEN`.

Input can also be fed in pieces through a `CharReader`:

```python
from exprlex.char_reader import CharReader
from exprlex.lexer import lex_char_reader

reader = CharReader()
reader.add("1e")
reader.add("10")
tokens = lex_char_reader(reader)
# NUMBER "1", EXPONENT "e", NUMBER "10", EOI
```

`CharReader.add(text)` queues text (up to its first NUL character);
`CharReader.read()` returns the next character, or `""` when nothing is
left; iterating a reader consumes its remaining characters. Chunks run
straight into each other, so add a space between them where a token break is
wanted.

## What it does not do

`exprlex` only produces tokens. It does not parse expressions, check that
brackets balance, convert numbers or evaluate anything, and it reports
unexpected characters as `INVALID` tokens rather than raising errors.