"""Tokenizer for arithmetic expressions: character reader, token types, lexer and command line."""

__version__ = "0.1.0"