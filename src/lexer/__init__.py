"""Lexical analysis for s-expression source text."""

from errors import LexError

from .tokenizer import Token, TokenKind, tokenize

__all__ = ["LexError", "Token", "TokenKind", "tokenize"]
