"""
Turn raw s-expression source into a flat list of tokens.

The scan is a single left-to-right pass with one cursor. At each position the
character is tested against the token classes in a fixed priority order:
parentheses, whitespace, digits, string quotes, then letters. Multi-character
tokens are consumed greedily.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import List

from errors import LexError

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_QUOTE = '"'


class TokenKind(str, Enum):
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    NUMBER = "Number"
    STRING = "String"
    NAME = "Name"


@dataclass(frozen=True)
class Token:
    """A single lexical unit: its kind plus the literal text it was built from."""

    kind: TokenKind
    text: str


def _consume_run(source: str, start: int, alphabet: frozenset) -> int:
    """Return the index just past the maximal run of `alphabet` at `start`."""
    end = start
    while end < len(source) and source[end] in alphabet:
        end += 1
    return end


def tokenize(source: str) -> List[Token]:
    """
    Scan `source` and return its tokens in order.

    String literals run to the next double quote; there are no escape
    sequences.

    Raises:
        LexError: On a character matching no token class, or when a string
            literal has no closing quote.
    """
    tokens: List[Token] = []
    current = 0

    while current < len(source):
        char = source[current]

        if char == "(":
            tokens.append(Token(TokenKind.LEFT_PAREN, char))
            current += 1
            continue

        if char == ")":
            tokens.append(Token(TokenKind.RIGHT_PAREN, char))
            current += 1
            continue

        if char.isspace():
            current += 1
            continue

        if char in _DIGITS:
            end = _consume_run(source, current, _DIGITS)
            tokens.append(Token(TokenKind.NUMBER, source[current:end]))
            current = end
            continue

        if char == _QUOTE:
            closing = source.find(_QUOTE, current + 1)
            if closing == -1:
                raise LexError(char, current, "Unterminated string literal")
            tokens.append(Token(TokenKind.STRING, source[current + 1 : closing]))
            current = closing + 1
            continue

        if char in _LETTERS:
            end = _consume_run(source, current, _LETTERS)
            tokens.append(Token(TokenKind.NAME, source[current:end]))
            current = end
            continue

        raise LexError(char, current)

    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


__all__ = ["Token", "TokenKind", "tokenize"]
