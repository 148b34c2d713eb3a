"""
Parser building the source syntax tree from tokens.

The grammar is LL(1) on token kind, so one shared cursor and a single token of
lookahead are enough; the parser never backtracks. Calls that are still
waiting for their closing paren are kept on an explicit stack rather than on
the Python call stack, so nesting depth is bounded only by memory.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from errors import ParseError
from lexer import Token, TokenKind

from .nodes import CallExpression, Expression, NumberLiteral, Program, StringLiteral

logger = logging.getLogger(__name__)


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._current = 0
        self._open_calls: List[CallExpression] = []

    def _peek(self) -> Token:
        if self._current >= len(self._tokens):
            raise ParseError("Unexpected end of input", token=None, index=self._current)
        return self._tokens[self._current]

    def _advance(self) -> Token:
        token = self._peek()
        self._current += 1
        return token

    def _attach(self, program: Program, node: Expression) -> None:
        if self._open_calls:
            self._open_calls[-1].params.append(node)
        else:
            program.body.append(node)

    def parse_program(self) -> Program:
        program = Program()
        while self._current < len(self._tokens):
            self._step(program)
        if self._open_calls:
            raise ParseError("Unexpected end of input", token=None, index=self._current)
        return program

    def _step(self, program: Program) -> None:
        token = self._peek()

        if token.kind is TokenKind.NUMBER:
            self._advance()
            self._attach(program, NumberLiteral(value=token.text))
            return

        if token.kind is TokenKind.STRING:
            self._advance()
            self._attach(program, StringLiteral(value=token.text))
            return

        if token.kind is TokenKind.LEFT_PAREN:
            self._open_call(program)
            return

        if token.kind is TokenKind.RIGHT_PAREN and self._open_calls:
            self._advance()
            self._open_calls.pop()
            return

        raise ParseError(
            f"Unexpected {token.kind.value} token {token.text!r}",
            token=token,
            index=self._current,
        )

    def _open_call(self, program: Program) -> None:
        self._advance()  # (
        callee = self._peek()
        if callee.kind is not TokenKind.NAME:
            raise ParseError(
                f"Expected Name after '(' but found {callee.kind.value} {callee.text!r}",
                token=callee,
                index=self._current,
            )
        self._advance()

        node = CallExpression(name=callee.text)
        self._attach(program, node)
        self._open_calls.append(node)


def parse(tokens: Sequence[Token]) -> Program:
    """
    Build a `Program` from a token sequence.

    Raises:
        ParseError: When a token is invalid at its grammar position or the
            tokens run out inside an unfinished call.
    """
    program = _Parser(tokens).parse_program()
    logger.debug("Parsed %d top-level expressions", len(program.body))
    return program


__all__ = ["parse"]
