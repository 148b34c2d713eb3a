"""
Target syntax tree shaped after C-like call expressions and statements.

Node kinds reuse the source tree's names where the concept is the same
(`Program`, `CallExpression`, literals) so both trees read alike in dumps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Union


@dataclass
class Identifier:
    kind: ClassVar[str] = "Identifier"

    name: str


@dataclass
class NumberLiteral:
    kind: ClassVar[str] = "NumberLiteral"

    value: str


@dataclass
class StringLiteral:
    kind: ClassVar[str] = "StringLiteral"

    value: str


@dataclass
class CallExpression:
    kind: ClassVar[str] = "CallExpression"

    callee: Identifier
    arguments: List["Expression"] = field(default_factory=list)


Expression = Union[CallExpression, Identifier, NumberLiteral, StringLiteral]


@dataclass
class ExpressionStatement:
    """A top-level call, rendered with a terminating semicolon."""

    kind: ClassVar[str] = "ExpressionStatement"

    expression: Expression


Statement = Union[ExpressionStatement, CallExpression, NumberLiteral, StringLiteral]


@dataclass
class Program:
    kind: ClassVar[str] = "Program"

    body: List[Statement] = field(default_factory=list)


__all__ = [
    "CallExpression",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "NumberLiteral",
    "Program",
    "Statement",
    "StringLiteral",
]
