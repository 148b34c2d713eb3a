"""Parsing of s-expression tokens into the source syntax tree."""

from errors import ParseError

from .nodes import (
    CallExpression,
    Expression,
    NumberLiteral,
    Program,
    StringLiteral,
    node_to_dict,
)
from .sexpr_parser import parse

__all__ = [
    "CallExpression",
    "Expression",
    "NumberLiteral",
    "ParseError",
    "Program",
    "StringLiteral",
    "node_to_dict",
    "parse",
]
