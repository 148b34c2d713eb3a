"""
Source-level syntax tree for the s-expression language.

Each node class exposes its tag as the class attribute `kind`; walkers dispatch
on that string rather than on the Python type.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, ClassVar, Dict, List, Union


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
    """A parenthesized call: the callee name followed by its parameters."""

    kind: ClassVar[str] = "CallExpression"

    name: str
    params: List["Expression"] = field(default_factory=list)


Expression = Union[NumberLiteral, StringLiteral, CallExpression]


@dataclass
class Program:
    """Root of the source tree holding the top-level expressions in order."""

    kind: ClassVar[str] = "Program"

    body: List[Expression] = field(default_factory=list)


def node_to_dict(node: Any) -> Any:
    """Convert a tree of dataclass nodes into JSON-compatible dictionaries."""
    if isinstance(node, list):
        return [node_to_dict(item) for item in node]
    if not is_dataclass(node):
        return node
    payload: Dict[str, Any] = {"type": node.kind}
    for item in fields(node):
        payload[item.name] = node_to_dict(getattr(node, item.name))
    return payload


__all__ = [
    "CallExpression",
    "Expression",
    "NumberLiteral",
    "Program",
    "StringLiteral",
    "node_to_dict",
]
