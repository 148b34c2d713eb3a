"""
Rewrite the source s-expression tree into the C-like target tree.

The rewrite is a single top-down pass driven by the generic traverser. When a
node is entered, the transformer builds the matching target node and appends
it to the list its parent left open for it. A call then opens its own
`arguments` list for its children.

Open lists live in a scratch table keyed by source node identity. The table
belongs to one `Transformer` run; entries are dropped when the walk exits their
node, so nothing is written onto the source tree and nothing outlives the
call.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import parser as source
from errors import GenError
from traverser import Visitor, VisitorMethods, traverse

from . import nodes as target

logger = logging.getLogger(__name__)


class Transformer:
    """Visitor building a target `Program` from a source `Program`."""

    def __init__(self) -> None:
        self._open_lists: Dict[int, List[Any]] = {}

    # ------------------------------------------------------------------ helpers

    def _open(self, node: Any, children: List[Any]) -> None:
        self._open_lists[id(node)] = children

    def _close(self, node: Any, parent: Optional[Any]) -> None:
        self._open_lists.pop(id(node), None)

    def _append_to_parent(self, parent: Any, built: Any) -> None:
        self._open_lists[id(parent)].append(built)

    @property
    def visitor(self) -> Visitor:
        return {
            "NumberLiteral": VisitorMethods(enter=self._enter_NumberLiteral),
            "StringLiteral": VisitorMethods(enter=self._enter_StringLiteral),
            "CallExpression": VisitorMethods(
                enter=self._enter_CallExpression, exit=self._close
            ),
        }

    # ------------------------------------------------------------ node builders

    @staticmethod
    def build_call(node: source.CallExpression) -> Tuple[target.CallExpression, List[Any]]:
        """Return the target call for `node` plus the list its arguments go into."""
        call = target.CallExpression(callee=target.Identifier(name=node.name))
        return call, call.arguments

    def _enter_NumberLiteral(self, node: source.NumberLiteral, parent: Any) -> None:
        self._append_to_parent(parent, target.NumberLiteral(value=node.value))

    def _enter_StringLiteral(self, node: source.StringLiteral, parent: Any) -> None:
        self._append_to_parent(parent, target.StringLiteral(value=node.value))

    def _enter_CallExpression(self, node: source.CallExpression, parent: Any) -> None:
        call, arguments = self.build_call(node)
        if parent is not None and parent.kind == "CallExpression":
            self._append_to_parent(parent, call)
        else:
            self._append_to_parent(parent, target.ExpressionStatement(expression=call))
        self._open(node, arguments)

    # ---------------------------------------------------------------- entry

    def transform_program(self, program: source.Program) -> target.Program:
        if getattr(program, "kind", None) != "Program":
            raise GenError(
                getattr(program, "kind", type(program).__name__),
                "Expected Program node at the root.",
            )
        result = target.Program()
        self._open(program, result.body)
        try:
            traverse(program, self.visitor)
        finally:
            self._open_lists.clear()
        logger.debug("Transformed %d top-level statements", len(result.body))
        return result


def transform(program: source.Program) -> target.Program:
    """Build the target tree for `program` with a fresh transformer."""
    return Transformer().transform_program(program)


__all__ = ["Transformer", "transform"]
