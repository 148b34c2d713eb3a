"""
Render target syntax trees as C-like source text.

Generation has one rule per node kind, looked up in a dispatch table. A rule
names the node's children and joins their rendered text. The walk keeps its
own stack, so deeply nested calls do not exhaust the Python call stack. Values
are emitted verbatim: numbers are not re-formatted and string bodies are not
escaped.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from errors import GenError

logger = logging.getLogger(__name__)

Rule = Tuple[Callable[[Any], Sequence[Any]], Callable[[Any, List[str]], str]]


def _no_children(node: Any) -> Sequence[Any]:
    return ()


def _render_call(node: Any, parts: List[str]) -> str:
    callee, *arguments = parts
    return f"{callee}({','.join(arguments)})"


_RULES: Dict[str, Rule] = {
    "Program": (lambda node: node.body, lambda node, parts: "\n".join(parts)),
    "ExpressionStatement": (lambda node: [node.expression], lambda node, parts: parts[0] + ";"),
    "CallExpression": (lambda node: [node.callee, *node.arguments], _render_call),
    "Identifier": (_no_children, lambda node, parts: node.name),
    "NumberLiteral": (_no_children, lambda node, parts: node.value),
    "StringLiteral": (_no_children, lambda node, parts: f'"{node.value}"'),
}


def _rule_for(node: Any) -> Rule:
    kind = getattr(node, "kind", None)
    rule = _RULES.get(kind) if kind is not None else None
    if rule is None:
        raise GenError(kind if kind is not None else type(node).__name__)
    return rule


def generate(node: Any) -> str:
    """
    Render `node` and its subtree.

    Raises:
        GenError: If a node kind has no generation rule.
    """
    rendered: List[str] = []
    # Frames are (node, child count, rule); a count of None means the node's
    # children have not been scheduled yet.
    stack: List[Tuple[Any, Any, Rule]] = [(node, None, _rule_for(node))]
    while stack:
        current, count, rule = stack.pop()
        child_getter, render = rule

        if count is None:
            kids = list(child_getter(current))
            stack.append((current, len(kids), rule))
            stack.extend((child, None, _rule_for(child)) for child in reversed(kids))
            continue

        parts = rendered[len(rendered) - count :]
        del rendered[len(rendered) - count :]
        rendered.append(render(current, parts))

    return rendered[0]


@dataclass(frozen=True)
class EmitOptions:
    trailing_newline: bool = False


@dataclass(frozen=True)
class EmitResult:
    source: str


def emit_program(program: Any, options: EmitOptions | None = None) -> EmitResult:
    """
    Render a target `Program` to output text, ready for writing to disk.
    """
    options = options or EmitOptions()

    buffer = io.StringIO()
    buffer.write(generate(program))
    if options.trailing_newline and buffer.tell():
        buffer.write("\n")

    source = buffer.getvalue()
    logger.debug("Emitted %d characters", len(source))
    return EmitResult(source=source)


__all__ = ["EmitOptions", "EmitResult", "emit_program", "generate"]
