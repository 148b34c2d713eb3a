"""
Depth-first walker that drives caller-supplied visitors over a node tree.

A visitor maps a node kind to an optional pair of callbacks. `enter` runs
before the node's children are walked and `exit` after; kinds missing from the
visitor are walked silently. The walker knows nothing about what the callbacks
compute, so the same engine serves tree-to-tree rewrites and side-effect passes.

Which children a kind has is looked up in a child table. The default table
describes the source tree produced by the parser; other trees can be walked by
passing their own table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from errors import GenError

logger = logging.getLogger(__name__)

Callback = Callable[[Any, Optional[Any]], None]


@dataclass(frozen=True)
class VisitorMethods:
    enter: Optional[Callback] = None
    exit: Optional[Callback] = None


Visitor = Mapping[str, VisitorMethods]
ChildTable = Mapping[str, Callable[[Any], Sequence[Any]]]


def _no_children(node: Any) -> Sequence[Any]:
    return ()


SOURCE_CHILDREN: ChildTable = {
    "Program": lambda node: node.body,
    "CallExpression": lambda node: node.params,
    "NumberLiteral": _no_children,
    "StringLiteral": _no_children,
}


def traverse(root: Any, visitor: Visitor, *, children: ChildTable = SOURCE_CHILDREN) -> None:
    """
    Walk `root` depth-first, invoking the visitor's callbacks on every node.

    Args:
        root: Tree root; its callbacks receive `None` as the parent.
        visitor: Mapping from node kind to `VisitorMethods`.
        children: Mapping from node kind to a function returning the node's
            children in walk order.

    Raises:
        GenError: If a node's kind is missing from `children`.
    """
    logger.debug("Traversing tree rooted at %s", getattr(root, "kind", root))

    # Frames are (node, parent, exiting); an exit frame sits below the frames
    # of its node's children so it pops after the whole subtree.
    stack: List[Tuple[Any, Optional[Any], bool]] = [(root, None, False)]
    while stack:
        node, parent, exiting = stack.pop()

        if exiting:
            methods = visitor.get(node.kind)
            if methods is not None and methods.exit is not None:
                methods.exit(node, parent)
            continue

        kind = getattr(node, "kind", None)
        child_getter = children.get(kind) if kind is not None else None
        if child_getter is None:
            raise GenError(kind if kind is not None else type(node).__name__)

        methods = visitor.get(kind)
        if methods is not None and methods.enter is not None:
            methods.enter(node, parent)

        stack.append((node, parent, True))
        stack.extend((child, node, False) for child in reversed(list(child_getter(node))))


__all__ = ["Callback", "ChildTable", "SOURCE_CHILDREN", "Visitor", "VisitorMethods", "traverse"]
