"""Generic visitor-driven depth-first tree walking."""

from .walker import SOURCE_CHILDREN, Callback, Visitor, VisitorMethods, traverse

__all__ = ["SOURCE_CHILDREN", "Callback", "Visitor", "VisitorMethods", "traverse"]
