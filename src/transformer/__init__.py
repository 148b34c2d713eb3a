"""S-expression tree to C-like tree transformation."""

from . import nodes
from .core import Transformer, transform

__all__ = ["Transformer", "nodes", "transform"]
