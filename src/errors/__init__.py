"""Error taxonomy shared by every compiler stage."""

from .core import CompileError, GenError, LexError, ParseError

__all__ = ["CompileError", "GenError", "LexError", "ParseError"]
