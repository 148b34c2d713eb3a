"""
Typed failures raised by the compiler stages.

Every stage fails fast: the first error aborts the pipeline and reaches the
caller as one of the subclasses below, carrying the offending character,
token or node kind as attributes so drivers can format their own diagnostics.
"""

from __future__ import annotations

from typing import Any, Optional


class CompileError(RuntimeError):
    """Base class for all failures raised while compiling a source string."""


class LexError(CompileError):
    """Raised when the tokenizer meets a character it cannot classify."""

    def __init__(self, char: str, offset: int, message: Optional[str] = None):
        message = message or f"Unrecognized character {char!r}"
        super().__init__(f"{message} (offset {offset})")
        self.char = char
        self.offset = offset


class ParseError(CompileError):
    """Raised when a token is invalid at the current grammar position."""

    def __init__(self, message: str, token: Any = None, index: Optional[int] = None):
        loc = ""
        if index is not None:
            loc = f" (token {index})"
        super().__init__(f"{message}{loc}")
        self.token = token
        self.index = index


class GenError(CompileError):
    """Raised when a tree walker meets a node kind it does not know."""

    def __init__(self, kind: Any, message: Optional[str] = None):
        super().__init__(message or f"Unsupported node kind: {kind}")
        self.kind = kind


__all__ = ["CompileError", "LexError", "ParseError", "GenError"]
