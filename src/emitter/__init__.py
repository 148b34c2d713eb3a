"""Code generation from the target syntax tree."""

from errors import GenError

from .writer import EmitOptions, EmitResult, emit_program, generate

__all__ = ["EmitOptions", "EmitResult", "GenError", "emit_program", "generate"]
