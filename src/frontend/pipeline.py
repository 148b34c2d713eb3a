"""
Pipeline glue stitching the compiler stages together.

`compile` runs tokenize -> parse -> transform -> generate and lets the first
`CompileError` propagate. `run_pipeline` runs the same stages but returns a
`PipelineResult` holding every intermediate artefact, or the error that stopped
the run; stages after a failure are skipped. Drivers that want to inspect
tokens or trees use the latter.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List, Optional

import parser as sexpr
from emitter import generate
from errors import CompileError, GenError
from lexer import Token, tokenize
from parser import parse
from transformer import nodes as cnodes
from transformer import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Combined output from one run of the compiler pipeline."""

    source_name: str
    tokens: Optional[List[Token]] = None
    source_ast: Optional[sexpr.Program] = None
    target_ast: Optional[cnodes.Program] = None
    output: Optional[str] = None
    error: Optional[CompileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def tokens_to_json(self) -> str:
        """Serialise the token list to JSON for debugging."""
        payload = [{"kind": token.kind.value, "text": token.text} for token in self.tokens or []]
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def ast_to_json(self) -> str:
        """
        Serialise the source tree to JSON for debugging.

        Raises:
            GenError: If the tree is nested too deeply for the JSON encoder.
        """
        try:
            return json.dumps(sexpr.node_to_dict(self.source_ast), ensure_ascii=False, indent=2)
        except RecursionError as exc:
            raise GenError("Program", "Source tree is nested too deeply to dump as JSON") from exc


def compile_source(source: str) -> str:
    """
    Translate s-expression source into C-like call statements.

    Raises:
        LexError, ParseError, GenError: The first failure met by any stage.
    """
    tokens = tokenize(source)
    program = parse(tokens)
    target = transform(program)
    return generate(target)


compile = compile_source  # noqa: A001


def run_pipeline(source: str, *, source_name: str = "<input>") -> PipelineResult:
    """
    Run every stage on `source` and collect the results.

    Args:
        source: Raw s-expression source text.
        source_name: Identifier used in diagnostics, e.g. file path.

    Returns:
        PipelineResult with the artefacts of each completed stage and, on
        failure, the error that stopped the run.
    """
    tokens: Optional[List[Token]] = None
    program: Optional[sexpr.Program] = None
    target: Optional[cnodes.Program] = None
    try:
        tokens = tokenize(source)
        program = parse(tokens)
        target = transform(program)
        output = generate(target)
    except CompileError as exc:
        logger.debug("Compilation of %s failed: %s", source_name, exc)
        return PipelineResult(
            source_name=source_name,
            tokens=tokens,
            source_ast=program,
            target_ast=target,
            error=exc,
        )

    return PipelineResult(
        source_name=source_name,
        tokens=tokens,
        source_ast=program,
        target_ast=target,
        output=output,
    )


__all__ = ["PipelineResult", "compile", "compile_source", "run_pipeline"]
