"""Pipeline entry points for compiling s-expression source."""

from .pipeline import PipelineResult, compile, compile_source, run_pipeline

__all__ = ["PipelineResult", "compile", "compile_source", "run_pipeline"]
