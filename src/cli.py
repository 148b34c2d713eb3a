"""
Command-line interface for compiling s-expression programs to C-like calls.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from emitter import EmitOptions, emit_program
from errors import CompileError
from frontend import PipelineResult, run_pipeline

logger = logging.getLogger(__name__)


def _init_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _render(args: argparse.Namespace, result: PipelineResult) -> str:
    if args.emit == "tokens":
        return result.tokens_to_json() + "\n"
    if args.emit == "ast":
        return result.ast_to_json() + "\n"
    return emit_program(result.target_ast, EmitOptions(trailing_newline=True)).source


def _read_source(args: argparse.Namespace) -> tuple[str, str] | None:
    if args.expr is not None:
        return args.expr, "<expr>"

    input_path = Path(args.input).resolve()
    if not input_path.exists():
        sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
        return None
    try:
        return input_path.read_text(encoding="utf-8"), str(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
        return None


def compile_command(args: argparse.Namespace) -> int:
    if args.expr is None and args.input is None:
        sys.stderr.write("ERROR: Provide an input file or --expr.\n")
        return 1
    if args.expr is not None and args.input is not None:
        sys.stderr.write("ERROR: Pass either an input file or --expr, not both.\n")
        return 1

    loaded = _read_source(args)
    if loaded is None:
        return 1
    source, source_name = loaded

    result = run_pipeline(source, source_name=source_name)
    if not result.ok:
        sys.stderr.write(f"ERROR {source_name}: {result.error}\n")
        return 1

    try:
        text = _render(args, result)
    except CompileError as exc:
        sys.stderr.write(f"ERROR {source_name}: {exc}\n")
        return 1

    if args.out:
        output_path = Path(args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", output_path)
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lisp2c", description="Compile s-expression calls to C-like call statements"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging for every compiler stage.",
    )
    subparsers = parser.add_subparsers(dest="command")

    compile_parser = subparsers.add_parser("compile", help="Compile a single source file")
    compile_parser.add_argument("input", nargs="?", help="Path to the s-expression source file")
    compile_parser.add_argument(
        "-e",
        "--expr",
        help="Compile the given source text instead of reading a file.",
    )
    compile_parser.add_argument(
        "--out",
        help="Output file path (defaults to stdout)",
    )
    compile_parser.add_argument(
        "--emit",
        choices=["code", "tokens", "ast"],
        default="code",
        help="Write generated code, or dump the tokens / source tree as JSON.",
    )
    compile_parser.set_defaults(func=compile_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _init_logging(args.verbose)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
