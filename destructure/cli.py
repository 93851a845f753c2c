"""Command-line entry point: rewrite destructuring in a JavaScript file."""

from __future__ import annotations

import argparse
import logging
import sys

from . import constants
from .api import lower_source_declarations, transform_source
from .config import LoweringConfig
from .ir import PatternError
from .parser import SourceSyntaxError
from .render import dump_assignments

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="destructure",
        description="Lower JavaScript destructuring patterns into plain assignments",
    )
    parser.add_argument("file", nargs="?", help="Source file (default: stdin)")
    parser.add_argument("--output", "-o", default=None,
                        help="Write the result here instead of stdout")
    parser.add_argument("--ops", action="store_true",
                        help="Print the lowered assignments of each site instead")
    parser.add_argument("--temp-prefix", default=constants.TEMP_PREFIX,
                        help=f"Prefix for cached temporaries (default: {constants.TEMP_PREFIX})")
    parser.add_argument("--param-prefix", default=constants.PARAM_PREFIX,
                        help=f"Prefix for parameter placeholders (default: {constants.PARAM_PREFIX})")
    parser.add_argument("--keyword", default=constants.DECLARATION_KEYWORD,
                        help="Keyword of the injected preamble declaration (default: var)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log lowering decisions")
    return parser


def _render_ops(source: str, config: LoweringConfig) -> str:
    lines: list[str] = []
    for record in lower_source_declarations(source, config):
        lines.append(f"{record.kind} @ {record.source_location}")
        if record.assignments:
            lines.append(dump_assignments(record.assignments))
    return "\n".join(lines) + ("\n" if lines else "")


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()
    else:
        source = sys.stdin.read()

    config = LoweringConfig(
        temp_prefix=args.temp_prefix,
        param_prefix=args.param_prefix,
        declaration_keyword=args.keyword,
    )
    try:
        result = _render_ops(source, config) if args.ops else transform_source(source, config)
    except (PatternError, SourceSyntaxError) as exc:
        logger.error("%s", exc)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
