"""Composable API functions for destructuring lowering.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_CONFIG, LoweringConfig
from .hoisting import lower_function_signature
from .lowering import lower_declaration
from .naming import NameAllocator, reset_module_state
from .parser import Parser, TreeSitterParserFactory
from .rewriter import LoweringRecord, SourceRewriter

logger = logging.getLogger(__name__)

__all__ = [
    "transform_source",
    "transform_file",
    "lower_source_declarations",
    "lower_declaration",
    "lower_function_signature",
    "reset_module_state",
]


def _rewrite(source: str, config: LoweringConfig) -> tuple[str, SourceRewriter]:
    tree = Parser(TreeSitterParserFactory()).parse(source, config.language)
    rewriter = SourceRewriter(config, NameAllocator())
    return rewriter.rewrite(tree, source.encode("utf-8")), rewriter


def transform_source(source: str, config: LoweringConfig = DEFAULT_CONFIG) -> str:
    """Rewrite every destructuring declaration and pattern parameter in *source*.

    Each call is its own compilation unit: temporary names start from
    ``$0`` again.

    Args:
        source: JavaScript source text.
        config: Naming and emission choices.

    Returns:
        The rewritten source text.
    """
    logger.info("Transforming source (%d bytes)", len(source))
    text, _ = _rewrite(source, config)
    return text


def transform_file(path: str | Path, config: LoweringConfig = DEFAULT_CONFIG) -> str:
    """Read *path* and return its rewritten text."""
    logger.info("Transforming %s", path)
    return transform_source(Path(path).read_text(encoding="utf-8"), config)


def lower_source_declarations(
    source: str, config: LoweringConfig = DEFAULT_CONFIG
) -> list[LoweringRecord]:
    """Return what each destructuring site in *source* lowers to.

    Records come in lowering order: a declarator's initializer is lowered
    before the declarator, a function's signature before its body.
    """
    _, rewriter = _rewrite(source, config)
    return rewriter.records
