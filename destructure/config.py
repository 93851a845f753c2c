"""Lowering configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class LoweringConfig:
    """Groups the naming and emission choices of one lowering run."""

    temp_prefix: str = constants.TEMP_PREFIX
    param_prefix: str = constants.PARAM_PREFIX
    declaration_keyword: str = constants.DECLARATION_KEYWORD
    language: str = constants.DEFAULT_LANGUAGE


DEFAULT_CONFIG = LoweringConfig()
