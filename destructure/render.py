"""Text rendering of lowered assignments."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, LoweringConfig
from .ir import AssignmentOp, Identifier, Parameter, Preamble, PlainParameter


def render_assignments(ops: list[AssignmentOp]) -> str:
    """Comma-join assignments the way they appear inside one declaration."""
    return ", ".join(str(op) for op in ops)


def render_preamble(preamble: Preamble, config: LoweringConfig = DEFAULT_CONFIG) -> str:
    if not preamble.assignments:
        return ""
    return f"{config.declaration_keyword} {render_assignments(preamble.assignments)};"


def render_parameter(param: Parameter) -> str:
    if isinstance(param, PlainParameter):
        return param.text
    if isinstance(param, Identifier):
        return param.name
    raise ValueError(f"Cannot render unhoisted pattern parameter: {param!r}")


def dump_assignments(ops: list[AssignmentOp]) -> str:
    """One assignment per line, for inspection."""
    return "\n".join(f"  {op}" for op in ops)
