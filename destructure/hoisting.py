"""Parameter hoisting — move pattern parameters into a body preamble."""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, LoweringConfig
from .ir import (
    Identifier,
    IdentifierRef,
    Parameter,
    PatternBinding,
    Preamble,
    SignatureLowering,
)
from .lowering import PatternLowerer
from .naming import NameAllocator, default_allocator
from .patterns import has_pattern, is_pattern

logger = logging.getLogger(__name__)


def hoist_patterns(
    params: list[Parameter],
    allocator: NameAllocator,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> tuple[list[Parameter], list[PatternBinding]]:
    """Replace every pattern parameter with a fresh placeholder identifier.

    Returns the rewritten parameter list (same length and order) and the
    ``(pattern, placeholder)`` pairs in parameter order.
    """
    new_params: list[Parameter] = []
    bindings: list[PatternBinding] = []
    for param in params:
        if not is_pattern(param):
            new_params.append(param)
            continue
        placeholder = allocator.allocate(config.param_prefix)
        new_params.append(Identifier(name=placeholder))
        bindings.append(PatternBinding(pattern=param, placeholder=placeholder))
    return new_params, bindings


def build_preamble(
    bindings: list[PatternBinding],
    allocator: NameAllocator,
    config: LoweringConfig = DEFAULT_CONFIG,
    insert_at: int | None = None,
) -> Preamble:
    lowerer = PatternLowerer(allocator, config)
    assignments = []
    for binding in bindings:
        assignments.extend(
            lowerer.lower(binding.pattern, IdentifierRef(name=binding.placeholder))
        )
    return Preamble(assignments=assignments, insert_at=insert_at)


def lower_function_signature(
    params: list[Parameter],
    body_start: int | None = None,
    allocator: NameAllocator | None = None,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> SignatureLowering:
    """Lower the pattern parameters of one function.

    Args:
        params: The declared parameters in order.
        body_start: Host position of the body's opening brace, echoed back
            as the preamble's ``insert_at``.
        allocator: Name allocator; the process-wide one when omitted.
        config: Naming choices.

    Returns:
        The rewritten parameters and the preamble. Without pattern
        parameters the list is returned as-is and ``preamble`` is None.
    """
    if not has_pattern(params):
        return SignatureLowering(params=list(params))
    allocator = allocator or default_allocator()
    new_params, bindings = hoist_patterns(params, allocator, config)
    logger.debug(
        "Hoisted %d pattern parameter(s): %s",
        len(bindings),
        ", ".join(b.placeholder for b in bindings),
    )
    preamble = build_preamble(bindings, allocator, config, insert_at=body_start)
    return SignatureLowering(params=new_params, preamble=preamble)
