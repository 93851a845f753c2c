"""Expression memoization — cache effectful sources in a temporary."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import DEFAULT_CONFIG, LoweringConfig
from .ir import AssignmentOp, Fragment, IdentifierRef, SourceExpression
from .naming import NameAllocator

logger = logging.getLogger(__name__)


@dataclass
class Memoized:
    """A base reference that is safe to read repeatedly.

    ``prelude`` holds the caching assignment, empty when the source was
    already reusable.
    """

    base: SourceExpression
    prelude: list[AssignmentOp] = field(default_factory=list)


def is_reusable(expr: SourceExpression) -> bool:
    return isinstance(expr, (IdentifierRef, Fragment))


def memoize(
    expr: SourceExpression,
    allocator: NameAllocator,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> Memoized:
    """Return a reusable reference to *expr*, caching it first if needed.

    Identifiers and literal fragments are returned unchanged. Anything
    else (opaque expressions and composite access paths) is assigned to a
    fresh temporary so it is evaluated exactly once.
    """
    if is_reusable(expr):
        return Memoized(base=expr)
    temp = allocator.allocate(config.temp_prefix)
    logger.debug("Caching %s in %s", expr.kind, temp)
    return Memoized(
        base=IdentifierRef(name=temp),
        prelude=[AssignmentOp(target=temp, value=expr)],
    )
