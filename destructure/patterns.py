"""Pattern classification helpers."""

from __future__ import annotations

from typing import Any

from .ir import ArrayPattern, ObjectPattern, Skip


def is_pattern(node: Any) -> bool:
    """True iff *node* itself is an object or array pattern (not recursive)."""
    return isinstance(node, (ObjectPattern, ArrayPattern))


def has_pattern(nodes: list[Any]) -> bool:
    return any(is_pattern(n) for n in nodes)


def is_single_member(pattern: ObjectPattern | ArrayPattern) -> bool:
    """Patterns with exactly one property / element are lowered without a temporary."""
    return pattern.member_count() == 1


def binds_nothing(pattern: ObjectPattern | ArrayPattern) -> bool:
    """True for patterns with no members, or array patterns made only of holes."""
    if isinstance(pattern, ArrayPattern):
        return all(isinstance(e, Skip) for e in pattern.elements)
    return pattern.member_count() == 0
