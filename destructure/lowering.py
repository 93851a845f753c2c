"""Destructuring lowering — patterns → ordered plain assignments."""

from __future__ import annotations

import logging
from typing import Callable

from . import constants
from .config import DEFAULT_CONFIG, LoweringConfig
from .ir import (
    AssignmentOp,
    BindingPattern,
    Identifier,
    PatternError,
    RestTarget,
    SourceExpression,
    extend_path,
)
from .memoize import is_reusable, memoize
from .naming import NameAllocator, default_allocator
from .patterns import binds_nothing, is_pattern, is_single_member

logger = logging.getLogger(__name__)


class PatternLowerer:
    """Lowers one binding pattern at a time into a flat list of assignments.

    Members are visited in declared order and nested patterns are expanded
    inline, so the result follows the textual left-to-right, outer-to-inner
    order of the pattern.
    """

    def __init__(
        self,
        allocator: NameAllocator,
        config: LoweringConfig = DEFAULT_CONFIG,
    ):
        self._allocator = allocator
        self._config = config
        self._ops: list[AssignmentOp] = []
        self._PATTERN_DISPATCH: dict[str, Callable] = {
            constants.KIND_OBJECT_PATTERN: self._lower_object,
            constants.KIND_ARRAY_PATTERN: self._lower_array,
        }
        self._ELEMENT_DISPATCH: dict[str, Callable] = {
            constants.KIND_IDENTIFIER: self._lower_element,
            constants.KIND_OBJECT_PATTERN: self._lower_element,
            constants.KIND_ARRAY_PATTERN: self._lower_element,
            constants.KIND_SKIP: lambda element, base, index: None,
            constants.KIND_REST: self._lower_rest,
        }

    # ── entry point ──────────────────────────────────────────────

    def lower(
        self, pattern: BindingPattern, source: SourceExpression
    ) -> list[AssignmentOp]:
        self._ops = []
        self._lower_pattern(pattern, source)
        return self._ops

    # ── helpers ──────────────────────────────────────────────────

    def _emit(self, target: str, value: SourceExpression):
        self._ops.append(AssignmentOp(target=target, value=value))

    def _base_for(
        self, pattern: BindingPattern, source: SourceExpression
    ) -> SourceExpression:
        """Pick the reference every member of *pattern* reads through.

        A pattern that binds nothing still evaluates an effectful source once.
        """
        if binds_nothing(pattern):
            if is_reusable(source):
                return source
        elif is_single_member(pattern):
            return source
        memo = memoize(source, self._allocator, self._config)
        self._ops.extend(memo.prelude)
        return memo.base

    # ── dispatchers ──────────────────────────────────────────────

    def _lower_pattern(self, pattern: BindingPattern, source: SourceExpression):
        handler = self._PATTERN_DISPATCH.get(getattr(pattern, "kind", None))
        if handler is None:
            raise PatternError(f"Not a binding pattern: {pattern!r}")
        handler(pattern, self._base_for(pattern, source))

    def _lower_target(self, target, value: SourceExpression):
        if is_pattern(target):
            self._lower_pattern(target, value)
        elif isinstance(target, Identifier):
            self._emit(target.name, value)
        else:
            raise PatternError(f"Unknown binding target: {target!r}")

    # ── object / array ───────────────────────────────────────────

    def _lower_object(self, pattern, base: SourceExpression):
        for prop in pattern.properties:
            self._lower_target(prop.target, extend_path(base, f".{prop.key}"))

    def _lower_array(self, pattern, base: SourceExpression):
        last = len(pattern.elements) - 1
        for index, element in enumerate(pattern.elements):
            kind = getattr(element, "kind", None)
            handler = self._ELEMENT_DISPATCH.get(kind)
            if handler is None:
                raise PatternError(f"Unknown array pattern element: {element!r}")
            if kind == constants.KIND_REST and index != last:
                raise PatternError(
                    f"Rest element '...{element.name}' must be last "
                    f"(found at index {index} of {last + 1})"
                )
            handler(element, base, index)

    def _lower_element(self, element, base: SourceExpression, index: int):
        self._lower_target(element, extend_path(base, f"[{index}]"))

    def _lower_rest(self, element: RestTarget, base: SourceExpression, index: int):
        self._emit(
            element.name,
            extend_path(base, f".{constants.SLICE_METHOD}({index})"),
        )


def lower_declaration(
    pattern: BindingPattern,
    source: SourceExpression,
    allocator: NameAllocator | None = None,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> list[AssignmentOp]:
    """Lower ``pattern = source`` into an ordered list of assignments.

    Args:
        pattern: The object or array pattern being bound.
        source: The expression the pattern destructures.
        allocator: Name allocator for temporaries; the process-wide one
            when omitted.
        config: Naming choices.

    Returns:
        The assignments in evaluation order. A leading temporary assignment
        is present when *source* had to be cached.
    """
    if not is_pattern(pattern):
        raise PatternError(f"Not a binding pattern: {pattern!r}")
    lowerer = PatternLowerer(allocator or default_allocator(), config)
    ops = lowerer.lower(pattern, source)
    logger.debug("Lowered %s into %d assignment(s)", pattern.kind, len(ops))
    return ops
