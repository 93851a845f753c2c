"""PatternReader — tree-sitter JavaScript nodes → binding-pattern data model."""

from __future__ import annotations

import logging

from . import constants
from .ir import (
    ArrayPattern,
    Identifier,
    IdentifierRef,
    ObjectPattern,
    OpaqueExpr,
    PatternError,
    PatternProperty,
    PlainParameter,
    RestTarget,
    Skip,
    SourceExpression,
    SourceLocation,
)

logger = logging.getLogger(__name__)


def is_pattern_node(node) -> bool:
    return node.type in (constants.TS_OBJECT_PATTERN, constants.TS_ARRAY_PATTERN)


def has_optional_chain(node) -> bool:
    """True if the member/call chain ending at *node* contains a ``?.`` link.

    Such a chain short-circuits as a whole, so an accessor appended to it
    needs parentheses.
    """
    while node is not None and node.type in constants.CHAIN_EXPRESSION_TYPES:
        if any(c.type == constants.TS_OPTIONAL_CHAIN for c in node.children):
            return True
        inner = node.child_by_field_name("object")
        node = inner if inner is not None else node.child_by_field_name("function")
    return False


class PatternReader:
    """Builds pattern, parameter and expression models from tree-sitter nodes."""

    def __init__(self, source: bytes):
        self._source = source

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def source_loc(self, node) -> SourceLocation:
        s, e = node.start_point, node.end_point
        return SourceLocation(
            start_line=s[0] + 1,
            start_col=s[1],
            end_line=e[0] + 1,
            end_col=e[1],
        )

    def _unsupported(self, node, what: str) -> PatternError:
        return PatternError(
            f"{what} is not supported in destructuring patterns: "
            f"'{self._node_text(node)}' at {self.source_loc(node)}"
        )

    # ── patterns ─────────────────────────────────────────────────

    def pattern(self, node) -> ObjectPattern | ArrayPattern:
        if node.type == constants.TS_OBJECT_PATTERN:
            return self._object_pattern(node)
        if node.type == constants.TS_ARRAY_PATTERN:
            return self._array_pattern(node)
        raise PatternError(f"Not a destructuring pattern: {node.type}")

    def _target(self, node):
        if node.type == constants.TS_IDENTIFIER:
            return Identifier(name=self._node_text(node))
        if is_pattern_node(node):
            return self.pattern(node)
        if node.type in ("assignment_pattern", "object_assignment_pattern"):
            raise self._unsupported(node, "A default value")
        raise self._unsupported(node, f"Binding target '{node.type}'")

    def _object_pattern(self, node) -> ObjectPattern:
        properties: list[PatternProperty] = []
        for child in node.named_children:
            if child.type in constants.COMMENT_TYPES:
                continue
            if child.type == constants.TS_SHORTHAND_PROPERTY:
                name = self._node_text(child)
                properties.append(
                    PatternProperty(key=name, target=Identifier(name=name))
                )
            elif child.type == constants.TS_PAIR_PATTERN:
                key_node = child.child_by_field_name("key")
                value_node = child.child_by_field_name("value")
                if key_node.type != constants.TS_PROPERTY_IDENTIFIER:
                    raise self._unsupported(key_node, "A non-identifier key")
                properties.append(
                    PatternProperty(
                        key=self._node_text(key_node), target=self._target(value_node)
                    )
                )
            elif child.type == constants.TS_REST_PATTERN:
                raise self._unsupported(child, "Object rest")
            elif child.type == "object_assignment_pattern":
                raise self._unsupported(child, "A default value")
            else:
                raise self._unsupported(child, f"Object pattern member '{child.type}'")
        return ObjectPattern(properties=properties, source_location=self.source_loc(node))

    def _array_pattern(self, node) -> ArrayPattern:
        """Read elements slot by slot; a slot with no node between commas is a hole.

        A trailing comma closes the last slot without opening a new one,
        so ``[x,]`` has one element and ``[,x,]`` has two.
        """
        elements = []
        pending = None
        for child in node.children[1:-1]:
            if child.type == ",":
                elements.append(pending if pending is not None else Skip())
                pending = None
            elif child.is_named and child.type not in constants.COMMENT_TYPES:
                pending = self._element(child)
        if pending is not None:
            elements.append(pending)
        return ArrayPattern(elements=elements, source_location=self.source_loc(node))

    def _element(self, node):
        if node.type != constants.TS_REST_PATTERN:
            return self._target(node)
        inner = [c for c in node.named_children if c.type not in constants.COMMENT_TYPES]
        if len(inner) != 1 or inner[0].type != constants.TS_IDENTIFIER:
            raise self._unsupported(node, "A rest element that is not an identifier")
        return RestTarget(name=self._node_text(inner[0]))

    # ── parameters / expressions ─────────────────────────────────

    def parameter(self, node, rewritten_text: str):
        """A pattern parameter becomes a pattern, anything else passes through.

        Patterns nested in a default or a rest parameter are rejected rather
        than passed through unlowered.
        """
        if is_pattern_node(node):
            return self.pattern(node)
        self.reject_nested_pattern(node)
        if node.type == constants.TS_IDENTIFIER:
            return Identifier(name=self._node_text(node))
        return PlainParameter(text=rewritten_text)

    def reject_nested_pattern(self, node):
        """Raise for a parameter that hides a pattern behind a default or rest."""
        if node.type == "assignment_pattern":
            left = node.child_by_field_name("left")
            if left is not None and is_pattern_node(left):
                raise self._unsupported(node, "A default value")
        if node.type == constants.TS_REST_PATTERN:
            if any(is_pattern_node(c) for c in node.named_children):
                raise self._unsupported(node, "A rest parameter that is not an identifier")

    def expression(self, node, rewritten_text: str) -> SourceExpression:
        """Identifiers are reusable references; everything else is opaque."""
        if node.type == constants.TS_IDENTIFIER:
            return IdentifierRef(name=self._node_text(node))
        return OpaqueExpr(
            text=rewritten_text,
            atomic=(
                node.type in constants.ATOMIC_EXPRESSION_TYPES
                and not has_optional_chain(node)
            ),
            source_location=self.source_loc(node),
        )
