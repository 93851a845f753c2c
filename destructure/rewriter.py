"""SourceRewriter — rewrites destructuring in JavaScript source text.

Walks a tree-sitter tree and reproduces the source byte for byte, except
for declarators bound to a pattern and functions with pattern parameters,
whose text is replaced by the lowered form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from . import constants
from .config import DEFAULT_CONFIG, LoweringConfig
from .frontend import PatternReader, is_pattern_node
from .hoisting import lower_function_signature
from .ir import AssignmentOp, PatternError, SourceLocation
from .lowering import lower_declaration
from .naming import NameAllocator
from .render import render_assignments, render_parameter, render_preamble

logger = logging.getLogger(__name__)


@dataclass
class LoweringRecord:
    """What one rewritten declarator or function signature lowered to."""

    kind: str
    source_location: SourceLocation
    assignments: list[AssignmentOp] = field(default_factory=list)


class SourceRewriter:
    """Rewrites one compilation unit; owns the unit's name allocator."""

    def __init__(
        self,
        config: LoweringConfig = DEFAULT_CONFIG,
        allocator: NameAllocator | None = None,
    ):
        self._config = config
        self._allocator = allocator or NameAllocator()
        self._source: bytes = b""
        self._reader = PatternReader(b"")
        self.records: list[LoweringRecord] = []
        self._REWRITE_DISPATCH: dict[str, Callable] = {
            **{t: self._rewrite_declaration for t in constants.DECLARATION_NODE_TYPES},
            **{t: self._rewrite_function for t in constants.FUNCTION_NODE_TYPES},
        }

    # ── entry point ──────────────────────────────────────────────

    def rewrite(self, tree, source: bytes) -> str:
        self._source = source
        self._reader = PatternReader(source)
        self.records = []
        root = tree.root_node
        text = (
            self._slice(0, root.start_byte)
            + self._rewrite(root)
            + self._slice(root.end_byte, len(source))
        )
        logger.info(
            "Rewrote %d destructuring site(s), %d name(s) allocated",
            len(self.records),
            self._allocator.counter,
        )
        return text

    # ── helpers ──────────────────────────────────────────────────

    def _slice(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8")

    def _node_text(self, node) -> str:
        return self._slice(node.start_byte, node.end_byte)

    @staticmethod
    def _child_index(parent, child) -> int:
        return next(
            i
            for i, c in enumerate(parent.children)
            if c.start_byte == child.start_byte
            and c.end_byte == child.end_byte
            and c.type == child.type
        )

    # ── dispatchers ──────────────────────────────────────────────

    def _rewrite(self, node) -> str:
        handler = self._REWRITE_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return self._rewrite_children(node)

    def _rewrite_children(self, node, substitutions: dict[int, str] | None = None) -> str:
        """Reassemble *node* from its children, keeping the text between them.

        Children whose index is in *substitutions* are replaced by the given
        text instead of being rewritten.
        """
        if node.child_count == 0:
            return self._node_text(node)
        substitutions = substitutions or {}
        pieces: list[str] = []
        cursor = node.start_byte
        for i, child in enumerate(node.children):
            pieces.append(self._slice(cursor, child.start_byte))
            if i in substitutions:
                pieces.append(substitutions[i])
            else:
                pieces.append(self._rewrite(child))
            cursor = child.end_byte
        pieces.append(self._slice(cursor, node.end_byte))
        return "".join(pieces)

    # ── declarations ─────────────────────────────────────────────

    def _rewrite_declaration(self, node) -> str:
        children = node.children
        rendered: list[str] = []
        empty: set[int] = set()
        for i, c in enumerate(children):
            if c.type == constants.TS_VARIABLE_DECLARATOR:
                text, binds = self._rewrite_declarator(c)
                if not binds:
                    empty.add(i)
                rendered.append(text)
            else:
                rendered.append(self._rewrite(c))
        dropped = self._dropped_declarators(children, empty)
        declarators = [
            i for i, c in enumerate(children) if c.type == constants.TS_VARIABLE_DECLARATOR
        ]
        # Dropped text still leaves its line breaks behind
        if declarators and all(i in dropped for i in declarators):
            newlines = "\n" * self._node_text(node).count("\n")
            return newlines + (";" if children[-1].type == ";" else "")

        pieces: list[str] = []
        cursor = node.start_byte
        for i, child in enumerate(children):
            gap = self._slice(cursor, child.start_byte)
            if i in dropped:
                pieces.append("\n" * (gap + self._node_text(child)).count("\n"))
            else:
                pieces.append(gap)
                pieces.append(rendered[i])
            cursor = child.end_byte
        pieces.append(self._slice(cursor, node.end_byte))
        return "".join(pieces)

    @staticmethod
    def _dropped_declarators(children, empty: set[int]) -> set[int]:
        """The *empty* declarators, each with one adjacent comma."""
        dropped: set[int] = set()
        for i in sorted(empty):
            dropped.add(i)
            if i + 1 < len(children) and children[i + 1].type == ",":
                dropped.add(i + 1)
            elif i > 0 and children[i - 1].type == "," and i - 1 not in dropped:
                dropped.add(i - 1)
        return dropped

    def _rewrite_declarator(self, node) -> tuple[str, bool]:
        """Rewritten text of one declarator, and whether it still assigns anything."""
        name_node = node.child_by_field_name("name")
        value_node = node.child_by_field_name("value")
        if name_node is None or not is_pattern_node(name_node):
            return self._rewrite_children(node), True
        if value_node is None:
            raise PatternError(
                f"Destructuring declaration without an initializer at "
                f"{self._reader.source_loc(node)}"
            )
        pattern = self._reader.pattern(name_node)
        source = self._reader.expression(value_node, self._rewrite(value_node))
        ops = lower_declaration(pattern, source, self._allocator, self._config)
        self.records.append(
            LoweringRecord(
                kind="declaration",
                source_location=self._reader.source_loc(node),
                assignments=ops,
            )
        )
        # Keep the pattern's line breaks so later line numbers do not shift
        newlines = "\n" * self._node_text(name_node).count("\n")
        return newlines + render_assignments(ops), bool(ops)

    # ── functions ────────────────────────────────────────────────

    def _rewrite_function(self, node) -> str:
        params_node = node.child_by_field_name("parameters")
        body_node = node.child_by_field_name("body")
        if (
            params_node is None
            or params_node.type != constants.TS_FORMAL_PARAMETERS
            or body_node is None
            or body_node.type != constants.TS_STATEMENT_BLOCK
        ):
            return self._rewrite_children(node)

        param_indices = [
            i
            for i, c in enumerate(params_node.children)
            if c.is_named and c.type not in constants.COMMENT_TYPES
        ]
        param_nodes = [params_node.children[i] for i in param_indices]
        for p in param_nodes:
            self._reader.reject_nested_pattern(p)
        if not any(is_pattern_node(p) for p in param_nodes):
            return self._rewrite_children(node)

        params = [
            self._reader.parameter(p, "" if is_pattern_node(p) else self._rewrite(p))
            for p in param_nodes
        ]
        lowering = lower_function_signature(
            params,
            body_start=body_node.start_byte + 1,
            allocator=self._allocator,
            config=self._config,
        )
        self.records.append(
            LoweringRecord(
                kind="function",
                source_location=self._reader.source_loc(params_node),
                assignments=lowering.preamble.assignments,
            )
        )

        params_text = self._rewrite_children(
            params_node,
            {i: render_parameter(p) for i, p in zip(param_indices, lowering.params)},
        )
        body_text = self._rewrite_children(
            body_node, {0: "{" + render_preamble(lowering.preamble, self._config)}
        )
        return self._rewrite_children(
            node,
            {
                self._child_index(node, params_node): params_text,
                self._child_index(node, body_node): body_text,
            },
        )
