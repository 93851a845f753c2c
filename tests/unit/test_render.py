"""Tests for expression and assignment rendering."""

import pytest

from destructure.ir import (
    AccessPath,
    AssignmentOp,
    Fragment,
    Identifier,
    IdentifierRef,
    ObjectPattern,
    OpaqueExpr,
    PlainParameter,
    extend_path,
    render_expression,
)
from destructure.render import dump_assignments, render_assignments, render_parameter


class TestRenderExpression:
    def test_identifier(self):
        assert render_expression(IdentifierRef(name="z")) == "z"

    def test_fragment(self):
        assert render_expression(Fragment(text=".x")) == ".x"

    def test_opaque_alone_is_not_wrapped(self):
        assert render_expression(OpaqueExpr(text="a + b")) == "a + b"

    def test_path_wraps_non_atomic_base(self):
        path = extend_path(OpaqueExpr(text="a + b"), ".x")
        assert render_expression(path) == "(a + b).x"

    def test_path_keeps_atomic_base(self):
        path = extend_path(OpaqueExpr(text="f(1)", atomic=True), "[0]")
        assert render_expression(path) == "f(1)[0]"

    def test_extend_path_flattens(self):
        path = extend_path(extend_path(IdentifierRef(name="z"), ".x"), ".y")
        assert isinstance(path, AccessPath)
        assert len(path.parts) == 3
        assert render_expression(path) == "z.x.y"


class TestRenderAssignments:
    def test_comma_joined(self):
        ops = [
            AssignmentOp(target="x", value=IdentifierRef(name="a")),
            AssignmentOp(target="y", value=extend_path(IdentifierRef(name="b"), "[1]")),
        ]
        assert render_assignments(ops) == "x = a, y = b[1]"

    def test_empty(self):
        assert render_assignments([]) == ""

    def test_dump_one_per_line(self):
        ops = [
            AssignmentOp(target="x", value=IdentifierRef(name="a")),
            AssignmentOp(target="y", value=IdentifierRef(name="b")),
        ]
        assert dump_assignments(ops) == "  x = a\n  y = b"


class TestRenderParameter:
    def test_identifier_and_plain(self):
        assert render_parameter(Identifier(name="a")) == "a"
        assert render_parameter(PlainParameter(text="b = 2")) == "b = 2"

    def test_pattern_cannot_be_rendered(self):
        with pytest.raises(ValueError):
            render_parameter(ObjectPattern())
