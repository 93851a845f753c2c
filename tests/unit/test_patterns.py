"""Tests for the pattern classifier."""

from destructure.ir import (
    ArrayPattern,
    Identifier,
    IdentifierRef,
    ObjectPattern,
    PatternProperty,
    PlainParameter,
    RestTarget,
    Skip,
)
from destructure.patterns import binds_nothing, has_pattern, is_pattern, is_single_member


class TestIsPattern:
    def test_object_pattern(self):
        assert is_pattern(ObjectPattern())

    def test_array_pattern(self):
        assert is_pattern(ArrayPattern())

    def test_identifier_is_not_pattern(self):
        assert not is_pattern(Identifier(name="x"))

    def test_other_shapes_are_not_patterns(self):
        for node in (Skip(), RestTarget(name="r"), PlainParameter(text="a = 1"),
                     IdentifierRef(name="x"), None, "x"):
            assert not is_pattern(node)

    def test_only_immediate_node_is_checked(self):
        nested = PatternProperty(key="x", target=ObjectPattern())
        assert not is_pattern(nested)


class TestHasPattern:
    def test_mixed_parameters(self):
        params = [Identifier(name="a"), ArrayPattern(elements=[Identifier(name="b")])]
        assert has_pattern(params)

    def test_no_patterns(self):
        assert not has_pattern([Identifier(name="a"), PlainParameter(text="...rest")])


class TestSingleMember:
    def test_one_property(self):
        pattern = ObjectPattern(
            properties=[PatternProperty(key="x", target=Identifier(name="x"))]
        )
        assert is_single_member(pattern)

    def test_skip_counts_as_member(self):
        pattern = ArrayPattern(elements=[Skip(), Identifier(name="x")])
        assert not is_single_member(pattern)

    def test_empty_is_not_single(self):
        assert not is_single_member(ObjectPattern())


class TestBindsNothing:
    def test_empty_patterns(self):
        assert binds_nothing(ObjectPattern())
        assert binds_nothing(ArrayPattern())

    def test_holes_only(self):
        assert binds_nothing(ArrayPattern(elements=[Skip(), Skip()]))

    def test_hole_before_element_binds(self):
        assert not binds_nothing(ArrayPattern(elements=[Skip(), Identifier(name="x")]))
