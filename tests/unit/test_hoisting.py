"""Tests for parameter hoisting and function-signature lowering."""

from destructure.config import LoweringConfig
from destructure.hoisting import build_preamble, hoist_patterns, lower_function_signature
from destructure.ir import (
    ArrayPattern,
    Identifier,
    ObjectPattern,
    PatternProperty,
    PlainParameter,
    RestTarget,
)
from destructure.naming import NameAllocator
from destructure.render import render_parameter, render_preamble


def _obj(*names) -> ObjectPattern:
    return ObjectPattern(
        properties=[PatternProperty(key=n, target=Identifier(name=n)) for n in names]
    )


def _names(params) -> list[str]:
    return [render_parameter(p) for p in params]


class TestHoistPatterns:
    def test_pattern_replaced_by_placeholder(self):
        params, bindings = hoist_patterns([_obj("y")], NameAllocator())
        assert params == [Identifier(name="arg$0")]
        assert len(bindings) == 1
        assert bindings[0].placeholder == "arg$0"
        assert bindings[0].pattern == _obj("y")

    def test_positions_preserved(self):
        params, bindings = hoist_patterns(
            [Identifier(name="x"), _obj("y"), Identifier(name="z")], NameAllocator()
        )
        assert _names(params) == ["x", "arg$0", "z"]
        assert [b.placeholder for b in bindings] == ["arg$0"]

    def test_plain_parameters_pass_through(self):
        plain = PlainParameter(text="n = 1")
        params, _ = hoist_patterns([plain, _obj("y")], NameAllocator())
        assert params[0] is plain

    def test_param_prefix_from_config(self):
        params, _ = hoist_patterns(
            [_obj("y")], NameAllocator(), LoweringConfig(param_prefix="p")
        )
        assert _names(params) == ["p$0"]


class TestLowerFunctionSignature:
    def test_single_object_parameter(self):
        result = lower_function_signature([_obj("y")])
        assert _names(result.params) == ["arg$0"]
        assert render_preamble(result.preamble) == "var y = arg$0.y;"

    def test_no_pattern_parameters_is_noop(self):
        params = [Identifier(name="a"), PlainParameter(text="...rest")]
        alloc = NameAllocator()
        result = lower_function_signature(params, allocator=alloc)
        assert result.params == params
        assert result.preamble is None
        assert alloc.counter == 0

    def test_several_patterns_share_one_declaration(self):
        result = lower_function_signature([_obj("y"), _obj("z")])
        assert _names(result.params) == ["arg$0", "arg$1"]
        assert render_preamble(result.preamble) == "var y = arg$0.y, z = arg$1.z;"

    def test_placeholders_allocated_before_temporaries(self):
        nested = ObjectPattern(
            properties=[PatternProperty(key="p", target=_obj("a", "b"))]
        )
        array = ArrayPattern(elements=[Identifier(name="c"), RestTarget(name="d")])
        result = lower_function_signature([nested, array])
        assert _names(result.params) == ["arg$0", "arg$1"]
        assert render_preamble(result.preamble) == (
            "var var$2 = arg$0.p, a = var$2.a, b = var$2.b, "
            "c = arg$1[0], d = arg$1.slice(1);"
        )

    def test_body_start_echoed(self):
        result = lower_function_signature([_obj("y")], body_start=17)
        assert result.preamble.insert_at == 17

    def test_declaration_keyword_from_config(self):
        config = LoweringConfig(declaration_keyword="let")
        result = lower_function_signature([_obj("y")], config=config)
        assert render_preamble(result.preamble, config) == "let y = arg$0.y;"


class TestBuildPreamble:
    def test_empty_pattern_gives_empty_preamble(self):
        alloc = NameAllocator()
        _, bindings = hoist_patterns([ObjectPattern()], alloc)
        preamble = build_preamble(bindings, alloc)
        assert preamble.assignments == []
        assert render_preamble(preamble) == ""
