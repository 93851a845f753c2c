"""Data model — binding patterns, source expressions and assignment ops."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from . import constants


class PatternError(ValueError):
    """Raised when a pattern tree breaks the lowering contract."""

    pass


class SourceLocation(BaseModel):
    """Structured source span from tree-sitter AST nodes."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


# ── binding patterns ─────────────────────────────────────────────


class Identifier(BaseModel):
    kind: Literal["identifier"] = constants.KIND_IDENTIFIER
    name: str


class Skip(BaseModel):
    """An elided array slot."""

    kind: Literal["skip"] = constants.KIND_SKIP


class RestTarget(BaseModel):
    """Trailing ``...name`` element of an array pattern."""

    kind: Literal["rest"] = constants.KIND_REST
    name: str


class PatternProperty(BaseModel):
    key: str
    target: BindingTarget


class ObjectPattern(BaseModel):
    kind: Literal["object_pattern"] = constants.KIND_OBJECT_PATTERN
    properties: list[PatternProperty] = []
    source_location: SourceLocation = NO_SOURCE_LOCATION

    def member_count(self) -> int:
        return len(self.properties)


class ArrayPattern(BaseModel):
    kind: Literal["array_pattern"] = constants.KIND_ARRAY_PATTERN
    elements: list[ArrayElement] = []
    source_location: SourceLocation = NO_SOURCE_LOCATION

    def member_count(self) -> int:
        return len(self.elements)


class PlainParameter(BaseModel):
    """A non-pattern function parameter carried through verbatim."""

    kind: Literal["plain_param"] = constants.KIND_PLAIN_PARAM
    text: str


BindingPattern = Annotated[
    Union[ObjectPattern, ArrayPattern], Field(discriminator="kind")
]
BindingTarget = Annotated[
    Union[Identifier, ObjectPattern, ArrayPattern], Field(discriminator="kind")
]
ArrayElement = Annotated[
    Union[Identifier, ObjectPattern, ArrayPattern, Skip, RestTarget],
    Field(discriminator="kind"),
]
Parameter = Annotated[
    Union[Identifier, ObjectPattern, ArrayPattern, PlainParameter],
    Field(discriminator="kind"),
]


# ── source expressions ───────────────────────────────────────────


class IdentifierRef(BaseModel):
    """A bare identifier; reusable without side effects."""

    kind: Literal["identifier_ref"] = constants.KIND_IDENTIFIER_REF
    name: str


class Fragment(BaseModel):
    """A synthesized piece of access-path text such as ``.x`` or ``[0]``."""

    kind: Literal["fragment"] = constants.KIND_FRAGMENT
    text: str


class OpaqueExpr(BaseModel):
    """An arbitrary expression, assumed effectful.

    ``atomic`` marks primary expressions that can be followed by a member
    access without parentheses.
    """

    kind: Literal["opaque"] = constants.KIND_OPAQUE
    text: str
    atomic: bool = False
    source_location: SourceLocation = NO_SOURCE_LOCATION


class AccessPath(BaseModel):
    """A base expression followed by accessor fragments."""

    kind: Literal["access_path"] = constants.KIND_ACCESS_PATH
    parts: list[SourceExpression]


SourceExpression = Annotated[
    Union[IdentifierRef, Fragment, OpaqueExpr, AccessPath],
    Field(discriminator="kind"),
]


def extend_path(base: SourceExpression, accessor: str) -> AccessPath:
    """Return *base* followed by the accessor text, flattening nested paths."""
    parts = list(base.parts) if isinstance(base, AccessPath) else [base]
    return AccessPath(parts=parts + [Fragment(text=accessor)])


def render_expression(expr: SourceExpression) -> str:
    if isinstance(expr, IdentifierRef):
        return expr.name
    if isinstance(expr, Fragment):
        return expr.text
    if isinstance(expr, OpaqueExpr):
        return expr.text
    if isinstance(expr, AccessPath):
        pieces: list[str] = []
        for part in expr.parts:
            if isinstance(part, OpaqueExpr) and not part.atomic:
                pieces.append(f"({part.text})")
            else:
                pieces.append(render_expression(part))
        return "".join(pieces)
    raise PatternError(f"Unknown source expression: {expr!r}")


# ── lowering output ──────────────────────────────────────────────


class AssignmentOp(BaseModel):
    target: str
    value: SourceExpression

    def __str__(self) -> str:
        return f"{self.target} = {render_expression(self.value)}"


class PatternBinding(BaseModel):
    """A hoisted parameter pattern and the placeholder that replaced it."""

    pattern: BindingPattern
    placeholder: str


class Preamble(BaseModel):
    """The single declaration statement injected at the top of a function body."""

    assignments: list[AssignmentOp] = []
    insert_at: int | None = None


class SignatureLowering(BaseModel):
    params: list[Parameter]
    preamble: Preamble | None = None


PatternProperty.model_rebuild()
ObjectPattern.model_rebuild()
ArrayPattern.model_rebuild()
AccessPath.model_rebuild()
PatternBinding.model_rebuild()
SignatureLowering.model_rebuild()
