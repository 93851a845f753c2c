"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

TEMP_PREFIX = "var"
PARAM_PREFIX = "arg"
NAME_SEPARATOR = "$"

DECLARATION_KEYWORD = "var"
DEFAULT_LANGUAGE = "javascript"

SLICE_METHOD = "slice"

# Data-model kind tags
KIND_IDENTIFIER = "identifier"
KIND_OBJECT_PATTERN = "object_pattern"
KIND_ARRAY_PATTERN = "array_pattern"
KIND_SKIP = "skip"
KIND_REST = "rest"
KIND_PLAIN_PARAM = "plain_param"

KIND_IDENTIFIER_REF = "identifier_ref"
KIND_FRAGMENT = "fragment"
KIND_OPAQUE = "opaque"
KIND_ACCESS_PATH = "access_path"

# tree-sitter-javascript node types
TS_IDENTIFIER = "identifier"
TS_OBJECT_PATTERN = "object_pattern"
TS_ARRAY_PATTERN = "array_pattern"
TS_SHORTHAND_PROPERTY = "shorthand_property_identifier_pattern"
TS_PAIR_PATTERN = "pair_pattern"
TS_PROPERTY_IDENTIFIER = "property_identifier"
TS_REST_PATTERN = "rest_pattern"
TS_VARIABLE_DECLARATOR = "variable_declarator"
TS_STATEMENT_BLOCK = "statement_block"
TS_FORMAL_PARAMETERS = "formal_parameters"

DECLARATION_NODE_TYPES: frozenset[str] = frozenset(
    {"variable_declaration", "lexical_declaration"}
)

FUNCTION_NODE_TYPES: frozenset[str] = frozenset(
    {
        "function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "generator_function_declaration",
        "method_definition",
        "arrow_function",
    }
)

# Expressions that can take a trailing ``.name`` / ``[i]`` without parentheses
ATOMIC_EXPRESSION_TYPES: frozenset[str] = frozenset(
    {
        "identifier",
        "this",
        "super",
        "member_expression",
        "subscript_expression",
        "call_expression",
        "parenthesized_expression",
        "array",
        "string",
        "template_string",
        "regex",
        "null",
        "undefined",
        "true",
        "false",
    }
)

COMMENT_TYPES: frozenset[str] = frozenset({"comment", "html_comment"})

TS_OPTIONAL_CHAIN = "optional_chain"

CHAIN_EXPRESSION_TYPES: frozenset[str] = frozenset(
    {"member_expression", "subscript_expression", "call_expression"}
)
