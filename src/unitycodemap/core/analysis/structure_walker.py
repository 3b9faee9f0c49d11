from __future__ import annotations

"""
Structural Walker.

Walks a C# syntax tree depth-first (pre-order) and maps declarations to
StructuralRecord rows. The name of the nearest enclosing class or struct is
carried alongside each pending node, so leaving a type scope restores the
outer name without any shared mutable state.

Dispatch is an explicit lookup from grammar node type to NodeKind. Every
other node type falls through to OTHER and is descended into, which keeps
types nested in namespaces, interfaces or method bodies reachable.

Preprocessor chains (`#if`/`#elif`/`#else`) are resolved against a set of
defined symbols, empty unless configured. Declarations in inactive branches
produce no records, so `#if UNITY_EDITOR` blocks are skipped by default.
"""

import re
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from unitycodemap.domain.structure_models import MemberKind, StructuralRecord

if TYPE_CHECKING:
    from tree_sitter import Node


# -----------------------------------------------------------------------------
# NODE CLASSIFICATION
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    CLASS = "class"
    STRUCT = "struct"
    METHOD = "method"
    PROPERTY = "property"
    FIELD = "field"
    CONSTRUCTOR = "constructor"
    OTHER = "other"


_NODE_KINDS: Dict[str, NodeKind] = {
    "class_declaration": NodeKind.CLASS,
    "struct_declaration": NodeKind.STRUCT,
    "method_declaration": NodeKind.METHOD,
    "property_declaration": NodeKind.PROPERTY,
    "field_declaration": NodeKind.FIELD,
    "constructor_declaration": NodeKind.CONSTRUCTOR,
}

_TYPE_KINDS: Dict[NodeKind, MemberKind] = {
    NodeKind.CLASS: MemberKind.CLASS,
    NodeKind.STRUCT: MemberKind.STRUCT,
}

_MEMBER_KINDS: Dict[NodeKind, MemberKind] = {
    NodeKind.METHOD: MemberKind.METHOD,
    NodeKind.PROPERTY: MemberKind.PROPERTY,
    NodeKind.FIELD: MemberKind.FIELD,
    NodeKind.CONSTRUCTOR: MemberKind.CONSTRUCTOR,
}

_CONDITIONAL_TYPES = frozenset({"preproc_if", "preproc_elif"})
_ALTERNATIVE_TYPES = frozenset({"preproc_elif", "preproc_else"})
_PREPROC_OPERATORS = frozenset({"&&", "||", "==", "!="})

_UNICODE_ESCAPE = re.compile(r"\\u([0-9A-Fa-f]{4})|\\U([0-9A-Fa-f]{8})")


def classify(node: Node) -> NodeKind:
    """Map a grammar node type onto the closed set of walker node kinds."""
    return _NODE_KINDS.get(node.type, NodeKind.OTHER)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk(root: Node, file_id: str, define_symbols: Iterable[str] = ()) -> Iterator[StructuralRecord]:
    """
    Yield the structural records of a syntax tree in document order.

    Each call returns a fresh generator; the tree is never modified. An
    explicit stack replaces recursion so deeply nested sources cannot hit
    the interpreter recursion limit.

    Conditional compilation is resolved the way the compiler does it:
    only the active branch of each `#if`/`#elif`/`#else` chain is walked.
    `#define` and `#undef` directives in the file update the symbol set.

    Args:
        root: Root node of the parsed file.
        file_id: Identifier written to the FilePath column.
        define_symbols: Preprocessor symbols considered defined.

    Yields:
        StructuralRecord: One record per type, method, property, field
                          variable and constructor found inside a type.
    """
    symbols: Set[str] = set(define_symbols)
    stack: List[Tuple[Node, str]] = [(root, "")]

    while stack:
        node, enclosing = stack.pop()
        kind = classify(node)
        child_enclosing = enclosing

        if kind in _TYPE_KINDS:
            type_name = declared_name(node)
            yield StructuralRecord(file_id, type_name, type_name, _TYPE_KINDS[kind])
            child_enclosing = type_name

        elif kind in _MEMBER_KINDS and enclosing:
            member_kind = _MEMBER_KINDS[kind]
            for member_name in _member_names(node, kind):
                yield StructuralRecord(file_id, enclosing, member_name, member_kind)

        # Reverse so the first child is popped first (pre-order)
        stack.extend((child, child_enclosing) for child in reversed(_children_to_visit(node, symbols)))


def extract_records(root: Node, file_id: str, define_symbols: Iterable[str] = ()) -> List[StructuralRecord]:
    """Materialized form of walk()."""
    return list(walk(root, file_id, define_symbols))


def declared_name(node: Node) -> str:
    """
    Read the identifier declared by a node.

    Uses the grammar's 'name' field, falling back to the first identifier
    child. The verbatim prefix of '@class' style identifiers is dropped and
    \\uXXXX / \\UXXXXXXXX escapes are decoded, so the value matches the
    identifier as the compiler sees it.

    Args:
        node: A declaration or variable_declarator node.

    Returns:
        str: The identifier text, or an empty string if none is present.
    """
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = _first_child_of_type(node, "identifier")
    if name_node is None or name_node.text is None:
        return ""

    text = _node_text(name_node)
    if text.startswith("@"):
        text = text[1:]
    if "\\" in text:
        text = _UNICODE_ESCAPE.sub(_decode_escape, text)
    return text


def evaluate_condition(node: Optional[Node], symbols: Set[str]) -> bool:
    """
    Evaluate a preprocessor condition against the defined symbols.

    Supports identifiers, true/false, '!', '&&', '||', '==', '!=' and
    parentheses. Anything else (including a missing condition in broken
    code) counts as false, like an undefined symbol.
    """
    if node is None:
        return False

    if node.type == "identifier":
        return _node_text(node) in symbols
    if node.type == "boolean_literal":
        return _node_text(node) == "true"

    operands = node.named_children
    if not operands:
        return False

    if node.type.endswith("parenthesized_expression"):
        return evaluate_condition(operands[0], symbols)

    if node.type.endswith("unary_expression"):
        return not evaluate_condition(operands[-1], symbols)

    if node.type.endswith("binary_expression"):
        operator = next((c.type for c in node.children if c.type in _PREPROC_OPERATORS), None)
        left = evaluate_condition(operands[0], symbols)
        right = evaluate_condition(operands[-1], symbols)
        if operator == "&&":
            return left and right
        if operator == "||":
            return left or right
        if operator == "==":
            return left == right
        if operator == "!=":
            return left != right

    return False


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _member_names(node: Node, kind: NodeKind) -> List[str]:
    """Return the names a member declaration contributes (several for fields)."""
    if kind is NodeKind.FIELD:
        return _field_variable_names(node)
    return [declared_name(node)]


def _field_variable_names(node: Node) -> List[str]:
    """Names of every variable in 'int a, b = 1;' style declarations."""
    declaration = _first_child_of_type(node, "variable_declaration")
    if declaration is None:
        return []
    return [
        declared_name(child)
        for child in declaration.children
        if child.type == "variable_declarator"
    ]


def _first_child_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.children:
        if child.type == node_type:
            return child
    return None


def _children_to_visit(node: Node, symbols: Set[str]) -> List[Node]:
    """Children to descend into, skipping inactive conditional branches."""
    if node.type in _CONDITIONAL_TYPES:
        active = evaluate_condition(node.child_by_field_name("condition"), symbols)
        # The #elif/#else chain hangs off the node as its last child
        return [c for c in node.children if (c.type in _ALTERNATIVE_TYPES) != active]

    if node.type == "preproc_define":
        symbols.update(_directive_symbol(node))
        return []
    if node.type == "preproc_undef":
        symbols.difference_update(_directive_symbol(node))
        return []

    return node.children


def _directive_symbol(node: Node) -> List[str]:
    names = [_node_text(child).strip() for child in node.named_children]
    return [name for name in names[:1] if name]


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def _decode_escape(match: re.Match[str]) -> str:
    value = int(match.group(1) or match.group(2), 16)
    return chr(value) if value <= 0x10FFFF else match.group(0)
