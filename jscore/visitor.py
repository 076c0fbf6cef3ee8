"""Traversal of AST nodes with overridable per-node-type hooks."""

from __future__ import annotations

import dataclasses
import math
import re
import sys
from collections.abc import Iterator
from functools import lru_cache
from typing import Any, TextIO

from .node import (
    ArrayLiteral,
    BigIntLiteral,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    MemberExpression,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    Position,
    Program,
    Property,
    RegExpLiteral,
    ReturnStatement,
    Span,
    StringLiteral,
    ThisExpression,
    UnaryExpression,
    UndefinedLiteral,
    VariableDeclaration,
    WhileStatement,
)

__all__ = ["Visitor", "NodeCounter", "AstPrinter"]

_LEAF_METHODS: dict[type, str] = {
    Identifier: "visit_identifier",
    NumberLiteral: "visit_number",
    StringLiteral: "visit_string",
    BooleanLiteral: "visit_boolean",
    NullLiteral: "visit_null",
    UndefinedLiteral: "visit_undefined",
    ThisExpression: "visit_this",
    RegExpLiteral: "visit_regexp",
    BigIntLiteral: "visit_bigint",
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@lru_cache(maxsize=None)
def _method_name(cls: type) -> str:
    name = _LEAF_METHODS.get(cls)
    if name is not None:
        return name
    return "visit_" + _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()


def _nodes_in(value: Any) -> Iterator[Node]:
    if value is None or isinstance(value, (Span, Position)):
        return
    if isinstance(value, Node):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _nodes_in(item)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        for f in dataclasses.fields(value):
            yield from _nodes_in(getattr(value, f.name))


def _iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield every direct child node, in field order, skipping holes."""
    for f in dataclasses.fields(node):
        yield from _nodes_in(getattr(node, f.name))


class Visitor:
    """Dispatches each node to a ``visit_<kind>`` method.

    ``visit_node`` looks for a method named after the node type
    (``visit_binary_expression``, ``visit_identifier``, ``visit_number`` ...)
    and calls it with the node. Node types without such a method fall back
    to :meth:`generic_visit`, which visits all child nodes.
    """

    def visit_node(self, node: Node) -> Any:
        if not isinstance(node, Node):
            raise TypeError(f"not an AST node: {node!r}")
        method = getattr(self, _method_name(type(node)), None)
        if method is None:
            return self.generic_visit(node)
        return method(node)

    def generic_visit(self, node: Node) -> None:
        """Visit every child of ``node`` in source order."""
        for child in _iter_child_nodes(node):
            self.visit_node(child)


def _structural_children(node: Node) -> Iterator[Node]:
    """Children followed by the built-in counting and printing visitors."""
    match node:
        case Program() | BlockStatement():
            yield from node.body
        case VariableDeclaration():
            for declarator in node.declarations:
                yield declarator.id
                if declarator.init is not None:
                    yield declarator.init
        case FunctionDeclaration():
            if node.id is not None:
                yield node.id
            yield from node.params
            yield node.body
        case BinaryExpression():
            yield node.left
            yield node.right
        case UnaryExpression():
            yield node.argument
        case CallExpression():
            yield node.callee
            yield from node.arguments
        case MemberExpression():
            yield node.object
            yield node.property
        case IfStatement():
            yield node.test
            yield node.consequent
            if node.alternate is not None:
                yield node.alternate
        case WhileStatement():
            yield node.test
            yield node.body
        case ForStatement():
            for part in (node.init, node.test, node.update):
                if part is not None:
                    yield part
            yield node.body
        case ReturnStatement():
            if node.argument is not None:
                yield node.argument
        case ExpressionStatement():
            yield node.expression
        case ArrayLiteral():
            yield from (element for element in node.elements if element is not None)
        case ObjectLiteral():
            yield from node.properties
        case Property():
            yield node.key
            yield node.value


class NodeCounter(Visitor):
    """Counts nodes, descending only into the common statement and expression kinds."""

    def __init__(self) -> None:
        self.count = 0

    def visit_node(self, node: Node) -> None:
        self.count += 1
        for child in _structural_children(node):
            self.visit_node(child)


def _format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


_PLAIN_LABELS: dict[type, str] = {
    Program: "Program",
    VariableDeclaration: "VariableDeclaration",
    FunctionDeclaration: "FunctionDeclaration",
    BinaryExpression: "BinaryExpression",
    UnaryExpression: "UnaryExpression",
    CallExpression: "CallExpression",
    MemberExpression: "MemberExpression",
    BlockStatement: "BlockStatement",
    IfStatement: "IfStatement",
    WhileStatement: "WhileStatement",
    ForStatement: "ForStatement",
    ReturnStatement: "ReturnStatement",
    ExpressionStatement: "ExpressionStatement",
    ArrayLiteral: "ArrayLiteral",
    ObjectLiteral: "ObjectLiteral",
    Property: "Property",
    NullLiteral: "Null",
    UndefinedLiteral: "Undefined",
    ThisExpression: "This",
}


def _label(node: Node) -> str:
    match node:
        case Identifier():
            return f"Identifier: {node.name}"
        case NumberLiteral():
            return f"Number: {_format_number(node.value)}"
        case StringLiteral():
            return f"String: {node.value}"
        case BooleanLiteral():
            return f"Boolean: {'true' if node.value else 'false'}"
    return _PLAIN_LABELS.get(type(node), "Unknown node")


class AstPrinter(Visitor):
    """Writes an indented outline of a tree, one node per line."""

    def __init__(self, stream: TextIO | None = None, indent: int = 0) -> None:
        self.stream = stream
        self.indent = indent

    def visit_node(self, node: Node) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        print("  " * self.indent + _label(node), file=out)
        self.indent += 1
        try:
            for child in _structural_children(node):
                self.visit_node(child)
        finally:
            self.indent -= 1