"""Encoding of AST nodes to and from JSON-compatible data.

Nodes are externally tagged: a node with fields becomes ``{"Tag": {...}}``,
a node wrapping a single value becomes ``{"Tag": value}`` and a node with
no data becomes the bare string ``"Tag"``.
"""

from __future__ import annotations

import dataclasses
import enum
import json
from typing import Any

from . import node as ast
from .node import Node

__all__ = ["AstDecodeError", "to_dict", "from_dict", "to_json", "from_json"]


class AstDecodeError(ValueError):
    """Raised when data does not describe a valid AST node."""


class _Kind(enum.Enum):
    NODE = "node"
    OPTIONAL_NODE = "optional node"
    NODES = "nodes"
    NODES_WITH_HOLES = "nodes with holes"
    STR = "str"
    BOOL = "bool"
    INT = "int"


@dataclasses.dataclass(frozen=True)
class _Struct:
    cls: type
    many: bool = False
    optional: bool = False


_NODE = _Kind.NODE
_OPT = _Kind.OPTIONAL_NODE
_NODES = _Kind.NODES
_STR = _Kind.STR
_BOOL = _Kind.BOOL

_SPAN = _Struct(ast.Span, optional=True)


def _fields(**kinds: Any) -> dict[str, Any]:
    return {**kinds, "span": _SPAN}


_SCHEMAS: dict[type, dict[str, Any]] = {
    ast.Position: {"line": _Kind.INT, "column": _Kind.INT},
    ast.Span: {"start": _Struct(ast.Position), "end": _Struct(ast.Position)},
    ast.Program: _fields(body=_NODES, source_type=_STR),
    ast.VariableDeclaration: _fields(
        kind=_STR, declarations=_Struct(ast.VariableDeclarator, many=True)
    ),
    ast.VariableDeclarator: _fields(id=_NODE, init=_OPT),
    ast.FunctionDeclaration: _fields(
        id=_OPT, params=_NODES, body=_NODE, generator=_BOOL, is_async=_BOOL
    ),
    ast.ClassDeclaration: _fields(id=_OPT, super_class=_OPT, body=_NODE),
    ast.ImportDeclaration: _fields(specifiers=_NODES, source=_NODE),
    ast.ImportSpecifier: _fields(local=_NODE, imported=_NODE),
    ast.ImportDefaultSpecifier: _fields(local=_NODE),
    ast.ImportNamespaceSpecifier: _fields(local=_NODE),
    ast.ExportDeclaration: _fields(
        declaration=_OPT, specifiers=_NODES, source=_OPT, default=_BOOL
    ),
    ast.ExportSpecifier: _fields(local=_NODE, exported=_NODE),
    ast.BinaryExpression: _fields(left=_NODE, operator=_STR, right=_NODE),
    ast.UnaryExpression: _fields(operator=_STR, argument=_NODE, prefix=_BOOL),
    ast.CallExpression: _fields(callee=_NODE, arguments=_NODES),
    ast.NewExpression: _fields(callee=_NODE, arguments=_NODES),
    ast.MemberExpression: _fields(
        object=_NODE, property=_NODE, computed=_BOOL, optional=_BOOL
    ),
    ast.AssignmentExpression: _fields(left=_NODE, operator=_STR, right=_NODE),
    ast.ConditionalExpression: _fields(test=_NODE, consequent=_NODE, alternate=_NODE),
    ast.LogicalExpression: _fields(left=_NODE, operator=_STR, right=_NODE),
    ast.UpdateExpression: _fields(operator=_STR, argument=_NODE, prefix=_BOOL),
    ast.ArrowFunctionExpression: _fields(
        params=_NODES, body=_NODE, expression=_BOOL, is_async=_BOOL
    ),
    ast.FunctionExpression: _fields(
        id=_OPT, params=_NODES, body=_NODE, generator=_BOOL, is_async=_BOOL
    ),
    ast.ClassExpression: _fields(id=_OPT, super_class=_OPT, body=_NODE),
    ast.YieldExpression: _fields(argument=_OPT, delegate=_BOOL),
    ast.AwaitExpression: _fields(argument=_NODE),
    ast.BlockStatement: _fields(body=_NODES),
    ast.IfStatement: _fields(test=_NODE, consequent=_NODE, alternate=_OPT),
    ast.ForStatement: _fields(init=_OPT, test=_OPT, update=_OPT, body=_NODE),
    ast.WhileStatement: _fields(test=_NODE, body=_NODE),
    ast.DoWhileStatement: _fields(body=_NODE, test=_NODE),
    ast.SwitchStatement: _fields(
        discriminant=_NODE, cases=_Struct(ast.SwitchCase, many=True)
    ),
    ast.SwitchCase: _fields(test=_OPT, consequent=_NODES),
    ast.TryStatement: _fields(block=_NODE, handler=_OPT, finalizer=_OPT),
    ast.CatchClause: _fields(param=_NODE, body=_NODE),
    ast.ThrowStatement: _fields(argument=_NODE),
    ast.ReturnStatement: _fields(argument=_OPT),
    ast.BreakStatement: _fields(label=_OPT),
    ast.ContinueStatement: _fields(label=_OPT),
    ast.LabeledStatement: _fields(label=_NODE, body=_NODE),
    ast.WithStatement: _fields(object=_NODE, body=_NODE),
    ast.DebuggerStatement: _fields(),
    ast.ExpressionStatement: _fields(expression=_NODE),
    ast.ArrayLiteral: _fields(elements=_Kind.NODES_WITH_HOLES),
    ast.ObjectLiteral: _fields(properties=_NODES),
    ast.Property: _fields(
        key=_NODE,
        value=_NODE,
        kind=_STR,
        computed=_BOOL,
        method=_BOOL,
        shorthand=_BOOL,
    ),
    ast.TemplateLiteral: _fields(
        quasis=_Struct(ast.TemplateElement, many=True), expressions=_NODES
    ),
    ast.TemplateElement: _fields(value=_STR, tail=_BOOL),
    ast.TaggedTemplateExpression: _fields(tag=_NODE, quasi=_NODE),
    ast.SpreadElement: _fields(argument=_NODE),
    ast.RestElement: _fields(argument=_NODE),
    ast.Super: _fields(),
    ast.MetaProperty: _fields(meta=_NODE, property=_NODE),
    ast.RegExpLiteral: _fields(pattern=_STR, flags=_STR),
}

_STRUCT_ONLY = frozenset(
    {ast.Position, ast.Span, ast.VariableDeclarator, ast.SwitchCase, ast.TemplateElement}
)

_TAG_OVERRIDES: dict[type, str] = {
    ast.NumberLiteral: "Number",
    ast.StringLiteral: "String",
    ast.BooleanLiteral: "Boolean",
    ast.NullLiteral: "Null",
    ast.UndefinedLiteral: "Undefined",
    ast.ThisExpression: "This",
    ast.RegExpLiteral: "RegExp",
    ast.BigIntLiteral: "BigInt",
}

_UNIT_NODES = frozenset({ast.NullLiteral, ast.UndefinedLiteral, ast.ThisExpression})

_NEWTYPE_NODES: dict[type, tuple[str, type]] = {
    ast.Identifier: ("name", str),
    ast.NumberLiteral: ("value", float),
    ast.StringLiteral: ("value", str),
    ast.BooleanLiteral: ("value", bool),
    ast.BigIntLiteral: ("value", str),
}

_NODE_CLASSES: tuple[type, ...] = (
    *(cls for cls in _SCHEMAS if cls not in _STRUCT_ONLY),
    *_NEWTYPE_NODES,
    *_UNIT_NODES,
)

_KEY_RENAMES = {"is_async": "async"}

_TAGS: dict[type, str] = {
    cls: _TAG_OVERRIDES.get(cls, cls.__name__) for cls in _NODE_CLASSES
}
_CLASSES_BY_TAG: dict[str, type] = {tag: cls for cls, tag in _TAGS.items()}

_SCALAR_TYPES = {_Kind.STR: str, _Kind.BOOL: bool, _Kind.INT: int}


# Encoding


def to_dict(node: Node) -> Any:
    """Convert a node into JSON-compatible data."""
    tag = _TAGS.get(type(node))
    if tag is None:
        raise TypeError(f"not an AST node: {node!r}")
    cls = type(node)
    if cls in _UNIT_NODES:
        return tag
    if cls in _NEWTYPE_NODES:
        attr, kind = _NEWTYPE_NODES[cls]
        value = getattr(node, attr)
        return {tag: float(value) if kind is float else value}
    return {tag: _encode_struct(node)}


def _encode_struct(obj: Any) -> dict[str, Any]:
    return {
        _KEY_RENAMES.get(f.name, f.name): _encode_value(getattr(obj, f.name))
        for f in dataclasses.fields(obj)
    }


def _encode_value(value: Any) -> Any:
    if isinstance(value, Node) or type(value) in _TAGS:
        return to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_struct(value)
    return value


def to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to JSON text; compact unless ``indent`` is given."""
    data = to_dict(node)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


# Decoding


def from_dict(data: Any) -> Node:
    """Rebuild a node from data produced by :func:`to_dict`."""
    return _decode_node(data, "$")


def from_json(text: str) -> Node:
    """Parse JSON text produced by :func:`to_json` back into a node."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AstDecodeError(f"invalid JSON: {exc}") from exc
    return from_dict(data)


def _decode_node(data: Any, path: str) -> Node:
    if isinstance(data, str):
        cls = _CLASSES_BY_TAG.get(data)
        if cls in _UNIT_NODES:
            return cls()
        raise AstDecodeError(f"{path}: unknown unit node {data!r}")
    if not isinstance(data, dict) or len(data) != 1:
        raise AstDecodeError(f"{path}: expected an object holding exactly one node tag")
    ((tag, payload),) = data.items()
    cls = _CLASSES_BY_TAG.get(tag)
    if cls is None:
        raise AstDecodeError(f"{path}: unknown node type {tag!r}")
    inner = f"{path}.{tag}"
    if cls in _UNIT_NODES:
        raise AstDecodeError(f"{inner}: node carries no data and must be a plain string")
    if cls in _NEWTYPE_NODES:
        _, kind = _NEWTYPE_NODES[cls]
        return cls(_decode_scalar(payload, kind, inner))
    return _decode_struct(cls, payload, inner)


def _decode_struct(cls: type, payload: Any, path: str) -> Any:
    if not isinstance(payload, dict):
        raise AstDecodeError(f"{path}: expected an object")
    kwargs = {}
    for name, kind in _SCHEMAS[cls].items():
        key = _KEY_RENAMES.get(name, name)
        field_path = f"{path}.{key}"
        if key in payload:
            kwargs[name] = _decode_value(payload[key], kind, field_path)
        elif _is_optional(kind):
            kwargs[name] = None
        else:
            raise AstDecodeError(f"{field_path}: missing field")
    return cls(**kwargs)


def _is_optional(kind: Any) -> bool:
    if isinstance(kind, _Struct):
        return kind.optional
    return kind is _Kind.OPTIONAL_NODE


def _expect_list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise AstDecodeError(f"{path}: expected an array")
    return value


def _decode_value(value: Any, kind: Any, path: str) -> Any:
    if isinstance(kind, _Struct):
        if kind.optional and value is None:
            return None
        if kind.many:
            return [
                _decode_struct(kind.cls, item, f"{path}[{index}]")
                for index, item in enumerate(_expect_list(value, path))
            ]
        return _decode_struct(kind.cls, value, path)
    if kind is _Kind.NODE:
        return _decode_node(value, path)
    if kind is _Kind.OPTIONAL_NODE:
        return None if value is None else _decode_node(value, path)
    if kind is _Kind.NODES:
        return [
            _decode_node(item, f"{path}[{index}]")
            for index, item in enumerate(_expect_list(value, path))
        ]
    if kind is _Kind.NODES_WITH_HOLES:
        return [
            None if item is None else _decode_node(item, f"{path}[{index}]")
            for index, item in enumerate(_expect_list(value, path))
        ]
    return _decode_scalar(value, _SCALAR_TYPES[kind], path)


def _decode_scalar(value: Any, kind: type, path: str) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
        raise AstDecodeError(f"{path}: expected a boolean")
    if kind is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise AstDecodeError(f"{path}: expected a number")
    if kind is int:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        raise AstDecodeError(f"{path}: expected a non-negative integer")
    if kind is str:
        if isinstance(value, str):
            return value
        raise AstDecodeError(f"{path}: expected a string")
    raise TypeError(f"unsupported field type {kind!r}")