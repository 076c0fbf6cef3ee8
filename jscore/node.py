"""Abstract syntax tree node definitions for ECMAScript programs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A line/column location in source text (both 1-based)."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """A range of source text between two positions."""

    start: Position
    end: Position

    @classmethod
    def from_positions(
        cls, start_line: int, start_col: int, end_line: int, end_col: int
    ) -> Span:
        """Build a span from raw line and column numbers."""
        return cls(Position(start_line, start_col), Position(end_line, end_col))


class Node:
    """Base class of every AST node."""


# Program structure


@dataclass
class Program(Node):
    body: list[Node] = field(default_factory=list)
    source_type: str = "script"
    span: Span | None = None


# Declarations


@dataclass
class VariableDeclarator:
    id: Node
    init: Node | None = None
    span: Span | None = None


@dataclass
class VariableDeclaration(Node):
    kind: str
    declarations: list[VariableDeclarator] = field(default_factory=list)
    span: Span | None = None


@dataclass
class FunctionDeclaration(Node):
    id: Node | None
    params: list[Node]
    body: Node
    generator: bool = False
    is_async: bool = False
    span: Span | None = None


@dataclass
class ClassDeclaration(Node):
    id: Node | None
    super_class: Node | None
    body: Node
    span: Span | None = None


@dataclass
class ImportDeclaration(Node):
    specifiers: list[Node]
    source: Node
    span: Span | None = None


@dataclass
class ImportSpecifier(Node):
    local: Node
    imported: Node
    span: Span | None = None


@dataclass
class ImportDefaultSpecifier(Node):
    local: Node
    span: Span | None = None


@dataclass
class ImportNamespaceSpecifier(Node):
    local: Node
    span: Span | None = None


@dataclass
class ExportDeclaration(Node):
    declaration: Node | None = None
    specifiers: list[Node] = field(default_factory=list)
    source: Node | None = None
    default: bool = False
    span: Span | None = None


@dataclass
class ExportSpecifier(Node):
    local: Node
    exported: Node
    span: Span | None = None


# Expressions


@dataclass
class BinaryExpression(Node):
    left: Node
    operator: str
    right: Node
    span: Span | None = None


@dataclass
class UnaryExpression(Node):
    operator: str
    argument: Node
    prefix: bool = True
    span: Span | None = None


@dataclass
class CallExpression(Node):
    callee: Node
    arguments: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class NewExpression(Node):
    callee: Node
    arguments: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class MemberExpression(Node):
    object: Node
    property: Node
    computed: bool = False
    optional: bool = False
    span: Span | None = None


@dataclass
class AssignmentExpression(Node):
    left: Node
    operator: str
    right: Node
    span: Span | None = None


@dataclass
class ConditionalExpression(Node):
    test: Node
    consequent: Node
    alternate: Node
    span: Span | None = None


@dataclass
class LogicalExpression(Node):
    left: Node
    operator: str
    right: Node
    span: Span | None = None


@dataclass
class UpdateExpression(Node):
    operator: str
    argument: Node
    prefix: bool
    span: Span | None = None


@dataclass
class ArrowFunctionExpression(Node):
    params: list[Node]
    body: Node
    expression: bool = False
    is_async: bool = False
    span: Span | None = None


@dataclass
class FunctionExpression(Node):
    id: Node | None
    params: list[Node]
    body: Node
    generator: bool = False
    is_async: bool = False
    span: Span | None = None


@dataclass
class ClassExpression(Node):
    id: Node | None
    super_class: Node | None
    body: Node
    span: Span | None = None


@dataclass
class YieldExpression(Node):
    argument: Node | None = None
    delegate: bool = False
    span: Span | None = None


@dataclass
class AwaitExpression(Node):
    argument: Node
    span: Span | None = None


# Statements


@dataclass
class BlockStatement(Node):
    body: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class IfStatement(Node):
    test: Node
    consequent: Node
    alternate: Node | None = None
    span: Span | None = None


@dataclass
class ForStatement(Node):
    init: Node | None
    test: Node | None
    update: Node | None
    body: Node
    span: Span | None = None


@dataclass
class WhileStatement(Node):
    test: Node
    body: Node
    span: Span | None = None


@dataclass
class DoWhileStatement(Node):
    body: Node
    test: Node
    span: Span | None = None


@dataclass
class SwitchCase:
    test: Node | None
    consequent: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class SwitchStatement(Node):
    discriminant: Node
    cases: list[SwitchCase] = field(default_factory=list)
    span: Span | None = None


@dataclass
class TryStatement(Node):
    block: Node
    handler: Node | None = None
    finalizer: Node | None = None
    span: Span | None = None


@dataclass
class CatchClause(Node):
    param: Node
    body: Node
    span: Span | None = None


@dataclass
class ThrowStatement(Node):
    argument: Node
    span: Span | None = None


@dataclass
class ReturnStatement(Node):
    argument: Node | None = None
    span: Span | None = None


@dataclass
class BreakStatement(Node):
    label: Node | None = None
    span: Span | None = None


@dataclass
class ContinueStatement(Node):
    label: Node | None = None
    span: Span | None = None


@dataclass
class LabeledStatement(Node):
    label: Node
    body: Node
    span: Span | None = None


@dataclass
class WithStatement(Node):
    object: Node
    body: Node
    span: Span | None = None


@dataclass
class DebuggerStatement(Node):
    span: Span | None = None


@dataclass
class ExpressionStatement(Node):
    expression: Node
    span: Span | None = None


# Literals and structures


@dataclass
class ArrayLiteral(Node):
    """An array literal; ``None`` elements are holes."""

    elements: list[Node | None] = field(default_factory=list)
    span: Span | None = None


@dataclass
class ObjectLiteral(Node):
    properties: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class Property(Node):
    key: Node
    value: Node
    kind: str = "init"
    computed: bool = False
    method: bool = False
    shorthand: bool = False
    span: Span | None = None


@dataclass
class TemplateElement:
    value: str
    tail: bool = False
    span: Span | None = None


@dataclass
class TemplateLiteral(Node):
    quasis: list[TemplateElement] = field(default_factory=list)
    expressions: list[Node] = field(default_factory=list)
    span: Span | None = None


@dataclass
class TaggedTemplateExpression(Node):
    tag: Node
    quasi: Node
    span: Span | None = None


@dataclass
class SpreadElement(Node):
    argument: Node
    span: Span | None = None


@dataclass
class RestElement(Node):
    argument: Node
    span: Span | None = None


@dataclass
class Super(Node):
    span: Span | None = None


@dataclass
class MetaProperty(Node):
    meta: Node
    property: Node
    span: Span | None = None


# Leaf nodes


@dataclass
class Identifier(Node):
    name: str


@dataclass
class NumberLiteral(Node):
    value: float


@dataclass
class StringLiteral(Node):
    value: str


@dataclass
class BooleanLiteral(Node):
    value: bool


@dataclass
class NullLiteral(Node):
    pass


@dataclass
class UndefinedLiteral(Node):
    pass


@dataclass
class ThisExpression(Node):
    pass


@dataclass
class RegExpLiteral(Node):
    pattern: str
    flags: str = ""
    span: Span | None = None


@dataclass
class BigIntLiteral(Node):
    value: str