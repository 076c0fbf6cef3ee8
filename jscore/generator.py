"""Translation of AST nodes into stack-machine bytecode."""

from __future__ import annotations

from .instructions import Constant, ConstantKind, ConstantPool, Instruction, Opcode
from .node import (
    ArrayLiteral,
    ArrowFunctionExpression,
    AssignmentExpression,
    AwaitExpression,
    BigIntLiteral,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    BreakStatement,
    CallExpression,
    CatchClause,
    ClassDeclaration,
    ClassExpression,
    ConditionalExpression,
    ContinueStatement,
    DebuggerStatement,
    DoWhileStatement,
    ExportDeclaration,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    ImportDeclaration,
    LabeledStatement,
    LogicalExpression,
    MemberExpression,
    MetaProperty,
    NewExpression,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    Program,
    Property,
    RegExpLiteral,
    RestElement,
    ReturnStatement,
    SpreadElement,
    StringLiteral,
    Super,
    SwitchStatement,
    TaggedTemplateExpression,
    TemplateLiteral,
    ThisExpression,
    ThrowStatement,
    TryStatement,
    UndefinedLiteral,
    UnaryExpression,
    UpdateExpression,
    VariableDeclaration,
    WhileStatement,
    WithStatement,
)

__all__ = ["UnsupportedOperatorError", "BytecodeGenerator"]


class UnsupportedOperatorError(ValueError):
    """Raised for a binary operator the generator cannot translate."""


_BINARY_OPCODES = {
    "+": Opcode.ADD,
    "-": Opcode.SUB,
    "*": Opcode.MUL,
    "/": Opcode.DIV,
}


class BytecodeGenerator:
    """Walks a tree and appends instructions and constants as it goes."""

    def __init__(self) -> None:
        self.constants = ConstantPool()
        self.instructions: list[Instruction] = []

    def generate(self, node: Node) -> None:
        """Append the bytecode for ``node`` to this generator's output."""
        self._visit(node)

    def _emit(self, opcode: Opcode, *operands: int | str) -> None:
        self.instructions.append(Instruction(opcode, *operands))

    def _push_constant(
        self, kind: ConstantKind, value: float | str | bool, opcode: Opcode = Opcode.PUSH_CONST
    ) -> None:
        self._emit(opcode, self.constants.add(Constant(kind, value)))

    def _visit_all(self, *nodes: Node | None) -> None:
        for child in nodes:
            if child is not None:
                self._visit(child)

    def _visit(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise TypeError(f"not an AST node: {node!r}")
        match node:
            case Program() | BlockStatement():
                self._visit_all(*node.body)
            case VariableDeclaration():
                for declarator in node.declarations:
                    self._visit(declarator.id)
                    if declarator.init is not None:
                        self._visit(declarator.init)
                        self._emit(Opcode.STORE_LOCAL, 0)
            case FunctionDeclaration() | FunctionExpression():
                self._visit_all(node.id, *node.params, node.body)
            case ClassDeclaration() | ClassExpression():
                self._visit_all(node.id, node.super_class, node.body)
                self._emit(Opcode.NEW_CLASS)
            case ImportDeclaration() | ExportDeclaration() | DebuggerStatement() | MetaProperty():
                pass
            case YieldExpression():
                self._visit_all(node.argument)
                self._emit(Opcode.YIELD)
            case AwaitExpression():
                self._visit(node.argument)
                self._emit(Opcode.AWAIT)
            case SwitchStatement():
                self._visit(node.discriminant)
                for case in node.cases:
                    self._visit_all(case.test, *case.consequent)
            case TryStatement():
                self._visit_all(node.block, node.handler, node.finalizer)
                self._emit(Opcode.TRY, 0, 0)
            case CatchClause():
                self._visit_all(node.param, node.body)
                self._emit(Opcode.CATCH)
            case ThrowStatement():
                self._visit(node.argument)
                self._emit(Opcode.THROW)
            case ReturnStatement():
                self._visit_all(node.argument)
                self._emit(Opcode.RETURN)
            case BreakStatement() | ContinueStatement():
                self._emit(Opcode.JUMP, 0)
            case LabeledStatement():
                self._visit_all(node.label, node.body)
            case WithStatement():
                self._visit_all(node.object, node.body)
            case TemplateLiteral():
                self._visit_all(*node.expressions)
            case TaggedTemplateExpression():
                self._visit_all(node.tag, node.quasi)
            case Super() | Identifier() | ThisExpression():
                self._emit(Opcode.LOAD_LOCAL, 0)
            case SpreadElement():
                self._visit(node.argument)
                self._emit(Opcode.SPREAD)
            case RegExpLiteral():
                self._push_constant(ConstantKind.STRING, node.pattern)
            case BigIntLiteral():
                self._push_constant(ConstantKind.BIGINT, node.value, Opcode.PUSH_BIG_INT)
            case BinaryExpression():
                self._visit_all(node.left, node.right)
                opcode = _BINARY_OPCODES.get(node.operator)
                if opcode is None:
                    raise UnsupportedOperatorError(
                        f"operator {node.operator!r} is not supported"
                    )
                self._emit(opcode)
            case UnaryExpression() | UpdateExpression() | RestElement():
                self._visit(node.argument)
            case CallExpression():
                self._visit_all(*node.arguments, node.callee)
                self._emit(Opcode.CALL, len(node.arguments))
            case NewExpression():
                self._visit_all(*node.arguments, node.callee)
                self._emit(Opcode.NEW)
            case MemberExpression():
                self._visit_all(node.object, node.property)
                self._emit(Opcode.GET_PROPERTY)
            case AssignmentExpression():
                self._visit_all(node.right, node.left)
                self._emit(Opcode.STORE_LOCAL, 0)
            case ConditionalExpression():
                self._visit_all(node.test, node.consequent, node.alternate)
            case LogicalExpression():
                self._visit_all(node.left, node.right)
            case ArrowFunctionExpression():
                self._visit_all(*node.params, node.body)
            case IfStatement():
                self._visit_all(node.test, node.consequent, node.alternate)
            case ForStatement():
                self._visit_all(node.init, node.test, node.update, node.body)
            case WhileStatement():
                self._visit_all(node.test, node.body)
            case DoWhileStatement():
                self._visit_all(node.body, node.test)
            case ExpressionStatement():
                self._visit(node.expression)
            case ArrayLiteral():
                self._visit_all(*node.elements)
                self._emit(Opcode.NEW_ARRAY, len(node.elements))
            case ObjectLiteral():
                self._visit_all(*node.properties)
                self._emit(Opcode.NEW_OBJECT)
            case Property():
                self._visit_all(node.key, node.value)
            case NumberLiteral():
                self._push_constant(ConstantKind.NUMBER, node.value)
            case StringLiteral():
                self._push_constant(ConstantKind.STRING, node.value)
            case BooleanLiteral():
                self._push_constant(ConstantKind.BOOLEAN, node.value)
            case NullLiteral():
                self._emit(Opcode.PUSH_NULL)
            case UndefinedLiteral():
                self._emit(Opcode.PUSH_UNDEFINED)
            case _:
                raise TypeError(f"cannot generate bytecode for {type(node).__name__}")


# Imported late to keep the long import list above alphabetical by group.
from .node import YieldExpression  # noqa: E402