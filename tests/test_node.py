import copy

from jscore.node import (
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
    ExportSpecifier,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    LabeledStatement,
    LogicalExpression,
    MemberExpression,
    MetaProperty,
    NewExpression,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    Position,
    Program,
    Property,
    RegExpLiteral,
    RestElement,
    ReturnStatement,
    Span,
    SpreadElement,
    StringLiteral,
    Super,
    SwitchCase,
    SwitchStatement,
    TaggedTemplateExpression,
    TemplateElement,
    TemplateLiteral,
    ThisExpression,
    ThrowStatement,
    TryStatement,
    UnaryExpression,
    UndefinedLiteral,
    UpdateExpression,
    VariableDeclaration,
    VariableDeclarator,
    WhileStatement,
    WithStatement,
)


def ident(name):
    return Identifier(name)


def var_decl(kind, name, init=None):
    return VariableDeclaration(kind, [VariableDeclarator(ident(name), init)])


def func_decl(name, params, body):
    return FunctionDeclaration(ident(name), params, body)


def test_position_creation():
    pos = Position(1, 5)
    assert pos.line == 1
    assert pos.column == 5


def test_position_default_and_str():
    assert Position() == Position(1, 1)
    assert str(Position(3, 7)) == "3:7"


def test_span_creation():
    span = Span(Position(1, 1), Position(1, 10))
    assert span.start.line == 1
    assert span.start.column == 1
    assert span.end.line == 1
    assert span.end.column == 10


def test_span_from_positions():
    span = Span.from_positions(1, 1, 2, 5)
    assert span.start == Position(1, 1)
    assert span.end == Position(2, 5)


def test_literal_nodes():
    assert Identifier("x").name == "x"
    assert NumberLiteral(42.0).value == 42.0
    assert StringLiteral("hello").value == "hello"
    assert BooleanLiteral(True).value is True
    assert NullLiteral() == NullLiteral()
    assert UndefinedLiteral() == UndefinedLiteral()
    assert ThisExpression() == ThisExpression()
    assert BigIntLiteral("42n").value == "42n"
    regexp = RegExpLiteral("\\d+", "g")
    assert regexp.pattern == "\\d+"
    assert regexp.flags == "g"


def test_binary_expression():
    binary = BinaryExpression(ident("a"), "+", ident("b"))
    assert binary.operator == "+"
    assert binary.left == Identifier("a")
    assert binary.right == Identifier("b")
    assert binary.span is None


def test_program():
    program = Program([ident("x"), NumberLiteral(42.0)])
    assert len(program.body) == 2
    assert program.source_type == "script"


def test_expression_nodes():
    unary = UnaryExpression("!", ident("x"), True)
    assert unary.operator == "!" and unary.prefix is True

    args = [NumberLiteral(1.0), NumberLiteral(2.0)]
    assert len(CallExpression(ident("fn"), args).arguments) == 2
    assert len(NewExpression(ident("fn"), args).arguments) == 2

    member = MemberExpression(ident("obj"), ident("prop"), False)
    assert member.computed is False
    assert member.optional is False

    assign = AssignmentExpression(ident("a"), "=", ident("b"))
    assert assign.operator == "="

    cond = ConditionalExpression(ident("condition"), ident("t"), ident("f"))
    assert cond.alternate == Identifier("f")

    logical = LogicalExpression(ident("a"), "&&", ident("b"))
    assert logical.operator == "&&"

    update = UpdateExpression("++", ident("x"), True)
    assert update.operator == "++" and update.prefix is True


def test_statement_nodes():
    decl = var_decl("let", "x", NumberLiteral(42.0))
    assert decl.kind == "let"
    assert decl.declarations[0].init == NumberLiteral(42.0)

    func = func_decl("fn", [ident("param")], BlockStatement([]))
    assert len(func.params) == 1
    assert func.generator is False and func.is_async is False

    assert len(BlockStatement([ident("stmt")]).body) == 1

    if_stmt = IfStatement(ident("condition"), BlockStatement([]))
    assert if_stmt.alternate is None

    assert WhileStatement(ident("t"), BlockStatement([])).test == Identifier("t")
    assert DoWhileStatement(BlockStatement([]), ident("t")).body == BlockStatement([])

    for_stmt = ForStatement(ident("init"), ident("test"), ident("update"), BlockStatement([]))
    assert for_stmt.update == Identifier("update")

    assert ReturnStatement(ident("value")).argument == Identifier("value")
    assert BreakStatement(ident("label")).label == Identifier("label")
    assert ContinueStatement(ident("label")).label == Identifier("label")
    assert LabeledStatement(ident("label"), BlockStatement([])).label == Identifier("label")
    assert DebuggerStatement().span is None
    assert ExpressionStatement(ident("expr")).expression == Identifier("expr")
    assert WithStatement(ident("obj"), BlockStatement([])).object == Identifier("obj")


def test_literal_structures():
    array = ArrayLiteral([NumberLiteral(1.0), NumberLiteral(2.0), None])
    assert len(array.elements) == 3
    assert array.elements[2] is None

    prop = Property(ident("key"), StringLiteral("value"), "init")
    assert prop.kind == "init"
    assert ObjectLiteral([prop]).properties == [prop]

    template = TemplateLiteral(
        [TemplateElement("Hello ", False), TemplateElement("!", True)],
        [ident("name")],
    )
    assert len(template.quasis) == 2 and len(template.expressions) == 1
    assert template.quasis[1].tail is True

    tagged = TaggedTemplateExpression(ident("tag"), TemplateLiteral([], []))
    assert tagged.quasi == TemplateLiteral()


def test_function_and_class_nodes():
    arrow = ArrowFunctionExpression([ident("x")], ident("x"), True)
    assert arrow.expression is True
    assert arrow.is_async is False

    func = FunctionExpression(ident("name"), [], BlockStatement([]))
    assert func.id == Identifier("name")

    decl = ClassDeclaration(ident("MyClass"), ident("Parent"), BlockStatement([]))
    assert decl.super_class == Identifier("Parent")

    expr = ClassExpression(ident("MyClass"), ident("Parent"), BlockStatement([]))
    assert expr.id == Identifier("MyClass")


def test_control_flow_nodes():
    cases = [
        SwitchCase(NumberLiteral(1.0), [ident("case1")]),
        SwitchCase(None, [ident("default")]),
    ]
    switch = SwitchStatement(ident("value"), cases)
    assert len(switch.cases) == 2
    assert switch.cases[1].test is None

    try_stmt = TryStatement(
        BlockStatement([]),
        CatchClause(ident("error"), BlockStatement([])),
        BlockStatement([]),
    )
    assert try_stmt.handler == CatchClause(ident("error"), BlockStatement([]))

    assert ThrowStatement(ident("error")).argument == Identifier("error")


def test_es6_features():
    assert SpreadElement(ident("array")).argument == Identifier("array")
    assert RestElement(ident("args")).argument == Identifier("args")
    assert Super().span is None
    meta = MetaProperty(ident("new"), ident("target"))
    assert meta.property == Identifier("target")
    yield_expr = YieldExpressionFactory.make()
    assert yield_expr.delegate is False
    assert AwaitExpression(ident("promise")).argument == Identifier("promise")


class YieldExpressionFactory:
    @staticmethod
    def make():
        from jscore.node import YieldExpression

        return YieldExpression(ident("value"), False)


def test_module_nodes():
    specifier = ImportSpecifier(ident("local"), ident("imported"))
    decl = ImportDeclaration([specifier], StringLiteral("module"))
    assert len(decl.specifiers) == 1
    assert decl.source == StringLiteral("module")

    assert ImportDefaultSpecifier(ident("default")).local == Identifier("default")
    assert ImportNamespaceSpecifier(ident("namespace")).local == Identifier("namespace")

    export = ExportDeclaration(ident("exported"), [], None, False)
    assert export.default is False
    assert ExportSpecifier(ident("local"), ident("exported")).exported == Identifier("exported")


def test_program_node():
    program = Program(
        [
            var_decl("let", "x", NumberLiteral(42.0)),
            func_decl("fn", [], BlockStatement([])),
        ]
    )
    assert len(program.body) == 2
    assert program.source_type == "script"


def test_node_equality():
    assert Identifier("x") == Identifier("x")
    assert Identifier("x") != Identifier("y")
    assert NumberLiteral(42.0) == NumberLiteral(42.0)
    assert NumberLiteral(42.0) != NumberLiteral(43.0)
    assert Identifier("x") != StringLiteral("x")


def test_node_cloning():
    original = BinaryExpression(ident("a"), "+", ident("b"))
    cloned = copy.deepcopy(original)
    assert original == cloned
    cloned.left.name = "z"
    assert original.left == Identifier("a")


def test_default_lists_are_independent():
    first = ArrayLiteral()
    second = ArrayLiteral()
    first.elements.append(NumberLiteral(1.0))
    assert second.elements == []


def test_node_hierarchy():
    program = Program()
    assert program.body == []
    assert isinstance(program, Node)

    name = Identifier("x")
    assert name.name == "x"
    assert isinstance(name, Node)

    declarator = VariableDeclarator(ident("x"))
    assert declarator.id == Identifier("x")
    assert declarator.init is None
    assert not isinstance(declarator, Node)

    case = SwitchCase(None)
    assert case.test is None
    assert not isinstance(case, Node)

    element = TemplateElement("a")
    assert element.value == "a"
    assert not isinstance(element, Node)


def test_complex_nested_structure():
    program = Program(
        [
            var_decl(
                "const",
                "result",
                BinaryExpression(
                    CallExpression(
                        MemberExpression(ident("Math"), ident("pow"), False),
                        [NumberLiteral(2.0), NumberLiteral(3.0)],
                    ),
                    "+",
                    ConditionalExpression(
                        ident("condition"), StringLiteral("true"), StringLiteral("false")
                    ),
                ),
            ),
            func_decl(
                "calculate",
                [ident("x")],
                BlockStatement(
                    [ReturnStatement(BinaryExpression(ident("x"), "*", NumberLiteral(2.0)))]
                ),
            ),
            IfStatement(
                LogicalExpression(ident("a"), "&&", ident("b")),
                BlockStatement(
                    [ExpressionStatement(AssignmentExpression(ident("result"), "=", NumberLiteral(1.0)))]
                ),
                BlockStatement(
                    [ExpressionStatement(AssignmentExpression(ident("result"), "=", NumberLiteral(0.0)))]
                ),
            ),
        ]
    )
    assert len(program.body) == 3
    first = program.body[0]
    assert isinstance(first, VariableDeclaration)
    assert first.kind == "const"
    assert len(first.declarations) == 1
    assert first.declarations[0].init.operator == "+"