# jscore

Building blocks for a JavaScript engine, written as a plain Python library
with no third-party dependencies.

## What is in it

- **Syntax trees** (`jscore.node`): dataclasses for the ECMAScript node
  kinds, all subclasses of `Node`: `Program`, `VariableDeclaration`,
  `FunctionDeclaration`, `BinaryExpression`, `CallExpression`,
  `IfStatement`, `SwitchStatement`, `TemplateLiteral`, `ImportDeclaration`
  and many more. Leaf values are `Identifier`, `NumberLiteral`,
  `StringLiteral`, `BooleanLiteral`, `NullLiteral`, `UndefinedLiteral`,
  `ThisExpression`, `RegExpLiteral` and `BigIntLiteral`. Source locations
  use `Position` (printed as `line:column`) and `Span`, which has
  `Span.from_positions(start_line, start_col, end_line, end_col)`.
- **JSON encoding** (`jscore.serialization`): `to_dict`, `from_dict`,
  `to_json(node, indent=None)` and `from_json`. Nodes are externally tagged
  (`{"BinaryExpression": {...}}`, `{"Identifier": "x"}`, `"Null"`).
  Malformed or incomplete input raises `AstDecodeError`, a `ValueError`.
- **Traversal** (`jscore.visitor`): `Visitor.visit_node` calls a
  `visit_<kind>` method named after the node type (`visit_binary_expression`,
  `visit_identifier`, `visit_number`, ...) and falls back to
  `generic_visit`, which visits every child. Two visitors come with it:
  `NodeCounter`, which counts nodes in its `count` attribute, and
  `AstPrinter`, which writes an indented outline to a stream (standard
  output by default).
- **Bytecode** (`jscore.instructions`, `jscore.generator`): the `Opcode`
  enum, `Instruction(opcode, *operands)` with operand checking,
  `Constant`/`ConstantKind`, and `ConstantPool`, whose `add` returns the new
  index. `BytecodeGenerator.generate(node)` appends to the generator's
  `instructions` list and `constants` pool. A binary operator other than
  `+ - * /` raises `UnsupportedOperatorError`.
- **Memory** (`jscore.memory`): `heap.Heap`, a bump allocator with a fixed
  capacity; `collector.Collector`, which keeps a running heap size;
  `mark_sweep.MarkSweepCollector`, which records marked object ids; and
  `object_tracker.ObjectTracker`, which hands out object ids and records
  references between them.

## Installation

```
pip install .
```

## Example

```python
from jscore.generator import BytecodeGenerator
from jscore.node import BinaryExpression, ExpressionStatement, NumberLiteral, Program
from jscore.serialization import from_json, to_json
from jscore.visitor import NodeCounter

expr = BinaryExpression(left=NumberLiteral(2.0), operator="+", right=NumberLiteral(3.0))
program = Program(body=[ExpressionStatement(expression=expr)])

gen = BytecodeGenerator()
gen.generate(expr)
print([str(i) for i in gen.instructions])        # ['PushConst(0)', 'PushConst(1)', 'Add']
print([c.value for c in gen.constants.values])   # [2.0, 3.0]

assert from_json(to_json(program)) == program

counter = NodeCounter()
counter.visit_node(program)
print(counter.count)                             # 5
```

```python
from jscore.memory.heap import Heap
from jscore.memory.object_tracker import ObjectTracker

heap = Heap(64)
heap.allocate(16)        # 0
heap.allocate(16)        # 16
heap.allocate(64)        # raises MemoryError; the heap is unchanged

tracker = ObjectTracker()
a = tracker.track_object(8)    # 1
b = tracker.track_object(8)    # 2
tracker.add_reference(a, b)
tracker.get_references(a)      # (2,)
tracker.get_references(99)     # None
```

## What it does not do

- There is no lexer or parser: trees are built by hand or loaded with
  `from_json`.
- Nothing executes the bytecode. The generator is a simple tree walk:
  every identifier, `this` and `super` loads local slot 0, assignments store
  to slot 0, `break`/`continue` emit `Jump(0)`, `try` emits `Try(0, 0)`, and
  conditionals and loops emit no jumps.
- The memory classes do bookkeeping only. `MarkSweepCollector.sweep`
  returns an empty list and `collect` forgets the marks; `Collector.collect`
  manages no objects that can be registered from outside.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```