"""Bytecode instruction set and constant pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Opcode", "Instruction", "ConstantKind", "Constant", "ConstantPool"]


class Opcode(Enum):
    """Every operation the bytecode can express."""

    # Stack operations
    PUSH_CONST = "PushConst"
    POP = "Pop"
    DUP = "Dup"
    # Arithmetic
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    MOD = "Mod"
    INC = "Inc"
    DEC = "Dec"
    # Logical
    AND = "And"
    OR = "Or"
    NOT = "Not"
    XOR = "Xor"
    # Comparison
    EQ = "Eq"
    NE = "Ne"
    LT = "Lt"
    GT = "Gt"
    LE = "Le"
    GE = "Ge"
    STRICT_EQ = "StrictEq"
    STRICT_NE = "StrictNe"
    # Variables
    LOAD_GLOBAL = "LoadGlobal"
    STORE_GLOBAL = "StoreGlobal"
    LOAD_LOCAL = "LoadLocal"
    STORE_LOCAL = "StoreLocal"
    # Control flow
    JUMP = "Jump"
    JUMP_IF_TRUE = "JumpIfTrue"
    JUMP_IF_FALSE = "JumpIfFalse"
    # Functions
    CALL = "Call"
    RETURN = "Return"
    # Objects and arrays
    NEW_OBJECT = "NewObject"
    NEW_ARRAY = "NewArray"
    SET_PROPERTY = "SetProperty"
    GET_PROPERTY = "GetProperty"
    # Special
    TYPE_OF = "TypeOf"
    INSTANCE_OF = "InstanceOf"
    IN = "In"
    DELETE = "Delete"
    NEW = "New"
    # Classes and prototypes
    NEW_CLASS = "NewClass"
    GET_PROTOTYPE = "GetPrototype"
    SET_PROTOTYPE = "SetPrototype"
    # Async and generators
    AWAIT = "Await"
    YIELD = "Yield"
    # Exception handling
    THROW = "Throw"
    TRY = "Try"
    CATCH = "Catch"
    FINALLY = "Finally"
    # Modern language features
    SPREAD = "Spread"
    DESTRUCTURE = "Destructure"
    OPTIONAL_CHAIN = "OptionalChain"
    NULLISH_COALESCE = "NullishCoalesce"
    # Literals
    PUSH_NULL = "PushNull"
    PUSH_UNDEFINED = "PushUndefined"
    PUSH_TRUE = "PushTrue"
    PUSH_FALSE = "PushFalse"
    PUSH_SYMBOL = "PushSymbol"
    PUSH_BIG_INT = "PushBigInt"

    @property
    def operand_types(self) -> tuple[type, ...]:
        """Types of the operands an instruction with this opcode carries."""
        return _OPERAND_TYPES.get(self, ())


_OPERAND_TYPES: dict[Opcode, tuple[type, ...]] = {
    Opcode.PUSH_CONST: (int,),
    Opcode.LOAD_GLOBAL: (str,),
    Opcode.STORE_GLOBAL: (str,),
    Opcode.LOAD_LOCAL: (int,),
    Opcode.STORE_LOCAL: (int,),
    Opcode.JUMP: (int,),
    Opcode.JUMP_IF_TRUE: (int,),
    Opcode.JUMP_IF_FALSE: (int,),
    Opcode.CALL: (int,),
    Opcode.NEW_ARRAY: (int,),
    Opcode.TRY: (int, int),
    Opcode.PUSH_SYMBOL: (int,),
    Opcode.PUSH_BIG_INT: (int,),
}


@dataclass(frozen=True, init=False)
class Instruction:
    """A single bytecode instruction: an opcode and its operands."""

    opcode: Opcode
    operands: tuple[int | str, ...]

    def __init__(self, opcode: Opcode, *operands: int | str) -> None:
        if not isinstance(opcode, Opcode):
            raise TypeError(f"not an opcode: {opcode!r}")
        expected = opcode.operand_types
        if len(operands) != len(expected):
            raise TypeError(
                f"{opcode.value} takes {len(expected)} operand(s), got {len(operands)}"
            )
        for value, kind in zip(operands, expected):
            if kind is int:
                if not isinstance(value, int) or isinstance(value, bool):
                    raise TypeError(f"{opcode.value} operand must be an integer")
                if value < 0:
                    raise ValueError(f"{opcode.value} operand must not be negative")
            elif not isinstance(value, str):
                raise TypeError(f"{opcode.value} operand must be a string")
        object.__setattr__(self, "opcode", opcode)
        object.__setattr__(self, "operands", tuple(operands))

    def __str__(self) -> str:
        if not self.operands:
            return self.opcode.value
        shown = ", ".join(
            repr(value) if isinstance(value, str) else str(value) for value in self.operands
        )
        return f"{self.opcode.value}({shown})"


class ConstantKind(Enum):
    """Kinds of values that may live in the constant pool."""

    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    SYMBOL = "Symbol"
    BIGINT = "BigInt"


@dataclass(frozen=True)
class Constant:
    """A typed constant value referenced by index from the bytecode."""

    kind: ConstantKind
    value: float | str | bool

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ConstantKind):
            raise TypeError(f"not a constant kind: {self.kind!r}")
        if self.kind is ConstantKind.NUMBER:
            if not isinstance(self.value, (int, float)) or isinstance(self.value, bool):
                raise TypeError("a number constant needs a numeric value")
            object.__setattr__(self, "value", float(self.value))
        elif self.kind is ConstantKind.BOOLEAN:
            if not isinstance(self.value, bool):
                raise TypeError("a boolean constant needs a bool value")
        elif not isinstance(self.value, str):
            raise TypeError(f"a {self.kind.value} constant needs a string value")


@dataclass
class ConstantPool:
    """Ordered store of constants; every addition gets a fresh index."""

    values: list[Constant] = field(default_factory=list)

    def add(self, value: Constant) -> int:
        """Append a constant and return its index."""
        if not isinstance(value, Constant):
            raise TypeError(f"not a constant: {value!r}")
        self.values.append(value)
        return len(self.values) - 1

    def __len__(self) -> int:
        return len(self.values)