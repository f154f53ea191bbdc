"""Assembly-level constructs produced by code generation."""

from __future__ import annotations

from dataclasses import dataclass, field


class Instruction:
    """Base class for every assembly instruction."""

    __slots__ = ()


class Operand:
    """Base class for every instruction operand."""

    __slots__ = ()


@dataclass(frozen=True)
class Imm(Operand):
    """An immediate integer operand."""

    value: int


@dataclass(frozen=True)
class Register(Operand):
    """The return-value register."""


@dataclass(frozen=True)
class Mov(Instruction):
    """Copy ``src`` into ``dest``."""

    src: Operand
    dest: Operand


@dataclass(frozen=True)
class AsmReturn(Instruction):
    """Return from the current function."""


@dataclass
class FunctionDefinition:
    """A named function and the instructions that make up its body."""

    identifier: str
    instructions: list[Instruction] = field(default_factory=list)


@dataclass
class AsmProgram:
    """A whole assembly program: a single function definition."""

    function_definition: FunctionDefinition