"""Abstract syntax tree of the supported C subset and its lowering to assembly."""

from __future__ import annotations

from dataclasses import dataclass

from rcc.asm_constructs import (
    AsmProgram,
    AsmReturn,
    FunctionDefinition,
    Imm,
    Instruction,
    Mov,
    Operand,
    Register,
)


@dataclass(frozen=True)
class Constant:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class Expression:
    """An expression; currently always a constant."""

    constant: Constant

    def to_asm(self) -> Operand:
        """Lower the expression to an immediate operand."""
        return Imm(self.constant.value)


@dataclass(frozen=True)
class Return:
    """A ``return <expression>;`` statement."""

    expression: Expression

    def to_asm(self) -> list[Instruction]:
        """Move the value into the return register, then return."""
        return [Mov(src=self.expression.to_asm(), dest=Register()), AsmReturn()]


@dataclass(frozen=True)
class Statement:
    """A statement; currently always a return statement."""

    return_exp: Return

    def to_asm(self) -> list[Instruction]:
        """Lower the statement to a list of instructions."""
        return list(self.return_exp.to_asm())


@dataclass(frozen=True)
class Function:
    """A function with a name and a single-statement body."""

    identifier: str
    body: Statement

    def to_asm(self) -> FunctionDefinition:
        """Lower the function to an assembly function definition."""
        return FunctionDefinition(self.identifier, self.body.to_asm())


@dataclass(frozen=True)
class Program:
    """A whole program: a single function."""

    function: Function

    def to_asm(self) -> AsmProgram:
        """Lower the program to an assembly program."""
        return AsmProgram(self.function.to_asm())