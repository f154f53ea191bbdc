import pytest

from rcc.asm_constructs import (
    AsmProgram,
    AsmReturn,
    FunctionDefinition,
    Imm,
    Mov,
    Register,
)
from rcc.ast_model import Constant, Expression, Function, Program, Return, Statement


def _program(name: str, value: int) -> Program:
    return Program(Function(name, Statement(Return(Expression(Constant(value))))))


@pytest.mark.parametrize("value", [0, 2, 123, -5])
def test_expression_lowers_to_immediate(value):
    assert Expression(Constant(value)).to_asm() == Imm(value)


def test_return_lowers_to_mov_then_return():
    instructions = Return(Expression(Constant(123))).to_asm()
    assert instructions == [Mov(src=Imm(123), dest=Register()), AsmReturn()]


def test_statement_lowers_like_its_return():
    ret = Return(Expression(Constant(2)))
    assert Statement(ret).to_asm() == ret.to_asm()


def test_statement_returns_fresh_list():
    statement = Statement(Return(Expression(Constant(2))))
    first = statement.to_asm()
    first.clear()
    assert len(statement.to_asm()) == 2


def test_function_lowers_to_definition():
    function = _program("main", 2).function
    definition = function.to_asm()
    assert definition.identifier == "main"
    assert definition.instructions == [Mov(Imm(2), Register()), AsmReturn()]


def test_program_lowers_to_asm_program():
    asm = _program("main", 2).to_asm()
    assert asm == AsmProgram(
        FunctionDefinition("main", [Mov(Imm(2), Register()), AsmReturn()])
    )


def test_program_keeps_identifier():
    asm = _program("compute", 7).to_asm()
    assert asm.function_definition.identifier == "compute"
    assert asm.function_definition.instructions[0] == Mov(Imm(7), Register())


def test_ast_nodes_compare_by_value():
    assert _program("main", 2) == _program("main", 2)
    assert _program("main", 2) != _program("main", 3)