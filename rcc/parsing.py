"""Recursive-descent parser turning a token list into an abstract syntax tree.

Grammar::

    <program>    ::= <function>
    <function>   ::= "int" <identifier> "(" "void" ")" "{" <statement> "}"
    <statement>  ::= "return" <exp> ";"
    <exp>        ::= <int>

Every ``parse_*`` method consumes the tokens it reads from the front of the
given list, so that the caller can check what is left afterwards.
"""

from __future__ import annotations

import re

from rcc.ast_model import Constant, Expression, Function, Program, Return, Statement

_IDENTIFIER = re.compile(r"[A-Za-z_]\w*", re.ASCII)
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the tokens do not form a valid program fragment."""


class Parser:
    """Parser for the supported C subset."""

    def parse_program(self, tokens: list[str]) -> Program:
        """Parse a whole program."""
        try:
            function = self.parse_function(tokens)
        except ParseError as exc:
            raise ParseError("Invalid program") from exc
        return Program(function)

    def parse_constant(self, tokens: list[str]) -> Constant:
        """Parse a 32-bit signed integer literal."""
        if not tokens:
            raise ParseError("Empty token list")
        text = tokens.pop(0)
        if not _INTEGER.fullmatch(text):
            raise ParseError("Invalid constant")
        value = int(text)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ParseError("Invalid constant")
        return Constant(value)

    def parse_expression(self, tokens: list[str]) -> Expression:
        """Parse an expression."""
        try:
            constant = self.parse_constant(tokens)
        except ParseError as exc:
            raise ParseError("Invalid expression") from exc
        return Expression(constant)

    def parse_return(self, tokens: list[str]) -> Return:
        """Parse ``return <exp> ;``."""
        if not tokens or tokens[0] != "return":
            raise ParseError("Invalid expression")
        tokens.pop(0)
        expression = self.parse_expression(tokens)
        if not tokens or tokens[0] != ";":
            raise ParseError("Invalid expression")
        tokens.pop(0)
        return Return(expression)

    def parse_statement(self, tokens: list[str]) -> Statement:
        """Parse a statement."""
        try:
            return_exp = self.parse_return(tokens)
        except ParseError as exc:
            raise ParseError("Invalid expression") from exc
        return Statement(return_exp)

    def parse_function(self, tokens: list[str]) -> Function:
        """Parse ``int <identifier> ( void ) { <statement> }``."""
        self._expect(tokens, "int")
        if not tokens:
            raise ParseError("Missing function identifier")
        identifier = tokens.pop(0)
        if not _IDENTIFIER.fullmatch(identifier):
            raise ParseError("Invalid identifier")
        for expected in ("(", "void", ")", "{"):
            self._expect(tokens, expected)
        try:
            body = self.parse_statement(tokens)
        except ParseError as exc:
            raise ParseError("Invalid function body") from exc
        self._expect(tokens, "}")
        return Function(identifier, body)

    @staticmethod
    def _expect(tokens: list[str], token: str) -> None:
        if not tokens or tokens[0] != token:
            raise ParseError(f"Expected {token!r}")
        tokens.pop(0)