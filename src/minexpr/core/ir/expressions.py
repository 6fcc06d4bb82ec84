"""
Expression types for the minexpr IR.

A closed set of three node types:

- Literal: a number, always held as a float
- UnaryExpr: negation of an operand
- BinaryExpr: left op right, for + - * /

Nodes are frozen pydantic models. Each node owns its children and the tree is
never modified after the parser builds it.
"""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from minexpr.core.ir.tokens import Token

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEG = "-"


def format_number(value: float) -> str:
    """Format a float the way the tree printer and driver display it.

    Finite integral values drop the fractional part (``14.0`` -> ``14``);
    everything else keeps Python's shortest repr (``0.5``, ``inf``, ``nan``).
    """
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A parsed number."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class UnaryExpr(BaseModel):
    """Unary negation: -operand."""

    operator: Token = Field(description="The '-' token")
    operand: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def op(self) -> UnaryOp:
        return UnaryOp(self.operator.lexeme)

    def __str__(self) -> str:
        return f"-{self.operand}"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    operator: Token = Field(description="One of the '+', '-', '*', '/' tokens")
    right: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def op(self) -> BinaryOp:
        return BinaryOp(self.operator.lexeme)

    def __str__(self) -> str:
        return f"({self.left} {self.operator.lexeme} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | UnaryExpr | BinaryExpr

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
