"""
minexpr intermediate representation: tokens and the expression AST.
"""

from minexpr.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
    format_number,
)
from minexpr.core.ir.tokens import Token, TokenKind

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "Token",
    "TokenKind",
    "UnaryExpr",
    "UnaryOp",
    "format_number",
]
