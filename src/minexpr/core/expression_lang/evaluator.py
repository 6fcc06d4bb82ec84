"""
Expression evaluator for the minexpr arithmetic language.

Reduces an expression AST to a single float. Pure evaluation, no I/O.
Infinities and NaN produced by ordinary float arithmetic are passed through
unchanged; only an exact zero divisor is an error.

Trees are walked with an explicit stack, so long operator chains such as
``1+1+...+1`` (which parse into left-deep trees) evaluate at any depth.
"""

from __future__ import annotations

import logging

from minexpr.core.errors import EvalError
from minexpr.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal, UnaryExpr

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        EvalError: On division by zero.
    """
    result = _interpret(expr)
    logger.debug("Evaluated %s tree = %r", type(expr).__name__, result)
    return result


def _interpret(expr: Expr) -> float:
    """Post-order walk; operands are evaluated left before right."""
    values: list[float] = []
    # (node, children already evaluated)
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, ready = stack.pop()

        if isinstance(node, Literal):
            values.append(node.value)

        elif isinstance(node, UnaryExpr):
            if ready:
                values.append(-values.pop())
            else:
                stack.append((node, True))
                stack.append((node.operand, False))

        elif isinstance(node, BinaryExpr):
            if ready:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(node, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))

        else:
            raise EvalError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply_binary(expr: BinaryExpr, left: float, right: float) -> float:
    """Combine two evaluated operands."""
    op = expr.op
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        if right == 0:
            logger.debug("Division by zero at position %d", expr.operator.pos)
            raise EvalError("Division by zero")
        return left / right

    raise EvalError(f"Unknown binary op: {op}")
