"""
Indented tree rendering of expression ASTs, for diagnostics.

Pre-order traversal: each node contributes one line indented by two spaces
per level of depth, followed by its children. Binary nodes list the left
operand before the right.
"""

from __future__ import annotations

from collections.abc import Iterator

from minexpr.core.ir.expressions import BinaryExpr, Expr, Literal, UnaryExpr, format_number

INDENT = "  "


def iter_lines(expr: Expr, depth: int = 0) -> Iterator[str]:
    """Yield the rendered lines of ``expr`` one at a time."""
    # Explicit stack: left-deep operator chains can be thousands of levels deep
    stack: list[tuple[Expr, int]] = [(expr, depth)]

    while stack:
        node, level = stack.pop()
        prefix = INDENT * level

        if isinstance(node, Literal):
            yield prefix + format_number(node.value)

        elif isinstance(node, UnaryExpr):
            yield prefix + node.operator.lexeme
            stack.append((node.operand, level + 1))

        elif isinstance(node, BinaryExpr):
            yield prefix + node.operator.lexeme
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))

        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")


def render(expr: Expr) -> list[str]:
    """Render an expression tree as a list of indented lines."""
    return list(iter_lines(expr))


def render_text(expr: Expr) -> str:
    """Render an expression tree as a single newline-joined string."""
    return "\n".join(iter_lines(expr))
