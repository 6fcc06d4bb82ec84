"""
minexpr arithmetic expression language.

Tokenizer, parser, evaluator, and tree printer for expressions built from
integer literals, ``+ - * /``, unary minus, and parentheses.

Usage:
    from minexpr.core.expression_lang import tokenize, parse, evaluate, render

    expr = parse(tokenize("2 + 3 * 4"))
    render(expr)    # ["+", "  2", "  *", "    3", "    4"]
    evaluate(expr)  # 14.0
"""

from minexpr.core.expression_lang.evaluator import evaluate
from minexpr.core.expression_lang.parser import parse, parse_expr
from minexpr.core.expression_lang.pipeline import ErrorReport, PipelineResult, Stage, run_pipeline
from minexpr.core.expression_lang.tokenizer import tokenize
from minexpr.core.expression_lang.tree_printer import iter_lines, render, render_text

__all__ = [
    "ErrorReport",
    "PipelineResult",
    "Stage",
    "evaluate",
    "iter_lines",
    "parse",
    "parse_expr",
    "render",
    "render_text",
    "run_pipeline",
    "tokenize",
]
