"""
Result-value facade over the tokenize → parse → render/evaluate pipeline.

The core stages raise on failure. ``run_pipeline`` runs them in order and
returns a ``PipelineResult`` holding whatever each stage produced, plus an
``ErrorReport`` for the stage that failed, so callers branch on ``ok``
instead of catching exceptions.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from minexpr.core.errors import EvalError, LexError, MinexprError, ParseError
from minexpr.core.expression_lang.evaluator import evaluate
from minexpr.core.expression_lang.parser import parse
from minexpr.core.expression_lang.tokenizer import tokenize
from minexpr.core.expression_lang.tree_printer import render
from minexpr.core.ir.expressions import Expr
from minexpr.core.ir.tokens import Token

logger = logging.getLogger(__name__)


class Stage(StrEnum):
    """Pipeline stages that can fail."""

    LEX = "lex"
    PARSE = "parse"
    EVAL = "eval"


class ErrorReport(BaseModel):
    """A failure surfaced by one pipeline stage."""

    stage: Stage
    message: str
    position: int | None = None
    character: str | None = None
    description: str = Field(description="Driver-facing form of the error")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_error(cls, stage: Stage, error: MinexprError) -> ErrorReport:
        return cls(
            stage=stage,
            message=error.message,
            position=getattr(error, "position", None),
            character=getattr(error, "character", None),
            description=error.describe(),
        )


class PipelineResult(BaseModel):
    """Everything produced for one input line."""

    source: str
    tokens: list[Token] = Field(default_factory=list)
    expr: Expr | None = None
    tree: list[str] = Field(default_factory=list)
    value: float | None = None
    error: ErrorReport | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def run_pipeline(source: str) -> PipelineResult:
    """Run every stage on ``source``, stopping at the first failure."""
    try:
        tokens = tokenize(source)
    except LexError as e:
        logger.debug("Lex stage failed: %s", e)
        return PipelineResult(source=source, error=ErrorReport.from_error(Stage.LEX, e))

    try:
        expr = parse(tokens)
    except ParseError as e:
        logger.debug("Parse stage failed: %s", e)
        return PipelineResult(
            source=source,
            tokens=tokens,
            error=ErrorReport.from_error(Stage.PARSE, e),
        )

    tree = render(expr)

    try:
        value = evaluate(expr)
    except EvalError as e:
        logger.debug("Eval stage failed: %s", e)
        return PipelineResult(
            source=source,
            tokens=tokens,
            expr=expr,
            tree=tree,
            error=ErrorReport.from_error(Stage.EVAL, e),
        )

    return PipelineResult(source=source, tokens=tokens, expr=expr, tree=tree, value=value)
