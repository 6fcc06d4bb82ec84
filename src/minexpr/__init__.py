"""
minexpr - a miniature arithmetic expression compiler.

Tokenizes, parses, prints, and evaluates expressions made of integer
literals, ``+ - * /``, unary minus, and parentheses.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.errors import ConfigError, EvalError, LexError, MinexprError, ParseError
from .core.expression_lang import (
    PipelineResult,
    evaluate,
    parse,
    parse_expr,
    render,
    run_pipeline,
    tokenize,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("minexpr")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "MinexprError",
    "LexError",
    "ParseError",
    "EvalError",
    "ConfigError",
    "PipelineResult",
    "tokenize",
    "parse",
    "parse_expr",
    "evaluate",
    "render",
    "run_pipeline",
]
