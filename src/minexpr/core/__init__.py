"""Core minexpr functionality: IR, expression language, configuration, errors."""

from . import ir
from .errors import ConfigError, EvalError, LexError, MinexprError, ParseError

__all__ = [
    "ir",
    "MinexprError",
    "LexError",
    "ParseError",
    "EvalError",
    "ConfigError",
]
