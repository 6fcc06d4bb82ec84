"""
Tokenizer for the minexpr arithmetic language.

Converts an expression string into a sequence of typed tokens in a single
left-to-right pass.
"""

from __future__ import annotations

import logging
import re

from minexpr.core.errors import LexError
from minexpr.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Numbers are unsigned runs of ASCII digits, no fraction or exponent
_NUMBER_RE = re.compile(r"[0-9]+")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    The result always ends with a single EOF token positioned at
    ``len(source)``.

    Raises:
        LexError: On the first character that is not whitespace, a digit,
            an operator, or a parenthesis.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        m = _NUMBER_RE.match(source, i)
        if m is not None:
            tokens.append(Token(kind=TokenKind.NUMBER, lexeme=m.group(0), pos=i))
            i = m.end()
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is None:
            raise LexError(c, i)
        tokens.append(Token(kind=kind, lexeme=c, pos=i))
        i += 1

    tokens.append(Token(kind=TokenKind.EOF, lexeme="", pos=n))
    logger.debug("Tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
