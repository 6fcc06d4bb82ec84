"""
Recursive descent parser for the minexpr arithmetic language.

Grammar (precedence low to high, left-associative at each binary level):
    expression  → term (("+"|"-") term)*
    term        → unary (("*"|"/") unary)*
    unary       → "-" unary | primary
    primary     → NUMBER | "(" expression ")"
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from minexpr.core.errors import ParseError
from minexpr.core.expression_lang.tokenizer import tokenize
from minexpr.core.ir.expressions import BinaryExpr, Expr, Literal, UnaryExpr
from minexpr.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Parenthesis nesting limit; each level takes four parser frames
MAX_NESTING_DEPTH = 100

NESTING_MESSAGE = "Expression nested too deeply"


class _Parser:
    """Recursive descent parser over a token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind, message: str) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise ParseError(message, tok.pos)
        return self.advance()

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while op := self.match(TokenKind.PLUS, TokenKind.MINUS):
            right = self.parse_term()
            left = BinaryExpr(left=left, operator=op, right=right)
        return left

    def parse_term(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while op := self.match(TokenKind.STAR, TokenKind.SLASH):
            right = self.parse_unary()
            left = BinaryExpr(left=left, operator=op, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' unary | primary"""
        # Collected in a loop so long runs of '-' do not consume the call stack
        ops: list[Token] = []
        while op := self.match(TokenKind.MINUS):
            ops.append(op)
        expr = self.parse_primary()
        for op in reversed(ops):
            expr = UnaryExpr(operator=op, operand=expr)
        return expr

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Literal(value=float(tok.lexeme))

        if tok.kind == TokenKind.LPAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise ParseError(NESTING_MESSAGE, tok.pos)
            self.advance()
            self.depth += 1
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN, "Expected ')'")
            self.depth -= 1
            return expr

        raise ParseError(f"Unexpected token '{tok.lexeme}'", tok.pos)


def _check_stream(tokens: Sequence[Token]) -> None:
    """Reject token sequences that do not end in exactly one EOF."""
    if not tokens:
        raise ParseError("Empty token stream", 0)
    last = tokens[-1]
    if last.kind != TokenKind.EOF:
        raise ParseError("Token stream does not end with EOF", last.pos)
    for tok in tokens[:-1]:
        if tok.kind == TokenKind.EOF:
            raise ParseError("EOF token before end of stream", tok.pos)


def parse(tokens: Sequence[Token]) -> Expr:
    """Parse a token sequence into an expression AST.

    Args:
        tokens: Output of ``tokenize``, terminated by a single EOF token.

    Returns:
        The root of the parsed expression tree.

    Raises:
        ParseError: On the first grammar violation, or when input remains
            after a complete expression.
    """
    _check_stream(tokens)

    parser = _Parser(tokens)
    try:
        expr = parser.parse_expression()
    except RecursionError as e:
        raise ParseError(NESTING_MESSAGE, parser.current.pos) from e

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise ParseError(
            f"Unexpected token '{parser.current.lexeme}'",
            parser.current.pos,
        )

    logger.debug("Parsed %d tokens into %s", len(tokens), type(expr).__name__)
    return expr


def parse_expr(source: str) -> Expr:
    """Tokenize and parse an expression string.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid.
    """
    return parse(tokenize(source))
