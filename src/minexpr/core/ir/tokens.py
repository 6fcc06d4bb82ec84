"""
Token types for the minexpr arithmetic language.

Tokens are produced by the tokenizer and referenced by operator nodes in the
expression AST, so they live in the IR package rather than next to the
tokenizer.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types for the arithmetic language."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token(BaseModel):
    """A single token from the tokenizer."""

    kind: TokenKind
    lexeme: str = Field(description="Exact source text of the token")
    pos: int = Field(ge=0, description="0-based offset of the first character")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.kind == TokenKind.EOF:
            return f"EOF@{self.pos}"
        return f"{self.kind.name}({self.lexeme!r} @{self.pos})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, pos={self.pos})"
