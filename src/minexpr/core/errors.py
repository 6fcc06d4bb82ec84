"""
Error types for minexpr tokenizing, parsing, and evaluation.

Every stage raises immediately on the first fault; none of them attempts
recovery. Each error carries just enough to point at the fault.
"""


class MinexprError(Exception):
    """Base exception for all minexpr errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def describe(self) -> str:
        """Format the error the way the command line driver reports it."""
        return self.message


class LexError(MinexprError):
    """
    Raised when the tokenizer meets a character it does not recognize.

    Attributes:
        character: The offending character
        position: 0-based offset of the character in the source
    """

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Unexpected character '{character}'")

    def describe(self) -> str:
        return f"Lex error at position {self.position}: {self.message}"


class ParseError(MinexprError):
    """
    Raised when the token stream violates the grammar.

    Examples:
    - Unexpected token where a number or '(' is required
    - Missing closing parenthesis
    - Trailing input after a complete expression
    """

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(message)

    def describe(self) -> str:
        return f"Parse error at position {self.position}: {self.message}"


class EvalError(MinexprError):
    """Raised when evaluation cannot produce a value (division by zero)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    def describe(self) -> str:
        return f"Runtime error: {self.reason}"


class ConfigError(MinexprError):
    """Raised when a driver configuration file or override is invalid."""

    pass
