"""
minexpr CLI - Entry point.

Thin driver around the expression pipeline: reads one expression, then
prints its tokens, the parse outcome, the syntax tree, and the result.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from minexpr import __version__
from minexpr.cli_ui import print_error, print_header, print_line, print_success
from minexpr.core.config import DriverConfig, find_config, load_config
from minexpr.core.errors import ConfigError, MinexprError
from minexpr.core.expression_lang import (
    evaluate,
    parse,
    render,
    run_pipeline,
    tokenize,
)
from minexpr.core.ir import Token, format_number

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="minexpr - tokenize, parse, print, and evaluate arithmetic expressions",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"minexpr version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """minexpr CLI main callback for global options."""
    pass


def _load_config(path: Path | None) -> DriverConfig:
    try:
        config = load_config(path if path is not None else find_config(Path.cwd()))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    # Log to stderr so diagnostics never mix with results on stdout
    logging.basicConfig(
        level=config.log_level_value,
        stream=sys.stderr,
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
    )
    return config


def _format_tokens(tokens: list[Token]) -> str:
    return "[" + ", ".join(str(t) for t in tokens) + "]"


@app.command("run")
def run_command(
    expression: str | None = typer.Argument(
        None, help="Expression to process (prompted for when omitted)"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to minexpr.toml (default: ./minexpr.toml)"
    ),
    show_tokens: bool | None = typer.Option(
        None, "--tokens/--no-tokens", help="Print the token list"
    ),
    show_tree: bool | None = typer.Option(
        None, "--tree/--no-tree", help="Print the syntax tree"
    ),
) -> None:
    """Run the full pipeline on one expression and report every stage."""
    config = _load_config(config_path)
    if show_tokens is None:
        show_tokens = config.show_tokens
    if show_tree is None:
        show_tree = config.show_tree

    if expression is None:
        expression = typer.prompt(config.prompt, default="", show_default=False, prompt_suffix="")

    result = run_pipeline(expression)

    if result.tokens and show_tokens:
        print_header("Lexical Analysis")
        print_line(_format_tokens(result.tokens))

    if result.expr is not None:
        print_success("Parse result: success")
        if show_tree:
            print_header("Syntax Tree")
            for line in result.tree:
                print_line(line)

    if result.error is not None:
        logger.info("Pipeline stopped at %s stage", result.error.stage)
        print_error(result.error.description)
        raise typer.Exit(code=1)

    if result.value is not None:
        print_line(f"Result: {format_number(result.value)}", "result")


@app.command("tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Print the token list of an expression."""
    _load_config(None)
    try:
        tokens = tokenize(expression)
    except MinexprError as e:
        print_error(e.describe())
        raise typer.Exit(code=1) from e
    print_line(_format_tokens(tokens))


@app.command("tree")
def tree_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Print the syntax tree of an expression."""
    _load_config(None)
    try:
        expr = parse(tokenize(expression))
    except MinexprError as e:
        print_error(e.describe())
        raise typer.Exit(code=1) from e
    for line in render(expr):
        print_line(line)


@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
) -> None:
    """Print only the numeric value of an expression."""
    _load_config(None)
    try:
        value = evaluate(parse(tokenize(expression)))
    except MinexprError as e:
        print_error(e.describe())
        raise typer.Exit(code=1) from e
    print_line(format_number(value))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
