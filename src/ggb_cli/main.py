import json
import logging
from pathlib import Path

import typer
from ggb_linter import LintSeverity, create_engine
from ggb_linter.converters import lint_message_to_lint_error
from ggb_linter.rules.type_rules import describe_parameters
from ggb_parser import ParseError, TokenType, parse_script, to_dict, tokenize
from ggb_specs import get_spec_registry
from pydantic import ValidationError

from .config import CONFIG_FILENAME, load_config
from .extract import extract_commands

app = typer.Typer(help="GeoGebra Lint - Check GeoGebra commands before they are executed")

SEVERITY_RANK = {"error": 3, "warning": 2, "warn": 2, "info": 1}


@app.command()
def lint(
    files: list[Path] = typer.Argument(None, exists=True, dir_okay=False, readable=True, help="Files to lint"),
    command: str = typer.Option(None, "--command", "-c", help="Lint a command given on the command line"),
    config_file: Path = typer.Option(Path(CONFIG_FILENAME), "--config", help="Path to config file"),
    severity: str = typer.Option("info", help="Minimum severity to show"),
    extract: bool = typer.Option(False, help="Treat input as chat text and lint each embedded command"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run linter on GeoGebra scripts"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        config = load_config(config_file)
    except ValidationError as e:
        typer.echo(f"Error: invalid config {config_file}:\n{e}", err=True)
        raise typer.Exit(code=2)

    sources: list[tuple[str, str]] = []
    if command is not None:
        sources.append(("<command>", command))
    for file_path in files or []:
        sources.append((str(file_path), file_path.read_text(encoding="utf-8")))

    if not sources:
        typer.echo("Error: Provide files or use --command")
        raise typer.Exit(code=1)

    if extract:
        sources = [
            (f"{name}#{index}", text)
            for name, source in sources
            for index, text in enumerate(extract_commands(source))
        ]

    min_rank = SEVERITY_RANK.get(severity.lower(), 1)

    engine = create_engine(config)
    total = 0
    reported_count = 0
    errors = 0
    for name, source in sources:
        result = engine.lint(source, file_path=name)
        for error in map(lint_message_to_lint_error, result.messages):
            total += 1
            if error.severity == LintSeverity.ERROR:
                errors += 1
            if SEVERITY_RANK[error.severity.value] < min_rank:
                continue
            typer.echo(
                f"{error.severity.value.upper()}: {name}:{error.line}:{error.column} "
                f"[{error.rule_id}] {error.message}"
            )
            if error.suggestions:
                typer.echo(f"    suggestions: {', '.join(error.suggestions)}")
            reported_count += 1

    typer.echo(f"\nTotal issues found: {total} ({reported_count} reported)")

    if errors > 0:
        raise typer.Exit(code=1)


@app.command()
def tokens(source: str = typer.Argument(..., help="GeoGebra source to tokenize")):
    """Print the token stream of a script"""
    for index, token in enumerate(tokenize(source)):
        if token.type in (TokenType.NEWLINE, TokenType.EOF):
            continue
        typer.echo(f"[{index}] {token.type.value:<12} {token.value!r} at {token.position.line}:{token.position.column}")


@app.command()
def ast(source: str = typer.Argument(..., help="GeoGebra source to parse")):
    """Print the syntax tree of a script as JSON"""
    try:
        program = parse_script(source)
    except ParseError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(to_dict(program), indent=2, ensure_ascii=False))


@app.command()
def commands(prefix: str = typer.Argument("", help="Only list commands starting with this prefix")):
    """List known commands with their overloads"""
    specs = get_spec_registry()
    names = [n for n in specs.get_all_command_names() if n.lower().startswith(prefix.lower())]
    for name in sorted(names):
        typer.echo(f"{name}: {specs.get_command_description(name)}")
        for spec in specs.get_command_specs(name):
            typer.echo(f"    {spec.signature}")
            if spec.parameters:
                typer.echo(f"      {describe_parameters(spec)}")

    typer.echo(f"\n{len(names)} command(s)")


if __name__ == "__main__":
    app()
