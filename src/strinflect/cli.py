import typer
from pathlib import Path
import logging
import sys
from typing import Dict, List, Optional

from jinja2 import TemplateError

from .constants import DEFAULT_NAMESPACE_SEPARATOR, LOG_FORMAT
from .engine import CANONICAL_FLAGS, InflectionEngine, normalize_flags
from .errors import StrInflectError
from .helper import create_environment

# Configure logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

app = typer.Typer(help="Apply case and inflection transformations to strings and templates.")


def _configure_logging(verbose: bool) -> None:
    # force=True replaces the module-level basicConfig handler
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, force=True)


def _parse_variables(variables: List[str]) -> Dict[str, str]:
    """Turns repeated --var key=value options into a template context."""
    context = {}
    for item in variables:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{item}'", param_hint="--var")
        context[key] = value
    return context


@app.command()
def transform(
    text: str = typer.Argument(
        ...,
        help="String to transform. Use '-' to transform each line read from stdin.",
    ),
    flags: Optional[List[str]] = typer.Option(
        None,
        "--flag",
        "-f",
        help="Flag to apply (repeatable). Flags always run in canonical order; see the 'flags' command.",
    ),
    separator: str = typer.Option(
        DEFAULT_NAMESPACE_SEPARATOR,
        "--separator",
        help="Namespace separator used by demodulize, deconstantize and to_foreign_key.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
):
    """Transforms TEXT by applying the requested flags."""
    _configure_logging(verbose)

    try:
        engine = InflectionEngine(separator)
        active = normalize_flags(flags or [])
    except StrInflectError as e:
        logging.error(f"Invalid arguments: {e}")
        raise typer.Exit(code=1)

    if not active:
        logging.warning("No flags given, input is echoed unchanged.")

    lines = sys.stdin.read().splitlines() if text == "-" else [text]
    for line in lines:
        typer.echo(engine.transform(line, active))


@app.command()
def render(
    template_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the Jinja2 template to render.",
    ),
    variables: Optional[List[str]] = typer.Option(
        None,
        "--var",
        help="Template variable as key=value (repeatable).",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        file_okay=True,
        dir_okay=False,
        writable=True,
        help="Write the rendered template here instead of stdout.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on undefined variables and on missing or non-string helper input.",
    ),
    separator: str = typer.Option(
        DEFAULT_NAMESPACE_SEPARATOR,
        "--separator",
        help="Namespace separator used by demodulize, deconstantize and to_foreign_key.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
):
    """Renders TEMPLATE_FILE with the 'inflect' helper registered."""
    _configure_logging(verbose)

    context = _parse_variables(variables or [])
    logging.debug(f"Template variables: {context}")

    try:
        source = template_file.read_text()
    except Exception as e:
        logging.error(f"Failed to read template file: {e}")
        raise typer.Exit(code=1)

    try:
        env = create_environment(strict=strict, namespace_separator=separator, keep_trailing_newline=True)
        rendered = env.from_string(source).render(**context)
    except (StrInflectError, TemplateError) as e:
        logging.error(f"Failed to render template: {e}")
        raise typer.Exit(code=1)

    if output_file is None:
        typer.echo(rendered, nl=False)
        return

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(rendered)
        logging.info(f"Rendered {template_file} to {output_file}")
    except Exception as e:
        logging.error(f"Failed to write output file: {e}")
        raise typer.Exit(code=1)


@app.command()
def flags():
    """Lists every flag in canonical execution order."""
    for step, flag in enumerate(CANONICAL_FLAGS, start=1):
        typer.echo(f"{step:2d}. {flag.value}")


if __name__ == "__main__":
    app()
