"""formatkit CLI - Click-based command line interface."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from formatkit.cli.formatters import (
    print_error,
    print_languages,
    print_validation,
    setup_logging,
)
from formatkit.core.config import INDENT_CHOICES, Settings, load_settings, resolve_indent
from formatkit.core.engine import (
    default_filename,
    format_code,
    infer_language,
    list_handlers,
    minify_code,
    validate_code,
)
from formatkit.core.errors import ConfigError
from formatkit.core.models import Language
from formatkit.core.samples import get_sample

_LANGUAGES = [lang.value for lang in Language]


@click.group()
@click.version_option(package_name="formatkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML settings file (default: ./formatkit.yml or ./.formatkit.yml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """formatkit - format, validate and minify JSON, TypeScript, XML, CSS and HTML."""
    setup_logging(verbose)
    try:
        ctx.obj = load_settings(config_path)
    except ConfigError as exc:
        print_error(str(exc))
        sys.exit(1)


def _language_option(f):
    return click.option(
        "--language",
        "-l",
        type=click.Choice(_LANGUAGES),
        help="Source language (default: inferred from PATH, then settings).",
    )(f)


def _read_source(path: str) -> str:
    if path == "-":
        return click.get_text_stream("stdin").read()
    return Path(path).read_text(encoding="utf-8")


def _resolve_language(settings: Settings, path: str, language: str | None) -> Language:
    if language:
        return Language(language)
    if path != "-":
        inferred = infer_language(path)
        if inferred is not None:
            return inferred
    return settings.default_language


def _emit(text: str, output_file: str | None) -> None:
    if output_file:
        Path(output_file).write_text(text + "\n" if text else "", encoding="utf-8")
        click.echo(f"Output written to {output_file}", err=True)
    else:
        click.echo(text)


@cli.command("format")
@click.argument("path", default="-", type=click.Path(dir_okay=False, allow_dash=True, exists=True))
@_language_option
@click.option(
    "--indent",
    "-i",
    help=f"Indent width: {', '.join(INDENT_CHOICES)} or any positive number.",
)
@click.option("--output", "-o", "output_file", type=click.Path(dir_okay=False), help="Write output to file.")
@click.option("--save", is_flag=True, help="Write output to formatted.<ext> in the working directory.")
@click.pass_obj
def format_cmd(
    settings: Settings,
    path: str,
    language: str | None,
    indent: str | None,
    output_file: str | None,
    save: bool,
) -> None:
    """Pretty-print PATH (or stdin)."""
    lang = _resolve_language(settings, path, language)
    try:
        width = resolve_indent(indent, settings.tab_width) if indent else settings.indent_width
    except ValueError as exc:
        print_error(str(exc))
        sys.exit(1)

    result = format_code(_read_source(path), lang, width)
    if not result.is_valid:
        print_error(result.error_message or "Invalid input")
        sys.exit(1)

    if save and not output_file:
        output_file = default_filename(lang)
    _emit(result.formatted_text, output_file)


@cli.command()
@click.argument("path", default="-", type=click.Path(dir_okay=False, allow_dash=True, exists=True))
@_language_option
@click.pass_obj
def validate(settings: Settings, path: str, language: str | None) -> None:
    """Check PATH (or stdin) for well-formedness. Exits 1 when invalid."""
    lang = _resolve_language(settings, path, language)
    result = validate_code(_read_source(path), lang)
    print_validation(result, lang.value)
    if not result.is_valid:
        sys.exit(1)


@cli.command()
@click.argument("path", default="-", type=click.Path(dir_okay=False, allow_dash=True, exists=True))
@_language_option
@click.option("--output", "-o", "output_file", type=click.Path(dir_okay=False), help="Write output to file.")
@click.pass_obj
def minify(settings: Settings, path: str, language: str | None, output_file: str | None) -> None:
    """Compact PATH (or stdin) onto a single line."""
    lang = _resolve_language(settings, path, language)
    minified = minify_code(_read_source(path), lang, json_fallback=settings.minify_json_fallback)
    _emit(minified, output_file)


@cli.command()
@click.argument("language", type=click.Choice(_LANGUAGES))
def sample(language: str) -> None:
    """Print the built-in sample document for LANGUAGE."""
    click.echo(get_sample(language))


@cli.command()
def languages() -> None:
    """List supported languages and how each is validated."""
    print_languages(list_handlers())


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=8080, type=int, help="Bind port.")
def server(host: str, port: int) -> None:
    """Start the formatkit API server."""
    click.echo("Starting formatkit API server...")
    try:
        import uvicorn

        from formatkit.api.app import create_app
    except ImportError:
        print_error("API dependencies not installed. Run: pip install formatkit[api]")
        sys.exit(1)

    uvicorn.run(create_app(), host=host, port=port)
