"""CLI entry point: json2dart.

Subcommands:
    json2dart generate UserModel sample.json     # Write user_model.dart
    json2dart generate UserModel - --stdout      # Read stdin, print code
    json2dart sniff sample.json                  # Show int/double hints
    json2dart filename UserModel                 # Show derived file name
"""

from __future__ import annotations

import json
import sys

import click

from json2dart.core.config import Settings
from json2dart.core.logging import setup_logging
from json2dart.exceptions import ConfigError, Json2DartError, OutputExistsError
from json2dart.generator import convert, decode_text
from json2dart.messages import get_message
from json2dart.naming import dart_file_name, validate_class_name
from json2dart.output import write_generated
from json2dart.sniffer import detect_number_types


def _fail(exc: Json2DartError, language: str) -> None:
    click.echo(get_message(exc.message_key, *exc.message_args, language=language), err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """json2dart: generate Dart model classes from a sample JSON document."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    setup_logging(level="DEBUG" if verbose else settings.log_level, fmt=settings.log_format)
    ctx.obj = settings


@main.command("generate")
@click.argument("class_name")
@click.argument("json_file", type=click.File("rb"), default="-")
@click.option("-o", "--output-dir", default=None, help="Directory to write the file to")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print code instead of writing a file")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing file without asking")
@click.option("--lang", type=click.Choice(["en", "vi"]), default=None, help="Message language")
@click.pass_obj
def generate(
    settings: Settings,
    class_name: str,
    json_file,
    output_dir: str | None,
    to_stdout: bool,
    force: bool,
    lang: str | None,
) -> None:
    """Generate Dart classes named CLASS_NAME from JSON_FILE (default: stdin)."""
    try:
        settings = settings.override(language=lang, output_dir=output_dir)
    except ConfigError as e:
        _fail(e, settings.language)
    language = settings.language

    try:
        result = convert(class_name, json_file.read(), settings)
    except Json2DartError as e:
        _fail(e, language)

    if to_stdout:
        click.echo(result.code)
        return

    try:
        path = write_generated(result, settings.output_dir, overwrite=force)
    except OutputExistsError as e:
        if not click.confirm(get_message(e.message_key, *e.message_args, language=language)):
            click.echo(get_message("cancelled", result.file_name, language=language), err=True)
            sys.exit(1)
        path = write_generated(result, settings.output_dir, overwrite=True)

    click.echo(get_message("success", str(path), language=language))


@main.command("sniff")
@click.argument("json_file", type=click.File("rb"), default="-")
@click.pass_obj
def sniff(settings: Settings, json_file) -> None:
    """Print the int/double hint detected for every numeric key."""
    try:
        text = decode_text(json_file.read())
    except Json2DartError as e:
        _fail(e, settings.language)
    hints = detect_number_types(text)
    click.echo(json.dumps({k: v.value for k, v in hints.items()}, indent=2))


@main.command("filename")
@click.argument("class_name")
@click.pass_obj
def filename(settings: Settings, class_name: str) -> None:
    """Print the file name generated code for CLASS_NAME is saved under."""
    try:
        validate_class_name(class_name)
    except Json2DartError as e:
        _fail(e, settings.language)
    click.echo(dart_file_name(class_name, settings.file_extension))


if __name__ == "__main__":
    main()
