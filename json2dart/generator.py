"""Generator facade: single entry point from sample JSON to Dart source.

Two layers:
    generate()  core: parsed JSON value + numeric hints -> Dart text
    convert()   front door: class name + raw JSON text -> GenerationResult
                (validates input, parses, sniffs numbers, names the file)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from json2dart.builder import ClassTreeBuilder
from json2dart.core.config import Settings
from json2dart.emitter import DartEmitter
from json2dart.exceptions import EmptyArrayError, InvalidJsonError
from json2dart.models.classes import BuildResult
from json2dart.models.types import JsonKind, NumberKind
from json2dart.naming import dart_file_name, validate_class_name
from json2dart.sniffer import detect_number_types

log = structlog.get_logger("json2dart.generator")


# ── Core ─────────────────────────────────────────────────────────────────


def build_classes(
    root_class_name: str,
    sample_json: Any,
    numeric_hints: Mapping[str, NumberKind | str] | None = None,
) -> BuildResult:
    """Infer the class tree for *sample_json*.

    A top-level array is described by its first element.

    Raises:
        EmptyArrayError: *sample_json* is an empty array.
    """
    value = sample_json
    if JsonKind.of(sample_json) is JsonKind.ARRAY:
        if not sample_json:
            raise EmptyArrayError()
        log.info("generator.array_root", length=len(sample_json))
        value = sample_json[0]
    return ClassTreeBuilder(numeric_hints).build(root_class_name, value)


def generate(
    root_class_name: str,
    sample_json: Any,
    numeric_hints: Mapping[str, NumberKind | str] | None = None,
) -> str:
    """Render Dart classes for *sample_json*, root class first."""
    result = build_classes(root_class_name, sample_json, numeric_hints)
    return DartEmitter().render_all(result.classes)


# ── Front door ───────────────────────────────────────────────────────────


@dataclass
class GenerationResult:
    """Output of :func:`convert`, ready to be written or printed."""

    class_name: str
    file_name: str
    code: str
    class_names: list[str] = field(default_factory=list)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_text(data: str | bytes) -> str:
    """Sample text as str; bytes must be UTF-8, with or without a BOM."""
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidJsonError(f"input is not UTF-8 ({e.reason} at byte {e.start})") from e


def parse_json(text: str | bytes) -> Any:
    """Parse sample text, mapping every failure to :class:`InvalidJsonError`."""
    text = decode_text(text)
    if not text or not text.strip():
        raise InvalidJsonError()
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidJsonError(str(e)) from e
    except RecursionError as e:
        raise InvalidJsonError("nesting exceeds the parser's depth limit") from e


def convert(class_name: str, json_text: str | bytes, settings: Settings | None = None) -> GenerationResult:
    """Validate, parse and generate in one go.

    Raises:
        InvalidClassNameError: *class_name* is empty or not PascalCase alphanumeric.
        InvalidJsonError: *json_text* is blank or not JSON (or bytes that are not UTF-8).
        EmptyArrayError: *json_text* is an empty array.
    """
    settings = settings or Settings()
    validate_class_name(class_name)
    json_text = decode_text(json_text)
    sample = parse_json(json_text)

    # Hints come from the raw text; parsing has already dropped "5" vs "5.0"
    hints = detect_number_types(json_text)
    result = build_classes(class_name, sample, hints)
    code = DartEmitter().render_all(result.classes)

    generated = GenerationResult(
        class_name=class_name,
        file_name=dart_file_name(class_name, settings.file_extension),
        code=code,
        class_names=[c.name for c in result.classes],
    )
    log.info(
        "generator.done",
        class_name=class_name,
        file_name=generated.file_name,
        classes=len(generated.class_names),
    )
    return generated
