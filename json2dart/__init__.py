"""json2dart: generate null-safe Dart model classes from sample JSON."""

__version__ = "0.1.0"

from json2dart.builder import ClassTreeBuilder, build
from json2dart.emitter import DartEmitter, render_class
from json2dart.exceptions import (
    ConfigError,
    EmptyArrayError,
    InvalidClassNameError,
    InvalidInputError,
    InvalidJsonError,
    Json2DartError,
    OutputExistsError,
)
from json2dart.generator import GenerationResult, build_classes, convert, generate
from json2dart.models import BuildResult, ClassDescription, Field, NumberKind
from json2dart.sniffer import detect_number_types

__all__ = [
    "BuildResult",
    "ClassDescription",
    "ClassTreeBuilder",
    "ConfigError",
    "DartEmitter",
    "EmptyArrayError",
    "Field",
    "GenerationResult",
    "InvalidClassNameError",
    "InvalidInputError",
    "InvalidJsonError",
    "Json2DartError",
    "NumberKind",
    "OutputExistsError",
    "build",
    "build_classes",
    "convert",
    "detect_number_types",
    "generate",
    "render_class",
]
