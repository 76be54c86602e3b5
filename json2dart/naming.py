"""Lexical helpers: case conversion, singularization and file naming."""

from __future__ import annotations

import re

from json2dart.exceptions import InvalidClassNameError

# Root class names: uppercase letter, then ASCII letters and digits
_CLASS_NAME_RE = re.compile(r"[A-Z][a-zA-Z0-9]*")

# snake_case boundary: underscore followed by a lowercase letter
_SNAKE_BOUNDARY_RE = re.compile(r"_([a-z])")

_UPPER_RE = re.compile(r"[A-Z]")


def to_camel_case(value: str) -> str:
    """Convert a snake_case or PascalCase JSON key to a camelCase field name.

    Keys containing an underscore have every ``_x`` (lowercase ``x``) folded
    into ``X``; other underscores are kept. Keys without an underscore only
    get their first letter lowercased.

    >>> to_camel_case("user_name")
    'userName'
    >>> to_camel_case("UserName")
    'userName'
    """
    if "_" in value:
        return _SNAKE_BOUNDARY_RE.sub(lambda m: m.group(1).upper(), value)
    return value[:1].lower() + value[1:]


def to_snake_case(value: str) -> str:
    """Convert PascalCase to snake_case (``CartModule`` -> ``cart_module``).

    Every uppercase letter starts a new segment, so acronyms split per letter.
    """
    return _UPPER_RE.sub(
        lambda m: ("_" if m.start() else "") + m.group(0).lower(),
        value,
    )


def capitalize_first_letter(value: str) -> str:
    return value[:1].upper() + value[1:]


def singularize(word: str) -> str:
    """Suffix-based singular form: ``-ies`` -> ``-y``, then ``-es``, then ``-s``.

    Deliberately naive: ``names`` becomes ``nam``.
    """
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("es"):
        return word[:-2]
    if word.endswith("s"):
        return word[:-1]
    return word


def is_valid_class_name(name: str) -> bool:
    return bool(_CLASS_NAME_RE.fullmatch(name))


def validate_class_name(name: str) -> str:
    """Return *name* unchanged, or raise :class:`InvalidClassNameError`."""
    if not is_valid_class_name(name):
        raise InvalidClassNameError(name)
    return name


def dart_file_name(class_name: str, extension: str = ".dart") -> str:
    """File name for a generated class: ``UserModel`` -> ``user_model.dart``."""
    return to_snake_case(class_name) + extension
