"""Custom exceptions for json2dart.

Every exception carries a ``message_key`` into :mod:`json2dart.messages`
plus the positional ``message_args`` for its placeholders, so the CLI can
show it in the configured language.
"""

from __future__ import annotations

from pathlib import Path


class Json2DartError(Exception):
    """Base exception for all json2dart errors."""

    message_key = "error"

    @property
    def message_args(self) -> tuple[str, ...]:
        return (str(self),)


class ConfigError(Json2DartError):
    """Raised when environment configuration is invalid."""


class InvalidInputError(Json2DartError):
    """Raised when the class name or the sample JSON cannot be used."""


class InvalidClassNameError(InvalidInputError):
    """Raised when a root class name is empty or not PascalCase alphanumeric."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        if not class_name.strip():
            self.message_key = "class_name_empty"
            super().__init__("Class name cannot be empty")
        else:
            self.message_key = "class_name_invalid"
            super().__init__(
                f"Invalid class name '{class_name}': expected an uppercase letter "
                "followed by letters and digits"
            )

    @property
    def message_args(self) -> tuple[str, ...]:
        return ()


class InvalidJsonError(InvalidInputError):
    """Raised when the sample text is blank or is not valid JSON."""

    def __init__(self, reason: str | None = None):
        self.reason = reason
        if reason is None:
            self.message_key = "json_empty"
            super().__init__("JSON input cannot be empty")
        else:
            self.message_key = "json_invalid"
            super().__init__(f"Invalid JSON: {reason}")

    @property
    def message_args(self) -> tuple[str, ...]:
        return () if self.reason is None else (self.reason,)


class EmptyArrayError(InvalidInputError):
    """Raised when the sample JSON is an empty top-level array."""

    message_key = "empty_array"

    def __init__(self) -> None:
        super().__init__("JSON array is empty, nothing to generate")

    @property
    def message_args(self) -> tuple[str, ...]:
        return ()


class OutputExistsError(Json2DartError):
    """Raised when a generated file would overwrite an existing one."""

    message_key = "file_exists"

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File {path} already exists")

    @property
    def message_args(self) -> tuple[str, ...]:
        return (self.path.name,)
