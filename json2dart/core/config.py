"""Runtime settings, read from ``JSON2DART_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from json2dart.exceptions import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Settings field -> environment variable
ENV_VARS: dict[str, str] = {
    "language": "JSON2DART_LANGUAGE",
    "output_dir": "JSON2DART_OUTPUT_DIR",
    "file_extension": "JSON2DART_FILE_EXTENSION",
    "log_level": "JSON2DART_LOG_LEVEL",
    "log_format": "JSON2DART_LOG_FORMAT",
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: Literal["en", "vi"] = "en"
    output_dir: Path = Path(".")
    file_extension: str = ".dart"
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @field_validator("language", "log_format", mode="before")
    @classmethod
    def _lowercase(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return v

    @field_validator("file_extension")
    @classmethod
    def _leading_dot(cls, v: str) -> str:
        v = v.strip()
        if not v or v == ".":
            raise ValueError("must not be empty")
        return v if v.startswith(".") else "." + v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment; unset variables keep defaults."""
        env = os.environ if environ is None else environ
        values = {name: env[var] for name, var in ENV_VARS.items() if var in env}
        return cls._validated(values)

    def override(self, **changes: Any) -> Settings:
        """Return a copy with every non-None change applied and re-validated."""
        values = self.model_dump()
        values.update({k: v for k, v in changes.items() if v is not None})
        return self._validated(values)

    @classmethod
    def _validated(cls, values: dict[str, Any]) -> Settings:
        try:
            return cls(**values)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{ENV_VARS.get(str(err['loc'][0]), err['loc'][0])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"Invalid configuration: {problems}") from e
