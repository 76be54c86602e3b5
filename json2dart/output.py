"""Write generated Dart files to disk."""

from __future__ import annotations

from pathlib import Path

import structlog

from json2dart.exceptions import OutputExistsError
from json2dart.generator import GenerationResult

log = structlog.get_logger("json2dart.output")


def target_path(result: GenerationResult, output_dir: str | Path) -> Path:
    return Path(output_dir) / result.file_name


def write_generated(
    result: GenerationResult,
    output_dir: str | Path,
    overwrite: bool = False,
) -> Path:
    """Write *result* into *output_dir* and return the file path.

    Raises:
        OutputExistsError: the file exists and *overwrite* is False.
    """
    path = target_path(result, output_dir)
    if path.exists() and not overwrite:
        raise OutputExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.code + "\n", encoding="utf-8")
    log.info("output.written", path=str(path), overwritten=overwrite)
    return path
