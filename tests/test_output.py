"""Tests for writing generated files."""

from __future__ import annotations

from pathlib import Path

import pytest

from json2dart.exceptions import OutputExistsError
from json2dart.generator import convert
from json2dart.output import target_path, write_generated


@pytest.fixture
def result():
    return convert("UserModel", '{"id": 1}')


class TestWriteGenerated:
    def test_writes_file(self, tmp_path: Path, result):
        path = write_generated(result, tmp_path)
        assert path == tmp_path / "user_model.dart"
        assert path.read_text(encoding="utf-8") == result.code + "\n"

    def test_creates_output_dir(self, tmp_path: Path, result):
        path = write_generated(result, tmp_path / "lib" / "models")
        assert path.exists()

    def test_refuses_to_overwrite(self, tmp_path: Path, result):
        existing = tmp_path / "user_model.dart"
        existing.write_text("// hand written")
        with pytest.raises(OutputExistsError) as exc_info:
            write_generated(result, tmp_path)
        assert exc_info.value.path == existing
        assert exc_info.value.message_args == ("user_model.dart",)
        assert existing.read_text() == "// hand written"

    def test_overwrite(self, tmp_path: Path, result):
        (tmp_path / "user_model.dart").write_text("// old")
        path = write_generated(result, tmp_path, overwrite=True)
        assert "class UserModel {" in path.read_text(encoding="utf-8")

    def test_target_path(self, tmp_path: Path, result):
        assert target_path(result, str(tmp_path)) == tmp_path / "user_model.dart"
