from pathlib import Path

import pytest
from pydantic import ValidationError

from doc2txt.config.settings import Settings


class TestSettingsDefaults:
    def test_default_log_level(self) -> None:
        s = Settings()
        assert s.log_level == "INFO"

    def test_default_output_suffix(self) -> None:
        s = Settings()
        assert s.output_suffix == ".txt"

    def test_destructive_options_are_off(self) -> None:
        s = Settings()
        assert not s.remove_converted
        assert not s.remove_trash
        assert not s.cleanup_empty
        assert not s.fail_fast

    def test_default_trash_extensions(self) -> None:
        s = Settings()
        assert "djvu" in s.trash_extensions
        assert "zip" in s.trash_extensions
        assert "txt" not in s.trash_extensions


class TestSettingsFromEnv:
    def test_loads_source_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOC2TXT_SOURCE_DIR", "/data/books")
        s = Settings()
        assert s.source_dir == Path("/data/books")

    def test_loads_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOC2TXT_REMOVE_CONVERTED", "true")
        monkeypatch.setenv("DOC2TXT_FAIL_FAST", "1")
        s = Settings()
        assert s.remove_converted
        assert s.fail_fast

    def test_trash_extensions_are_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOC2TXT_TRASH_EXTENSIONS", '[".DJVU", "Jpg", " "]')
        s = Settings()
        assert s.trash_extensions == ["djvu", "jpg"]


class TestSettingsValidation:
    def test_output_suffix_requires_dot(self) -> None:
        with pytest.raises(ValidationError):
            Settings(output_suffix="txt")

    def test_output_suffix_is_lowercased(self) -> None:
        assert Settings(output_suffix=".TXT").output_suffix == ".txt"

    def test_log_level_is_uppercased(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOC2TXT_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="log_level"):
            Settings()
