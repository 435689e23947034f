"""Tests for wren.config — URLConfig frozen dataclass."""

import pytest

from wren.config import DEFAULT_CONFIG, URLConfig


class TestURLConfig:
    def test_defaults(self) -> None:
        cfg = URLConfig()

        assert cfg.encoding == "utf-8"
        assert cfg.archive_scheme == "zip"
        assert cfg.archive_schemes == ("zip", "jar")
        assert cfg.archive_separator == "!/"
        assert ".whl" in cfg.archive_extensions
        assert cfg.open_timeout == 30.0

    def test_override(self) -> None:
        cfg = URLConfig(encoding="gbk", open_timeout=5.0)

        assert cfg.encoding == "gbk"
        assert cfg.open_timeout == 5.0

    def test_frozen(self) -> None:
        cfg = URLConfig()

        with pytest.raises(AttributeError):
            cfg.encoding = "ascii"  # type: ignore[misc]

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == URLConfig()
