import json
import logging
import sys

import pytest
from loguru import logger

from mdcompose.config import Settings
from mdcompose.logging_config import configure_logging, configure_logging_from_settings
from mdcompose.theme import ThemeName, get_theme, light_theme


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MDCOMPOSE_THEME", raising=False)
        settings = Settings()
        assert settings.theme == ThemeName.LIGHT
        assert settings.log_file is None
        assert get_theme(settings.theme) == light_theme()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MDCOMPOSE_THEME", "dark")
        monkeypatch.setenv("MDCOMPOSE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MDCOMPOSE_LOG_FILE", str(tmp_path / "log.jsonl"))
        settings = Settings()
        assert settings.theme == ThemeName.DARK
        assert settings.log_level == "DEBUG"
        assert settings.log_file == tmp_path / "log.jsonl"

    def test_rejects_non_positive_workers(self):
        with pytest.raises(ValueError):
            Settings(image_max_workers=0)


class TestTheme:
    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_invalid_heading_levels_have_no_style(self, level):
        assert light_theme().heading_style(level) is None


class TestLogging:
    @pytest.fixture
    def restore_logging(self):
        root = logging.getLogger()
        root_handlers, root_level = root.handlers[:], root.level
        yield
        logger.remove()
        logger.add(sys.stderr)
        root.handlers[:] = root_handlers
        root.setLevel(root_level)

    def test_json_file_sink_receives_loguru_and_stdlib(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "mdcompose.jsonl"
        configure_logging("DEBUG", log_file)
        logger.info("from loguru")
        logging.getLogger("some.library").warning("from stdlib")
        logger.remove()  # flush and close sinks

        records = [json.loads(line)["record"] for line in log_file.read_text().splitlines()]
        assert [r["message"] for r in records] == ["from loguru", "from stdlib"]
        assert records[1]["level"]["name"] == "WARNING"

    def test_settings_drive_level_and_file(self, tmp_path, restore_logging):
        log_file = tmp_path / "mdcompose.jsonl"
        configure_logging_from_settings(Settings(log_level="WARNING", log_file=log_file))
        logger.info("dropped")
        logger.warning("kept")
        logger.remove()

        records = [json.loads(line)["record"] for line in log_file.read_text().splitlines()]
        assert [r["message"] for r in records] == ["kept"]
