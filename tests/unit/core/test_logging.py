import sys

import pytest
from loguru import logger

from icondeck.core.config import ConfigManager, GeneralSettings
from icondeck.core.logging import bind_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_setup_logging_creates_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(GeneralSettings(debug_mode=False, log_dir=str(log_dir)))
    logger.info("hello")
    logger.complete()

    files = list(log_dir.glob("icondeck_*.log"))
    assert len(files) == 1
    assert "hello" in files[0].read_text(encoding="utf-8")


def test_setup_logging_console_only(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(GeneralSettings(log_dir=str(log_dir), log_to_file=False))

    assert not log_dir.exists()


def test_console_level_follows_debug_mode(tmp_path, capsys):
    setup_logging(GeneralSettings(debug_mode=False, log_to_file=False))
    logger.debug("hidden detail")
    logger.info("shown info")

    err = capsys.readouterr().err
    assert "hidden detail" not in err
    assert "shown info" in err


def test_bind_logging_reconfigures_on_general_update(tmp_path, capsys):
    config = ConfigManager(str(tmp_path / "icondeck.json"))
    config.update("general", "log_to_file", False)
    config.update("general", "debug_mode", False)
    bind_logging(config)
    capsys.readouterr()

    config.update("general", "debug_mode", True)
    logger.debug("now visible")

    assert "now visible" in capsys.readouterr().err


def test_bind_logging_ignores_other_sections(tmp_path):
    config = ConfigManager(str(tmp_path / "icondeck.json"))
    config.update("general", "log_dir", str(tmp_path / "logs"))
    handler = bind_logging(config)
    first = list((tmp_path / "logs").glob("icondeck_*.log"))

    config.update("catalog", "max_icons", 10)

    assert len(first) == 1
    assert list((tmp_path / "logs").glob("icondeck_*.log")) == first
    config.on_changed.disconnect(handler)
    assert config.on_changed.subscriber_count == 0
