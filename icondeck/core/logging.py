import sys
from typing import Optional
from loguru import logger
import os

from .config import ConfigManager, GeneralSettings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Keys of the "general" config section that change the sinks.
_LOGGING_KEYS = {"debug_mode", "log_dir", "log_to_file"}


def setup_logging(settings: Optional[GeneralSettings] = None):
    """
    Configures Loguru from the "general" settings section.

    Console level follows `debug_mode` (DEBUG / INFO); the rotating file
    sink under `log_dir` always records DEBUG and can be switched off
    with `log_to_file`.
    """
    settings = settings or GeneralSettings()
    logger.remove()

    level = "DEBUG" if settings.debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(
            os.path.join(settings.log_dir, "icondeck_{time}.log"),
            rotation="10 MB",
            retention="1 week",
            level="DEBUG",
        )

    logger.info(f"Logging initialized (console={level}, file={settings.log_to_file})")


def bind_logging(config: ConfigManager):
    """
    Set up logging from `config` and redo it whenever a general logging
    key is updated.

    Returns:
        The connected change handler (pass to `config.on_changed.disconnect`)
    """
    def on_changed(section: str, key: str, value):
        if section == "general" and key in _LOGGING_KEYS:
            setup_logging(config.data.general)

    setup_logging(config.data.general)
    config.on_changed.connect(on_changed)
    return on_changed
