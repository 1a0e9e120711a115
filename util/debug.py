###########EXTERNAL IMPORTS############

import logging
import os
from typing import Optional, List
from dotenv import load_dotenv

#######################################

#############LOCAL IMPORTS#############

import util.functions.objects as objects

#######################################


class LoggerManager:
    """
    Static manager for the application loggers.

    Configures the root logger once from the environment (optionally loaded
    from a .env file) and hands out named loggers to the modules.

    Environment:
        LOG_LEVEL: Name of the logging level (DEBUG, INFO, ...). Defaults to INFO.
        LOG_TO_FILE: TRUE to also write the log to a file.
        LOG_FILE: Path of the log file. Required when LOG_TO_FILE is TRUE.
    """

    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    DEFAULT_LEVEL = "INFO"

    _initialized = False
    _handlers: List[logging.Handler] = []

    def __init__(self):
        raise TypeError("LoggerManager is a static class and cannot be instantiated")

    @staticmethod
    def init(config_file: Optional[str] = None) -> None:
        """
        Configures the root logger.

        Calling it more than once has no effect until `reset()` is called.

        Args:
            config_file: Optional path to a .env file with the logging settings.

        Raises:
            ValueError: If LOG_LEVEL is not a valid level name.
            KeyError: If LOG_TO_FILE is enabled and LOG_FILE is missing.
        """

        if LoggerManager._initialized:
            return

        if config_file is not None:
            load_dotenv(config_file)

        level = LoggerManager.get_level(os.getenv("LOG_LEVEL", LoggerManager.DEFAULT_LEVEL))
        formatter = logging.Formatter(LoggerManager.LOG_FORMAT)

        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if objects.check_bool_str(os.getenv("LOG_TO_FILE")):
            handlers.append(logging.FileHandler(objects.require_env_variable("LOG_FILE")))

        root = logging.getLogger()
        root.setLevel(level)
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

        LoggerManager._handlers = handlers
        LoggerManager._initialized = True

    @staticmethod
    def reset() -> None:
        """Removes the handlers installed by `init()` so it can run again."""

        root = logging.getLogger()
        for handler in LoggerManager._handlers:
            root.removeHandler(handler)
            handler.close()

        LoggerManager._handlers = []
        LoggerManager._initialized = False

    @staticmethod
    def get_level(name: str) -> int:
        """
        Converts a level name to its numeric logging level.

        Args:
            name: Level name, case-insensitive.

        Returns:
            int: The logging level.

        Raises:
            ValueError: If the name is not a known logging level.
        """

        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Invalid log level: {name}")

        return level

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Returns the logger with the given name."""

        return logging.getLogger(name)
