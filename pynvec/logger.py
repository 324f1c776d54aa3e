# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pynvec

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves; applications call ``setup_logger`` (or
``setup_logger_from_config``) to see those messages.
"""

import logging
import sys
from enum import Enum
from typing import Optional

PACKAGE_LOGGER = "pynvec"


class LogLevel(Enum):
    """Log levels for the library"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


# Add TRACE level to logging
logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def trace(self, message, *args, **kwargs):
    """Add trace method to logger"""
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


# Add trace method to Logger class
logging.Logger.trace = trace


def level_value(level: str) -> int:
    """Numeric value of a level name, case-insensitive

    Raises
    ------
    ValueError
        If the name is not one of the ``LogLevel`` members
    """
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        raise ValueError(
            f"Unknown log level '{level}', expected one of {[m.name for m in LogLevel]}") from None


class ColoredFormatter(logging.Formatter):
    """Colored log formatter"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = PACKAGE_LOGGER,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Setup logger with specified configuration

    Parameters:
    -----------
    name : str
        Logger name, e.g. "pynvec" or "pynvec.spherical.sloop"
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable console output

    Returns:
    --------
    logging.Logger
        Configured logger
    """
    value = level_value(level)
    logger = logging.getLogger(name)
    logger.setLevel(value)

    # Remove existing handlers
    logger.handlers = []

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(value)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(value)
        # Plain formatter for file
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)


class LogContext:
    """Context manager for temporary log level change

    Example:
        >>> with LogContext(get_logger("pynvec.spherical"), "DEBUG"):
        ...     loop = Loop.new(vertices)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = level_value(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Logger configuration manager for module-specific log levels"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "INFO"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set log level for specific module"""
        value = level_value(level)
        self.module_levels[module_name] = level
        # Update logger if it already exists
        logger = logging.getLogger(module_name)
        if logger.handlers:
            logger.setLevel(value)
            for handler in logger.handlers:
                handler.setLevel(value)

    def set_default_level(self, level: str):
        """Set default log level for all modules"""
        level_value(level)
        self.default_level = level

    def get_level_for_module(self, module_name: str) -> str:
        """Get log level for specific module"""
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Configure from dictionary"""
        if 'default_level' in config:
            self.set_default_level(config['default_level'])
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        if 'module_levels' in config:
            for module, level in config['module_levels'].items():
                self.set_module_level(module, level)

    def setup_all_loggers(self):
        """Setup all configured loggers"""
        setup_logger(PACKAGE_LOGGER, self.default_level, self.log_file, self.console)

        for module, level in self.module_levels.items():
            setup_logger(module, level, self.log_file, self.console)


# Global logger configuration
logger_config = LoggerConfig()


def setup_logger_from_config(config: dict):
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'pynvec.log',
        'console': True,
        'module_levels': {
            'pynvec.spherical.sloop': 'DEBUG',
            'pynvec.spherical.cpa': 'TRACE'
        }
    }
    """
    logger_config.configure_from_dict(config)
    logger_config.setup_all_loggers()
