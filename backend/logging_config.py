"""
Logging setup shared by the CLI, API and frontend entry points.
Library modules only create module loggers; handlers are installed here.
"""

import logging
import sys
from typing import Optional
from config import config

# Chatty third-party loggers kept at WARNING
QUIET_LOGGERS = ('PIL', 'fitz', 'urllib3', 'reportlab', 'multipart')


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Install handlers on the root logger, replacing any existing ones.

    Args:
        log_level: Level name (default: Config.LOG_LEVEL)
        log_file: File name created inside Config.LOG_DIR
        console_output: Log to stderr. stdout is left for command output.

    Returns:
        The root logger
    """
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper())
    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(config.get_log_path(log_file), mode='a', encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
