import logging
import os
from collections import OrderedDict
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from roomlog.core.settings import get_roomlog_config


def setup_logger(
    name: str = "roomlog",
    *,
    log_dir: Optional[str] = None,
    logger_level: Optional[int] = None,
    stream_level: int = logging.INFO,
    add_stream_handler: bool = True,
    add_file_handler: Optional[bool] = None,
    propagate: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    structlog_json: Optional[bool] = None,
) -> structlog.stdlib.BoundLogger:
    """Configure and initialize logging for RoomLog components.

    Sets up a console handler and, unless disabled by ``ROOMLOG__LOG_TO_FILE``, a
    rotating file handler on the given logger. Log files live under
    ``ROOMLOG__LOG_DIR`` (``~/.cache/roomlog/logs`` by default).

    Args:
        name: Logger name, defaults to "roomlog".
        log_dir: Custom directory for the log file.
        logger_level: Overall logger level. Defaults to ``ROOMLOG__LOG_LEVEL``.
        stream_level: StreamHandler level.
        add_stream_handler: Whether to add a stream handler.
        add_file_handler: Whether to add a file handler. Defaults to ``ROOMLOG__LOG_TO_FILE``.
        propagate: Whether the logger should propagate messages to ancestor loggers.
        max_bytes: Maximum size in bytes before rotating the log file.
        backup_count: Number of backup files to retain.
        structlog_json: If True, render JSON; otherwise use the console renderer.
            Defaults to ``ROOMLOG__LOG_JSON``.

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance.
    """
    config = get_roomlog_config()
    structlog_json = config.LOG_JSON if structlog_json is None else structlog_json
    add_file_handler = config.LOG_TO_FILE if add_file_handler is None else add_file_handler
    if logger_level is None:
        logger_level = logging.getLevelName(config.LOG_LEVEL.upper())

    stdlib_logger = logging.getLogger(name)
    stdlib_logger.handlers.clear()
    stdlib_logger.setLevel(logger_level)
    stdlib_logger.propagate = propagate

    if name == "roomlog":
        child_log_path = f"{name}.log"
    else:
        child_log_path = os.path.join("modules", f"{name}.log")
    log_file_path = os.path.join(os.path.expanduser(log_dir or config.LOG_DIR), child_log_path)

    # structlog renders the whole line itself
    line_format = logging.Formatter("%(message)s")

    if add_stream_handler:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(stream_level)
        stream_handler.setFormatter(line_format)
        stdlib_logger.addHandler(stream_handler)

    if add_file_handler:
        os.makedirs(Path(log_file_path).parent, exist_ok=True)
        file_handler = RotatingFileHandler(filename=log_file_path, maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setLevel(logger_level)
        file_handler.setFormatter(line_format)
        stdlib_logger.addHandler(file_handler)

    renderer = structlog.processors.JSONRenderer() if structlog_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _enforce_key_order_processor(
                ["timestamp", "event", "service", "request_id", "duration_ms", "level", "logger"]
            ),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def _enforce_key_order_processor(key_order: list[str]):
    def _processor(_logger, _method_name, event_dict):
        ordered = OrderedDict()
        for key in key_order:
            if key in event_dict:
                ordered[key] = event_dict.pop(key)
        for k in sorted(event_dict.keys()):
            ordered[k] = event_dict[k]
        return ordered

    return _processor


def get_logger(name: str | None = "roomlog", **kwargs) -> structlog.stdlib.BoundLogger:
    """Create or retrieve a named logger under the ``roomlog`` hierarchy.

    Child loggers propagate to ``roomlog`` and carry no stream handler of their
    own, so each record is printed once.

    Example:
        .. code-block:: python

            from roomlog.core.logger import get_logger

            logger = get_logger(__name__)
            logger.info("User registered", user_id="alice")
    """
    if not name:
        name = "roomlog"

    full_name = name if name.startswith("roomlog") else f"roomlog.{name}"
    if full_name == "roomlog":
        return setup_logger(full_name, **kwargs)

    root = logging.getLogger("roomlog")
    if not root.handlers:
        setup_logger("roomlog")
    kwargs.setdefault("propagate", True)
    kwargs.setdefault("add_stream_handler", False)
    kwargs.setdefault("add_file_handler", False)
    return setup_logger(full_name, **kwargs)
