from typing import Optional, Tuple

from loguru import logger

from add_on_line_items.config import get_config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

# (handler id, level) of the sink owned by this package
_sink: Optional[Tuple[int, str]] = None


def _package_records(record) -> bool:
    return record["name"].startswith("add_on_line_items") and "name" in record["extra"]


def configure_logging() -> None:
    """Attach the package's stdout sink at get_config().log_level.

    Only the package's own sink is ever added or replaced; sinks configured
    by the host application are left untouched. Calling again with an
    unchanged level is a no-op.
    """
    global _sink
    log_level = get_config().log_level.upper()
    if _sink is not None:
        handler_id, level = _sink
        if level == log_level:
            return
        logger.remove(handler_id)
    handler_id = logger.add(
        sink=lambda msg: print(msg, end=""),
        level=log_level,
        format=LOG_FORMAT,
        filter=_package_records,
    )
    _sink = (handler_id, log_level)


def get_logger(name: str = None):
    """Get the package logger bound to a name.

    Args:
        name (str, optional): Name for the logger context. Defaults to the package name.
    Returns:
        loguru.Logger: The bound logger.
    """
    configure_logging()
    return logger.bind(name=name or "add_on_line_items")
