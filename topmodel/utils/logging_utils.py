import logging
import sys
from typing import Optional, Union


LevelLike = Union[int, str]


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def resolve_level(level: LevelLike, fallback: int = logging.INFO) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), fallback)


def configure_split_stream_logging(
    *,
    level: LevelLike = logging.INFO,
    stderr_level: LevelLike = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Send records below ``stderr_level`` to stdout and the rest to stderr.

    Handlers already attached to the target logger are replaced, so calling
    this twice does not duplicate output. ``logger_name=None`` targets root;
    a named logger stops propagating so root handlers do not repeat its records.
    """
    target = logging.getLogger(logger_name)
    target.handlers.clear()
    if logger_name:
        target.propagate = False
    target.setLevel(resolve_level(level))

    split_at = max(resolve_level(stderr_level, logging.WARNING), logging.DEBUG)
    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(split_at))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(split_at)
    stderr_handler.setFormatter(formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
