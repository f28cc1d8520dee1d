"""Logging utilities for smoothopt.

Every module obtains its logger through :func:`get_logger`, so the whole
package can be silenced or made chatty from one place. The package default
level is WARNING; optimizer progress requested with ``verbose=True`` is
still shown because the driver runs inside :func:`verbose_logging`, which
lowers its logger to INFO for the length of the run.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Set by configure_logging; applied to loggers created afterwards too
_stream: Optional[object] = None
_formatter = logging.Formatter(_DEFAULT_FORMAT)

_loggers: dict[str, logging.Logger] = {}


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int) -> logging.Handler:
    handler = _StderrHandler() if _stream is None else logging.StreamHandler(_stream)
    handler.setLevel(level)
    handler.setFormatter(_formatter)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``smoothopt`` logger for ``name``.

    Args:
        name: Usually ``__name__`` of the caller. Names outside the
            ``smoothopt`` namespace are nested under it.

    Example:
        >>> from smoothopt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("starting descent")
    """
    if name is None:
        name = "smoothopt"
    if name != "smoothopt" and not name.startswith("smoothopt."):
        name = f"smoothopt.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every smoothopt logger, existing and future.

    Args:
        level: A ``logging`` constant or its name (``"DEBUG"``, ``"INFO"``...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of every smoothopt logger.

    The settings also apply to loggers first requested later.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format; the package default when None.
        stream: Destination stream; the current ``sys.stderr`` when None.

    Example:
        >>> import logging
        >>> from smoothopt.logging import configure_logging
        >>> configure_logging(level=logging.INFO)
    """
    global _DEFAULT_LEVEL, _stream, _formatter
    level = _coerce_level(level)
    _stream = stream
    _formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)
    _DEFAULT_LEVEL = level

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(level))


@contextmanager
def verbose_logging(logger: logging.Logger, enabled: bool = True) -> Iterator[logging.Logger]:
    """Let INFO records of ``logger`` through while the block runs.

    Levels already at INFO or below are left alone; the previous levels are
    restored on exit. With ``enabled=False`` nothing changes.
    """
    if not enabled:
        yield logger
        return
    saved = [(logger, logger.level)] + [(h, h.level) for h in logger.handlers]
    try:
        if logger.getEffectiveLevel() > logging.INFO:
            logger.setLevel(logging.INFO)
        for handler in logger.handlers:
            if handler.level > logging.INFO:
                handler.setLevel(logging.INFO)
        yield logger
    finally:
        for obj, level in saved:
            obj.setLevel(level)


__all__ = ["get_logger", "set_log_level", "configure_logging", "verbose_logging"]
