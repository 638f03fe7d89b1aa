"""Progress logging for the page pipeline, silent unless the caller asks for it."""
from __future__ import annotations

import logging


class _Silent:
    """Accepts the logging calls `run` makes and drops them."""

    def _drop(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    debug = info = warning = _drop


def progress_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str = "lessonforge",
) -> logging.Logger | _Silent:
    """
    Logger for pipeline progress: `logger` when given, the named logger when
    `enabled`, otherwise a sink. Records propagate to whatever handlers the
    application configured; nothing is attached here.
    """
    if logger is not None:
        return logger
    if enabled:
        return logging.getLogger(name)
    return _Silent()
