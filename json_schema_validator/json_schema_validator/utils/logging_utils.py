import logging
import sys
from typing import Optional


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    logger_name: Optional[str] = None,
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """Attach split stdout/stderr handlers to *logger_name* (root when None):

    - records below ``stderr_level`` go to stdout
    - ``stderr_level`` and above go to stderr

    Handlers previously installed by this function are replaced, so calling
    it repeatedly does not duplicate output. Handlers installed by the
    embedding application are left alone.
    """

    target = logging.getLogger(logger_name)
    for handler in list(target.handlers):
        if getattr(handler, "_split_stream", False):
            target.removeHandler(handler)
    target.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)
    stdout_handler._split_stream = True

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)
    stderr_handler._split_stream = True

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
