# src/winbuilder/core/utils/configure_logging.py
import logging
import sys
from typing import Mapping, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

Level = Union[str, int]


class LogWithTqdm(logging.Handler):
    """Writes records with `tqdm.write` so they print above an active progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


def _to_level(level: Level, fallback: int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), fallback)


def _apply_levels(levels: Optional[Mapping[str, Level]], fallback: int) -> None:
    for name, level in (levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, fallback))


def configure_logger(
        general_level: Level = "WARNING",
        module_specific_levels: Optional[Mapping[str, Level]] = None,
        silenced_loggers: Optional[Mapping[str, Level]] = None,
) -> None:
    """
    Sends all log output to stderr through tqdm, using the levels of the `debug` settings.
    Calling it again replaces the handler installed by the previous call.
    """
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, LogWithTqdm)]:
        root.removeHandler(handler)

    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_to_level(general_level, logging.WARNING))

    _apply_levels(module_specific_levels, logging.INFO)
    # Silenced loggers default to CRITICAL when the configured level is unknown
    _apply_levels(silenced_loggers, logging.CRITICAL)
