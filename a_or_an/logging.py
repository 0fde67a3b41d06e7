"""
Configures loggers so that INFO and below go to stdout, and WARNING and above go to stderr, optionally with a log file.
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging import LogRecord, Logger, Filter, Formatter
from pathlib import Path
from typing import Optional, Union, Collection, Iterable, Callable

from tzlocal import get_localzone

__all__ = ['init_logging', 'create_filter', 'DatetimeFormatter', 'ENTRY_FMT_DETAILED', 'VERBOSE']
log = logging.getLogger(__name__)

ENTRY_FMT_DETAILED = '%(asctime)s %(levelname)s %(threadName)s %(name)s %(lineno)d %(message)s'
VERBOSE = 19

_NotSet = object()

PathLike = Union[Path, str]
Verbosity = Union[int, bool, None]
OptStrs = Optional[Collection[str]]


def init_logging(
    verbosity: Verbosity = 0,
    *,
    log_path: PathLike | None = None,
    names: OptStrs = _NotSet,
    date_fmt: str = None,
    millis: bool = False,
    entry_fmt: str = None,
    streams: bool = True,
    stdout: bool = True,
    replace_handlers: bool = True,
) -> Path | None:
    """
    Configures stream handlers for stdout and stderr so that logs with level logging.INFO and below are sent to stdout
    and logs with level logging.WARNING and above are sent to stderr.  If a log_path is provided, then a file handler
    will be added as well, which keeps 7 days of DEBUG logs.

    The verbosity argument affects the log level that is set for stdout:
    - 0: 20 = logging.INFO (default)
    - 1: 11 = includes the custom 'VERBOSE' (19) log level
    - 2: 10 = logging.DEBUG

    :param verbosity: Higher values increase stdout output verbosity
    :param log_path: The path where logs should be written, or None (default) to prevent logging to file
    :param names: The names of the loggers for which handlers should be configured.  If set to None, then the root
      logger will be configured.  If not specified, then the loggers for ``__main__`` and this package are configured.
    :param date_fmt: The datetime format code to use for timestamps
    :param millis: Include milliseconds in the datetime format (ignored if ``date_fmt`` is specified)
    :param entry_fmt: The stream handler log message format.  Defaults to ``'%(message)s'`` when verbosity < 3,
      otherwise :data:`ENTRY_FMT_DETAILED` is used.
    :param streams: Log to stdout and stderr (default: True)
    :param stdout: Set to False to send all stream logs to stderr, so that stdout only contains a command's output
    :param replace_handlers: Remove any existing handlers on loggers before adding handlers to them
    :return: The path to which logs are being written, or None if no file handler was configured.
    """
    _configure_level_names()
    loggers = _get_loggers(names, replace_handlers)
    root_logger = logging.getLogger()
    if root_logger in loggers:
        root_logger.addHandler(logging.NullHandler())       # Hide logs written directly to the root logger
    root_logger.setLevel(logging.NOTSET)                    # Default is 30 / WARNING

    date_fmt = date_fmt or ('%Y-%m-%d %H:%M:%S.%f %Z' if millis else '%Y-%m-%d %H:%M:%S %Z')
    if streams:
        _add_stream_handlers(loggers, verbosity, date_fmt, entry_fmt, stdout)

    if log_path is not None:
        log_path = Path(log_path).expanduser()
        _add_file_handler(loggers, log_path, date_fmt)

    return log_path


def _add_stream_handlers(
    loggers: Iterable[Logger], verbosity: Verbosity, date_fmt: str, entry_fmt: Optional[str], stdout: bool = True
):
    import sys

    entry_fmt = entry_fmt or (ENTRY_FMT_DETAILED if verbosity and verbosity > 2 else '%(message)s')
    low_handler = logging.StreamHandler(sys.stdout if stdout else sys.stderr)
    low_handler.setLevel(logging.DEBUG + 2 - verbosity if verbosity else logging.INFO)
    low_handler.addFilter(create_filter(lambda r: r.levelno < logging.WARNING))
    low_handler.name = 'stdout' if stdout else 'stderr_low'

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.INFO)
    stderr_handler.addFilter(create_filter(lambda r: r.levelno >= logging.WARNING))
    stderr_handler.name = 'stderr'

    stream_formatter = DatetimeFormatter(entry_fmt, date_fmt)
    for handler in (low_handler, stderr_handler):
        handler.setFormatter(stream_formatter)
        for logger in loggers:
            logger.addHandler(handler)


def _add_file_handler(loggers: Iterable[Logger], log_path: Path, date_fmt: str):
    from logging.handlers import TimedRotatingFileHandler

    log_dir = log_path.parent
    if log_dir.exists() and not log_dir.is_dir():
        raise ValueError(f'Invalid log path - {log_dir} is not a directory')
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(log_path.as_posix(), when='midnight', backupCount=7, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(DatetimeFormatter(ENTRY_FMT_DETAILED, date_fmt))
    file_handler.name = log_path.as_posix()
    for logger in loggers:
        logger.addHandler(file_handler)
    log.log(VERBOSE, f'Logging to {log_path}')


def _get_logger_names(names: OptStrs = _NotSet) -> set[Optional[str]]:
    if names is _NotSet:
        return {__name__.split('.')[0], '__main__'}
    elif names is None or isinstance(names, str):
        return {names}
    names = set(names)
    return {None} if None in names else names


def _get_loggers(names: OptStrs, replace_handlers: bool) -> list[Logger]:
    loggers = list(map(logging.getLogger, _get_logger_names(names)))
    for logger in loggers:
        logger.setLevel(logging.NOTSET)  # Let handlers deal with log levels
        if replace_handlers:
            for handler in logger.handlers:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
            logger.handlers = []

    return loggers


def _configure_level_names():
    if VERBOSE not in logging._levelToName:  # noqa
        logging.addLevelName(VERBOSE, 'VERBOSE')


def create_filter(filter_fn: Callable[[LogRecord], bool]) -> Filter:
    """
    :param filter_fn: A function that takes 1 parameter (record) and returns True if the record should be logged, or
      False to ignore it
    :return: A custom, initialized subclass of logging.Filter using the given filter function
    """
    class CustomLogFilter(Filter):
        def filter(self, record: LogRecord) -> bool:
            return filter_fn(record)

    return CustomLogFilter()


class DatetimeFormatter(Formatter):
    """Enables use of ``%f`` (micro/milliseconds) and ``%Z`` (local timezone) in datetime formats."""
    _local_tz = get_localzone()

    def formatTime(self, record: LogRecord, datefmt: str = None) -> str:
        dt = datetime.fromtimestamp(record.created, self._local_tz)
        if datefmt:
            return dt.strftime(datefmt)
        else:
            return self.default_msec_format % (dt.strftime(self.default_time_format), record.msecs)
