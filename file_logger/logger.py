"""Buffered, size-capped error logger that flushes to a UTF-8 file."""

import logging
import os
import threading
from datetime import datetime

from file_logger.config import Config
from file_logger.formatter import format_record, render_stack_trace
from file_logger.storage import append_text, read_all_text, rotate_if_over

logger = logging.getLogger(__name__)

MAX_MESSAGES = 30
MAX_FILE_SIZE = 8 * 1024 * 512


class FileLogger:
    """Accumulates formatted records in memory and appends them to a file.

    Every public operation holds one per-instance lock for its whole
    duration, file I/O included. I/O failures never reach the caller.
    """

    def __init__(
        self,
        path,
        *,
        max_messages: int = MAX_MESSAGES,
        max_file_size: int = MAX_FILE_SIZE,
        time_func=None,
        pid_func=None,
        trace_renderer=None,
    ):
        self._path = os.fspath(path) if path is not None else None
        self._max_messages = max_messages
        self._max_file_size = max_file_size
        self._time_func = time_func or datetime.now
        self._pid_func = pid_func or os.getpid
        self._trace_renderer = trace_renderer or render_stack_trace
        self._lock = threading.Lock()
        self._messages: list[str] = []

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "FileLogger":
        path = None
        if config.cache_dir is not None:
            path = os.path.join(config.cache_dir, config.log_filename)
        return cls(
            path,
            max_messages=config.max_messages,
            max_file_size=config.max_file_size_bytes,
            **kwargs,
        )

    def get_destination(self) -> str | None:
        return self._path

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def __bool__(self) -> bool:
        return True

    def error(self, message, exc: BaseException | None = None) -> None:
        """Buffer one record; flushes once the buffer reaches max_messages."""
        with self._lock:
            record = format_record(
                message,
                exc,
                now=self._time_func(),
                pid=self._pid_func(),
                render_trace=self._trace_renderer,
            )
            self._messages.append(record)
            if len(self._messages) >= self._max_messages:
                self._flush_locked()

    def flush(self) -> None:
        with self._lock:
            self._flush_locked()

    def get_log(self) -> str:
        """Return the file contents followed by the pending records. No side effects."""
        with self._lock:
            contents = ""
            if self._path is not None:
                try:
                    contents = read_all_text(self._path)
                except (OSError, ValueError) as e:
                    logger.debug("Could not read %s: %s", self._path, e)
            return contents + self._joined_messages()

    def _joined_messages(self) -> str:
        return "".join(m + "\n" for m in self._messages)

    def _flush_locked(self):
        if self._path is not None and self._messages:
            rotate_if_over(self._path, self._max_file_size)
            try:
                append_text(self._path, self._joined_messages())
            except (OSError, ValueError) as e:
                # Records are dropped on write failure; the buffer is cleared regardless.
                logger.debug(
                    "Dropped %d record(s) for %s: %s", len(self._messages), self._path, e
                )
        self._messages.clear()


def get_logger(path) -> FileLogger:
    return FileLogger(path)


def get_cache_logger(cache_dir, file_name: str) -> FileLogger:
    """Logger writing to <cache_dir>/<file_name>; no destination if cache_dir is None."""
    if cache_dir is None:
        return FileLogger(None)
    return FileLogger(os.path.join(cache_dir, file_name))
