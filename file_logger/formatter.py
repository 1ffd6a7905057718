"""Record formatter — one timestamped, pid-stamped line per error."""

import logging
import traceback
from datetime import datetime

logger = logging.getLogger(__name__)

# dd/MM/yy HH:mm:ss, milliseconds appended separately
TIMESTAMP_FORMAT = "%d/%m/%y %H:%M:%S."


def format_timestamp(now: datetime) -> str:
    return now.strftime(TIMESTAMP_FORMAT) + f"{now.microsecond // 1000:03d}"


def render_stack_trace(exc: BaseException) -> str:
    """Default trace renderer: the standard Python traceback text."""
    lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(lines).rstrip("\n")


def format_record(message, exc=None, *, now: datetime, pid: int, render_trace=render_stack_trace) -> str:
    """Build `<timestamp>: <pid>: : <message>[\\n<trace>]`.

    The empty field between pid and message is kept for parser compatibility.
    """
    record = f"{format_timestamp(now)}: {pid}: : {message}"
    if exc is None:
        return record

    try:
        trace = render_trace(exc)
    except Exception:
        logger.debug("Stack trace renderer failed, omitting trace", exc_info=True)
        return record
    if not trace:
        return record
    return f"{record}\n{trace}"
