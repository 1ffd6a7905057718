"""File backend: UTF-8 append, whole-file read, and size-cap rotation."""

import logging
import os

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


def append_text(path: str, text: str) -> None:
    """Append text to path as UTF-8, creating the file if missing.

    Open and write failures propagate as OSError; a failing close is ignored.
    """
    # newline="" keeps "\n" separators byte-exact; unencodable code points become "?"
    f = open(path, "a", encoding="utf-8", errors="replace", newline="")
    try:
        f.write(text)
    finally:
        try:
            f.close()
        except OSError:
            logger.debug("Ignoring close failure on %s", path)


def read_fully(stream, length: int) -> bytes:
    """Read up to length bytes, looping over short reads until EOF."""
    if length < 0:
        raise ValueError("length is negative")
    chunks = []
    total = 0
    while total < length:
        chunk = stream.read(min(length - total, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        total += len(chunk)
    return b"".join(chunks)


def read_all_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        data = read_fully(f, os.fstat(f.fileno()).st_size)
        # the file may have grown since fstat
        tail = f.read()
    return data + tail


def read_all_text(path: str) -> str:
    """Read the whole file as UTF-8, replacing malformed sequences."""
    return read_all_bytes(path).decode("utf-8", errors="replace")


def rotate_if_over(path: str, limit: int) -> bool:
    """Delete path when it is larger than limit bytes. Returns True if removed."""
    try:
        if os.path.getsize(path) <= limit:
            return False
        os.remove(path)
    except (OSError, ValueError) as e:
        logger.debug("Rotation skipped for %s: %s", path, e)
        return False
    logger.debug("Rotated %s (exceeded %d bytes)", path, limit)
    return True
