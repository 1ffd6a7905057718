"""File logger demo — records sample errors into the configured cache directory."""

import logging
import os
import signal
import sys
import time

from file_logger.config import load_config, load_yaml_config
from file_logger.logger import FileLogger

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [file-logger] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


SAMPLE_ERRORS = [
    "Failed to decode media thumbnail",
    "Network request timed out",
    "Database cursor was closed unexpectedly",
    "Unknown push payload type",
]


def main():
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    config = load_config(load_yaml_config(os.environ.get("LOG_CONFIG_FILE")))
    if config.cache_dir is not None:
        os.makedirs(config.cache_dir, exist_ok=True)

    file_logger = FileLogger.from_config(config)
    logger.info(
        "Config: cache_dir=%s, filename=%s, max_messages=%d, max_size=%d bytes",
        config.cache_dir, config.log_filename, config.max_messages, config.max_file_size_bytes,
    )

    recorded = 0
    for message in SAMPLE_ERRORS:
        if not _running:
            break
        file_logger.error(message)
        recorded += 1
        time.sleep(0.05)

    try:
        int("not-a-number")
    except ValueError as e:
        file_logger.error("Failed to parse retry count", e)
        recorded += 1

    file_logger.flush()
    destination = file_logger.get_destination()
    if destination is None:
        logger.info("No cache directory configured; %d record(s) were discarded", recorded)
    else:
        logger.info(
            "Recorded %d error(s) to %s (%d chars in log)",
            recorded, destination, len(file_logger.get_log()),
        )


if __name__ == "__main__":
    main()
