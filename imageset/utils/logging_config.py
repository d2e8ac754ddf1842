import logging
import logging.handlers
import sys

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TqdmLoggingHandler(logging.Handler):
    """Writes records through ``tqdm.write`` so active progress bars stay intact."""

    def __init__(self, stream=None, level=logging.NOTSET):
        super().__init__(level)
        self.stream = stream

    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=self.stream or sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(log_level=logging.INFO, log_file=None):
    """
    Configure the ``imageset`` logger.

    Console records go to stderr, leaving stdout for selection results.

    Args:
        log_level (int): The minimum logging level to display.
        log_file (str): Optional path of a rotating log file.
    """
    logger = logging.getLogger("imageset")
    logger.setLevel(log_level)

    # Reconfiguring replaces earlier handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
