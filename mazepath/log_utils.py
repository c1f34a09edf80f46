"""
log_utils.py: console/file logging for the mazepath CLI.

Loggers are module loggers under the "mazepath" namespace; the topic printed in
each line is the module name after the package (generator, solver, ...).
"""

import logging
from typing import Optional

PROJECT = "mazepath"


def setup_logging(level=logging.INFO, debug: bool = False, color_logs: bool = False,
                  log_file: Optional[str] = None):
    """Configures the root logger. `debug` lowers the mazepath loggers to DEBUG."""
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        for h in root_logger.handlers[:]:
            root_logger.removeHandler(h)
            h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TopicFormatter(use_color=color_logs))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
            file_handler.setFormatter(TopicFormatter(use_color=False))
            root_logger.addHandler(file_handler)
        except OSError as e:
            logging.getLogger(PROJECT).error("Could not open log file %s: %s", log_file, e)

    # Silence noisy libraries
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    logging.getLogger(PROJECT).setLevel(logging.DEBUG if debug else logging.NOTSET)
    if debug:
        root_logger.setLevel(logging.DEBUG)


class TopicFormatter(logging.Formatter):
    """Aligned `LEVEL:topic : message` lines; multi-line messages keep the prefix on every line."""

    COLORS = {
        logging.DEBUG: "\033[38;5;252m",
        logging.INFO: "\033[38;5;111m",
        logging.WARNING: "\033[38;5;229m",
        logging.ERROR: "\033[38;5;210m",
        logging.CRITICAL: "\033[38;5;217m",
    }

    def __init__(self, use_color=False):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        color = self.COLORS.get(record.levelno, "") if self.use_color else ""
        reset = "\033[0m" if self.use_color else ""
        level_name = record.levelname[:5]

        name_parts = record.name.split(".")
        topic = name_parts[1][:6] if len(name_parts) > 1 else record.name[:6]

        prefix = f"{color}{level_name:<5}{reset}:{topic:<6}: "
        message = record.getMessage()
        if record.exc_info:
            message = message + "\n" + self.formatException(record.exc_info)
        return "\n".join(f"{prefix}{line}" for line in message.split("\n"))
