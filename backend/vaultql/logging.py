"""
Centralized logging configuration for vaultql.

Provides:
- Console logging with colored, prefixed output by application area
- Optional file logging with timestamps for post-mortem analysis
- Logger factory for the different components

Never pass key material, plaintext, or ciphertext to these loggers.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for console output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"


# Area-specific colors and prefixes
AREA_CONFIG = {
    "main": {"color": Colors.BRIGHT_CYAN, "prefix": "VAULTQL.main"},
    "vault": {"color": Colors.BRIGHT_MAGENTA, "prefix": "VAULTQL.vault"},
    "db": {"color": Colors.BRIGHT_BLUE, "prefix": "VAULTQL.db"},
    "api.graphql": {"color": Colors.GREEN, "prefix": "VAULTQL.api.graphql"},
}

# Default for unknown areas
DEFAULT_AREA_CONFIG = {"color": Colors.WHITE, "prefix": "VAULTQL"}


class _AreaFormatter(logging.Formatter):
    """Resolves an application area to its color and prefix."""

    def __init__(self, area: str = "main"):
        super().__init__()
        config = AREA_CONFIG.get(area, DEFAULT_AREA_CONFIG)
        self.area_color = config["color"]
        self.area_prefix = config["prefix"]


class ColoredConsoleFormatter(_AreaFormatter):
    """Adds colors and area prefixes to console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.RESET,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BRIGHT_RED + Colors.BOLD,
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # Format: [VAULTQL.area] HH:MM:SS LEVEL: message
        prefix = f"{self.area_color}[{self.area_prefix}]{Colors.RESET}"
        time_str = f"{Colors.DIM}{timestamp}{Colors.RESET}"
        level_str = f"{level_color}{record.levelname:<8}{Colors.RESET}"

        return f"{prefix} {time_str} {level_str} {record.getMessage()}"


class FileFormatter(_AreaFormatter):
    """Plain output with full timestamps for log files."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        return f"{timestamp} [{self.area_prefix}] {record.levelname}: {record.getMessage()}"


_console_level: int = logging.INFO
_file_handler: Optional[logging.FileHandler] = None


def setup_logging(
    log_dir: Optional[str] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """
    Initialize the logging system.

    Args:
        log_dir: Directory for log files. Console only when omitted.
        console_level: Minimum level for console output
        file_level: Minimum level for file output

    Returns:
        Path to the log directory, or None without file logging
    """
    global _console_level, _file_handler

    _console_level = console_level

    if not log_dir:
        if _file_handler:
            logging.getLogger().removeHandler(_file_handler)
            _file_handler.close()
        _file_handler = None
        _configure_existing_loggers()
        return None

    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    log_filename = datetime.now().strftime("vaultql_%Y%m%d_%H%M%S.log")
    log_path = path / log_filename

    latest_link = path / "latest.log"
    try:
        if latest_link.is_symlink() or latest_link.exists():
            latest_link.unlink()
        latest_link.symlink_to(log_filename)
    except OSError:
        pass  # Symlinks may not work on all systems

    if _file_handler:
        _file_handler.close()
    _file_handler = logging.FileHandler(log_path, encoding="utf-8")
    _file_handler.setLevel(file_level)
    _file_handler.setFormatter(FileFormatter("main"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(_file_handler)

    root_logger.info(f"Logging initialized. Log file: {log_path}")

    # Module-level loggers are created at import, before setup runs
    _configure_existing_loggers()

    return path


def _configure_existing_loggers() -> None:
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith("vaultql.") or not isinstance(logger, logging.Logger):
            continue
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                # Points at a previous run's log file
                logger.removeHandler(handler)
                handler.close()
            elif isinstance(handler.formatter, ColoredConsoleFormatter):
                handler.setLevel(_console_level)
        if _file_handler:
            _add_file_handler(logger, name[len("vaultql."):])


def _add_file_handler(logger: logging.Logger, area: str) -> None:
    area_file_handler = logging.FileHandler(
        _file_handler.baseFilename,
        encoding="utf-8"
    )
    area_file_handler.setLevel(logging.DEBUG)
    area_file_handler.setFormatter(FileFormatter(area))
    logger.addHandler(area_file_handler)


def get_logger(area: str = "main") -> logging.Logger:
    """
    Get a logger for a specific application area.

    Args:
        area: The application area (e.g., "vault", "db", "api.graphql")

    Returns:
        Configured logger instance

    Example:
        logger = get_logger("vault")
        logger.info("Vault key generated")
        # Output: [VAULTQL.vault] 14:32:15 INFO     Vault key generated
    """
    logger = logging.getLogger(f"vaultql.{area}")

    # Only configure if not already done
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(_console_level)
        console_handler.setFormatter(ColoredConsoleFormatter(area))
        logger.addHandler(console_handler)

        if _file_handler:
            _add_file_handler(logger, area)

        # Don't propagate to root to avoid duplicate logs
        logger.propagate = False

    return logger
