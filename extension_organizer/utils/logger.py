# Console and file logging for the organizer

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import colorama
from colorama import Fore, Back, Style

# Enable ANSI handling on legacy Windows consoles
colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name"""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, '')
        record.colored_levelname = f"{log_color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


class ExtensionOrganizerLogger:
    """
    Logging front end for Extension Organizer

    Console output goes to stderr with colored level names. A dated log
    file is written only when a log directory is configured, so a plain
    organize run leaves nothing on disk except the organized layout.
    """

    LEVELS = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }

    def __init__(self, name: str = "ExtensionOrganizer", log_dir: Optional[str] = None):
        self.name = name
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file: Optional[Path] = None
        self.logger = logging.getLogger(self.name)
        self._setup_logging()

    def _setup_logging(self):
        """(Re)build the handlers for the current streams and log directory"""
        self.logger.setLevel(logging.DEBUG)

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_formatter = ColoredFormatter(
            '%(asctime)s | %(colored_levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        )

        # Bind to whatever stderr is current; the CLI may be invoked with swapped streams
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        self.log_file = None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_formatter = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            self.log_file = self.log_dir / f"{self.name}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def configure(self, log_dir: Optional[str] = None):
        """Point the logger at a new log directory (or none) and rebuild handlers"""
        self.log_dir = Path(log_dir) if log_dir else None
        self._setup_logging()

    def set_console_level(self, level: str):
        """Set the console output level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"""
        if level.upper() in self.LEVELS:
            for handler in self.logger.handlers:
                if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                    handler.setLevel(self.LEVELS[level.upper()])

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def critical(self, message: str, **kwargs):
        self.logger.critical(message, **kwargs)

    def log_operation_start(self, operation: str, details: str = ""):
        """Log the start of an operation"""
        message = f"🚀 Starting operation: {operation}"
        if details:
            message += f" | {details}"
        self.info(message)

    def log_operation_success(self, operation: str, details: str = ""):
        """Log successful completion of an operation"""
        message = f"✅ Completed operation: {operation}"
        if details:
            message += f" | {details}"
        self.info(message)

    def log_file_action(self, action: str, source: str, destination: str = "", dry_run: bool = False):
        """Log a single file operation at debug level"""
        prefix = "🔍 [DRY RUN] " if dry_run else "📁 "
        message = f"{prefix}{action}: {source}"
        if destination:
            message += f" → {destination}"
        self.debug(message)

    def log_stats(self, stats_dict: dict):
        """Log operation statistics"""
        self.debug("📊 Operation Statistics:")
        for key, value in stats_dict.items():
            self.debug(f"   {key}: {value}")


# Global logger instance
_global_logger: Optional[ExtensionOrganizerLogger] = None


def get_logger(name: str = "ExtensionOrganizer") -> ExtensionOrganizerLogger:
    """
    Get or create the global logger instance

    Args:
        name: Logger name

    Returns:
        ExtensionOrganizerLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ExtensionOrganizerLogger(name)
    return _global_logger


def setup_logging(verbose: bool = False, log_dir: Optional[str] = None) -> ExtensionOrganizerLogger:
    """
    Configure logging for one CLI invocation

    Args:
        verbose: If True, set console output to DEBUG level
        log_dir: Directory for the log file, None for console only

    Returns:
        Configured logger instance
    """
    logger = get_logger()
    logger.configure(log_dir)

    if verbose:
        logger.set_console_level('DEBUG')
        logger.debug("🔧 Verbose logging enabled")

    return logger
