"""
lingcheck Logging & Errors Module
=================================
Structured logging and the exception hierarchy shared by the checking
pipeline and the command line.

Logging settings come from the environment (LINGCHECK_LOG_*). Console
output always goes to stderr so that reports written to stdout stay
machine-readable.
"""

import os
import sys
import json
import logging
import uuid
import time
import functools
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Callable
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                # Number of log backup files to keep

APP_NAME = "lingcheck"


# =============================================================================
# LOGGING SETTINGS
# =============================================================================

@dataclass
class LoggingSettings:
    """Logging configuration with quiet defaults for command-line use."""

    log_level: str = "WARNING"
    log_format: str = "text"  # Options: json, text
    log_to_file: bool = False
    log_to_console: bool = True
    log_dir: Path = field(default_factory=lambda: Path.cwd() / 'logs')

    @classmethod
    def from_env(cls) -> 'LoggingSettings':
        """Load logging settings from environment variables."""
        return cls(
            log_level=os.environ.get('LINGCHECK_LOG_LEVEL', 'WARNING'),
            log_format=os.environ.get('LINGCHECK_LOG_FORMAT', 'text'),
            log_to_file=os.environ.get('LINGCHECK_LOG_TO_FILE', 'false').lower() == 'true',
            log_dir=Path(os.environ.get('LINGCHECK_LOG_DIR', str(Path.cwd() / 'logs'))),
        )

    def validate(self) -> tuple:
        """Validate settings and return (is_valid, errors)."""
        errors = []

        if self.log_format not in ('json', 'text'):
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'json' or 'text'")

        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            errors.append(f"Invalid log_level: {self.log_level}")

        return (len(errors) == 0, errors)


# Global settings instance
_settings: Optional[LoggingSettings] = None


def get_settings() -> LoggingSettings:
    """Get or create the global logging settings."""
    global _settings
    if _settings is None:
        _settings = LoggingSettings.from_env()
    return _settings


def set_level(level: str):
    """Change the level of the global settings and of every lingcheck logger (used by --verbose)."""
    settings = get_settings()
    settings.log_level = level.upper()
    numeric_level = getattr(logging, settings.log_level, logging.WARNING)
    for name, existing in logging.Logger.manager.loggerDict.items():
        if isinstance(existing, logging.Logger) and (
                name == APP_NAME or name.startswith(APP_NAME + '.')):
            existing.setLevel(numeric_level)


def reset_settings():
    """Reset the global logging settings (for testing)."""
    global _settings
    _settings = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Thread-safe structured logger with correlation IDs."""

    _local = threading.local()

    def __init__(self, name: str, settings: Optional[LoggingSettings] = None):
        self.name = name
        self.settings = settings or get_settings()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.settings.log_level.upper(), logging.WARNING))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.settings.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.settings.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler with rotation
        if self.settings.log_to_file:
            from logging.handlers import RotatingFileHandler
            self.settings.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.settings.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        correlation_id = getattr(cls._local, 'correlation_id', None)
        if correlation_id is None:
            correlation_id = cls.new_correlation_id()
        return correlation_id

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID (one per checked document)."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _emit(self, level: int, message: str, exc_info: bool = False, **kwargs):
        if not self.logger.isEnabledFor(level):
            return
        kwargs.setdefault('correlation_id', self.get_correlation_id())
        if self.settings.log_format == 'text':
            details = ' '.join(f"{k}={v}" for k, v in kwargs.items() if k != 'correlation_id')
            if details:
                message = f"{message} ({details})"
        self.logger.log(level, message, exc_info=exc_info, extra={'fields': kwargs})

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._emit(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._emit(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._emit(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self._emit(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.info(f"{operation} completed", operation=operation, status='completed',
                      duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), exc_info=True, **context)
            raise


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        log_data.update(getattr(record, 'fields', {}) or {})

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name, get_settings())


# =============================================================================
# ERROR HANDLING UTILITIES
# =============================================================================

class LingCheckError(Exception):
    """Base exception for lingcheck."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a structured error record."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ConfigurationError(LingCheckError):
    """Invalid or contradictory checking configuration. Raised before any processing."""
    def __init__(self, message: str, option: Optional[str] = None, **kwargs):
        super().__init__(message, code="CONFIGURATION_ERROR",
                         details={'option': option, **kwargs})


class FileError(LingCheckError):
    """Input file handling error."""
    def __init__(self, message: str, filename: Optional[str] = None, **kwargs):
        super().__init__(message, code="FILE_ERROR",
                         details={'filename': filename, **kwargs})


class ProcessingError(LingCheckError):
    """Document processing error."""
    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, code="PROCESSING_ERROR",
                         details={'stage': stage, **kwargs})


def handle_errors(logger: Optional[StructuredLogger] = None):
    """Decorator for standardized error handling."""
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or get_logger(func.__module__)
            try:
                return func(*args, **kwargs)
            except LingCheckError:
                raise  # Re-raise our custom errors
            except FileNotFoundError as e:
                _logger.error(f"File not found: {e}")
                raise FileError(f"File not found: {e}", filename=getattr(e, 'filename', None))
            except PermissionError as e:
                _logger.error(f"Permission denied: {e}")
                raise FileError(f"Permission denied: {e}", filename=getattr(e, 'filename', None))
            except UnicodeDecodeError as e:
                _logger.error(f"Cannot decode input: {e}")
                raise FileError(f"Cannot decode input: {e}")
            except Exception as e:
                _logger.exception(f"Unexpected error in {func.__name__}: {e}")
                raise ProcessingError(f"An unexpected error occurred: {type(e).__name__}: {e}")
        return wrapper
    return decorator
