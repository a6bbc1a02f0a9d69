# 📄 File: growtrack/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up a logging system that records what happens in the app in a structured way,
# so it is easy to see which request and which user a log line belongs to.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), contextual request
# information carried in contextvars, and a timing decorator for handlers.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# growtrack.main (setup), request logging middleware (log_context),
# environmental analytics handlers and repositories (get_logger, log_function_call)

import asyncio
import functools
import logging
import os
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from growtrack.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'growtrack-api'


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that adds request ID, user ID and timestamp
    to every log record.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per record with service, context and
    any ``extra_fields`` passed through ``StructuredLogger``.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()
        if user_id_var.get():
            log_record['user_id'] = user_id_var.get()

        # extra_fields arrives as a record attribute; nest it under "extra"
        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class StructuredLogger:
    """
    Logger wrapper with structured extra fields.

    Keyword arguments other than the stdlib ones become extra fields
    on the emitted record.
    """

    _STDLIB_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in self._STDLIB_KWARGS:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items() if k in self._STDLIB_KWARGS}

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to ``Settings.LOG_LEVEL``
        log_format: ``json`` or ``text``, defaults to ``Settings.LOG_FORMAT``
        enable_console: Attach a stdout handler

    Returns:
        The ``startup`` logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Context manager binding request information to every log record.

    Args:
        request_id: Request identifier, generated when omitted
        user_id: User identifier
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def log_function_call(func_name: Optional[str] = None):
    """
    Decorator for logging function calls with timing.

    Failures are logged and re-raised unchanged.

    Args:
        func_name: Custom function name for logging
    """
    def decorator(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            name = func_name or func.__qualname__

            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Function {name} failed: {e}",
                    extra={
                        'function': name,
                        'duration_ms': (time.perf_counter() - start_time) * 1000,
                        'event_type': 'function_call',
                        'error': str(e)
                    },
                    exc_info=True
                )
                raise

            logger.debug(
                f"Function {name} completed successfully",
                extra={
                    'function': name,
                    'duration_ms': (time.perf_counter() - start_time) * 1000,
                    'event_type': 'function_call'
                }
            )
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            name = func_name or func.__qualname__

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Function {name} failed: {e}",
                    extra={
                        'function': name,
                        'duration_ms': (time.perf_counter() - start_time) * 1000,
                        'event_type': 'function_call',
                        'error': str(e)
                    },
                    exc_info=True
                )
                raise

            logger.debug(
                f"Function {name} completed successfully",
                extra={
                    'function': name,
                    'duration_ms': (time.perf_counter() - start_time) * 1000,
                    'event_type': 'function_call'
                }
            )
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
