"""
Logging utilities for safe log output.

Paths, URLs and filter strings passed to the builder are user-provided and
can contain newlines or other control characters that would forge log
entries. The LogRecord factory installed by install_safe_logging() escapes
them before formatting.

Stream handles are logged through describe_source() so that log lines never
call into the stream object's own repr.
"""

import logging
import os
import re

_ORIGINAL_FACTORY = logging.getLogRecordFactory()

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _sanitize_value(value):
    """Escape CR/LF and other control characters in a string for safe logging."""
    if isinstance(value, str):
        value = value.replace('\r\n', '\\r\\n').replace('\r', '\\r').replace('\n', '\\n')
        return _CONTROL_CHARS_RE.sub(lambda m: f"\\x{ord(m.group()):02x}", value)
    return value


def _safe_record_factory(*args, **kwargs):
    """LogRecord factory that sanitizes args to prevent log injection."""
    record = _ORIGINAL_FACTORY(*args, **kwargs)
    if record.args:
        if isinstance(record.args, dict):
            record.args = {k: _sanitize_value(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(_sanitize_value(a) for a in record.args)
    return record


def install_safe_logging():
    """
    Install a global LogRecord factory that sanitizes all log arguments.

    Call once during application startup, before any logging occurs.
    """
    logging.setLogRecordFactory(_safe_record_factory)


def describe_source(source) -> str:
    """Render an input source or output target for a log line."""
    if source is None:
        return "<none>"
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return f"<stream {type(source).__name__}>"
