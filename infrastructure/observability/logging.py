"""
Logging setup with contextvars-based metadata injection.

- Adds the session tag and the in-flight request into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (httpx, httpcore).
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_session_tag = contextvars.ContextVar("session_tag", default="-")
cv_request = contextvars.ContextVar("request", default="-")

# Kept in context for metadata (not printed every line)
cv_login = contextvars.ContextVar("login", default="-")


def make_session_tag(credential: str, length: int = 8) -> str:
    """
    Stable short tag derived from a session credential.
    Lets log lines be correlated per session without writing the credential itself.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(credential.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session = cv_session_tag.get() or "-"
        record.request = cv_request.get() or "-"
        return True


def set_log_context(
    *,
    login: str | None = None,
    credential: str | None = None,
    request: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if login is not None:
        cv_login.set(str(login))

    # Only the digest is kept
    if credential is not None:
        cv_session_tag.set(make_session_tag(str(credential)))

    if request is not None:
        cv_request.set(str(request))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "login": str(cv_login.get() or "-"),
        "session": str(cv_session_tag.get() or "-"),
        "request": str(cv_request.get() or "-"),
    }


def clear_request_context() -> None:
    """Reset request context to default (keep session info)."""
    cv_request.set("-")


def clear_session_context() -> None:
    """Forget the login and session tag, e.g. after signing out."""
    cv_login.set("-")
    cv_session_tag.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    # Formatter includes context fields injected by ContextInjectFilter
    console_fmt = "%(asctime)s [%(levelname)s] s=%(session)s q=%(request)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | s=%(session)s q=%(request)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler (human-readable, INFO+)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Reduce noise from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
