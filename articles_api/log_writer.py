"""Daily access/error log files.

Two loggers are configured: ``articles_api.access`` records one line per
request, ``articles_api.errors`` records unexpected failures with their stack
trace. Each writes to ``<log_dir>/<prefix>-<YYYY-MM-DD>.log`` and echoes to
the console.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

ACCESS_LOGGER = "articles_api.access"
ERROR_LOGGER = "articles_api.errors"

access_logger = logging.getLogger(ACCESS_LOGGER)
error_logger = logging.getLogger(ERROR_LOGGER)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def log_file_path(log_dir: Path, prefix: str, now: datetime) -> Path:
    """Return the log file for ``prefix`` on the (UTC) date of ``now``."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return Path(log_dir) / f"{prefix}-{now.strftime('%Y-%m-%d')}.log"


class IsoFormatter(logging.Formatter):
    """Formatter with ISO-8601 UTC timestamps, e.g. 2024-05-01T10:00:00.123Z."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(record.msecs):03d}Z"


class DailyFileHandler(logging.Handler):
    """Append records to a file whose name carries the current date.

    The path is recomputed on every record so the file rolls over at
    midnight UTC without any background task. Write failures are reported
    through ``handleError`` and never reach the caller.
    """

    def __init__(
        self,
        log_dir: Path,
        prefix: str,
        clock: Callable[[], datetime] = _utcnow,
        encoding: str = "utf-8",
    ):
        super().__init__()
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.clock = clock
        self.encoding = encoding

    def current_path(self) -> Path:
        return log_file_path(self.log_dir, self.prefix, self.clock())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            path = self.current_path()
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding=self.encoding) as fh:
                fh.write(msg + "\n")
        except Exception:
            self.handleError(record)


def _configure(logger: logging.Logger, handler: logging.Handler, fmt: str, stream, level: int) -> None:
    formatter = IsoFormatter(fmt)

    # Remove existing handlers to avoid duplicates
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    console = logging.StreamHandler(stream)
    console.setFormatter(formatter)
    logger.addHandler(console)

    logger.setLevel(level)
    logger.propagate = False


def setup_logging(log_dir: Path, level: str = "INFO") -> None:
    """Point the access and error loggers at daily files under ``log_dir``."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    _configure(
        access_logger,
        DailyFileHandler(log_dir, "access"),
        "%(asctime)s - %(message)s",
        sys.stdout,
        numeric_level,
    )
    _configure(
        error_logger,
        DailyFileHandler(log_dir, "error"),
        "%(asctime)s - ERROR: %(message)s",
        sys.stderr,
        numeric_level,
    )

    # Application modules log through the package logger
    app_logger = logging.getLogger("articles_api")
    app_logger.setLevel(numeric_level)
    if not app_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(IsoFormatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
        app_logger.addHandler(console)


def log_request(request) -> None:
    """Record client address, method, target and user agent of a request."""
    client = request.client.host if request.client else "unknown"
    user_agent = request.headers.get("user-agent") or "Unknown"
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    access_logger.info(
        "%s - %s %s - %s", client, request.method, target, user_agent
    )


def log_error(error: BaseException) -> None:
    """Record an unexpected error with its stack trace."""
    error_logger.error(
        "%s", error, exc_info=(type(error), error, error.__traceback__)
    )
