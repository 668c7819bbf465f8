# publicapi/core/logging.py
"""
Logging da Catalog Public API.

Features:
- Cores para níveis de log (console)
- Ficheiro com rotação diária (opcional)
- Correlation ID em todos os registos
- Timing helper para operações longas
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler

from dotenv import load_dotenv

load_dotenv()

# -------- correlation-id ----------
_correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)


# -------- ANSI Colors ----------
class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_BLUE = "\033[94m"


# Level -> (color, short_name)
LEVEL_STYLES = {
    logging.DEBUG: (Colors.CYAN, "DBG"),
    logging.INFO: (Colors.GREEN, "INF"),
    logging.WARNING: (Colors.YELLOW, "WRN"),
    logging.ERROR: (Colors.RED, "ERR"),
    logging.CRITICAL: (Colors.BRIGHT_RED + Colors.BOLD, "CRT"),
}


class CorrelationIdFilter(logging.Filter):
    """Adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        cid = _correlation_id_ctx.get()
        record.correlation_id = cid or "-"
        return True


def _short_name(name: str) -> str:
    for prefix in ("publicapi.", "pubapi."):
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break
    return name.replace(".usecases.", ".").replace("domains.", "").replace("api.v1.", "api.")


def _short_cid(record: logging.LogRecord) -> str:
    cid = getattr(record, "correlation_id", "-")
    # UUID completo é demasiado largo para a consola
    return cid[:8] if cid and cid != "-" else "-"


class ColoredFormatter(logging.Formatter):
    """
    Formatter with colors for console output.

    Format: HH:MM:SS.mmm | LEVEL | logger.name | [cid] | message
    """

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and _supports_color()

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        time_str = dt.strftime("%H:%M:%S") + f".{int(record.msecs):03d}"

        color, short_level = LEVEL_STYLES.get(record.levelno, (Colors.WHITE, record.levelname[:3]))
        name = _short_name(record.name)
        cid = _short_cid(record)

        if self.use_colors:
            parts = [
                f"{Colors.DIM}{time_str}{Colors.RESET}",
                f"{color}{short_level:>3}{Colors.RESET}",
                f"{Colors.BRIGHT_BLUE}{name:<25}{Colors.RESET}",
                f"{Colors.DIM}[{cid}]{Colors.RESET}",
                record.getMessage(),
            ]
        else:
            parts = [time_str, f"{short_level:>3}", f"{name:<25}", f"[{cid}]", record.getMessage()]

        formatted = " | ".join(parts)
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


class FileFormatter(logging.Formatter):
    """
    Clean formatter for file output (no colors, full correlation id).

    Format: YYYY-MM-DD HH:MM:SS.mmm | LEVEL | logger | [cid] | message
    """

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        time_str = dt.strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"
        name = _short_name(record.name)
        cid = getattr(record, "correlation_id", "-")
        level = record.levelname[:3]

        formatted = f"{time_str} | {level:>3} | {name:<25} | [{cid}] | {record.getMessage()}"
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


def _supports_color() -> bool:
    """Check if terminal supports ANSI colors."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# -------- Correlation ID helpers ----------
def get_correlation_id() -> str | None:
    """Returns current correlation id (or None if not set)."""
    return _correlation_id_ctx.get()


def set_correlation_id(cid: str | None) -> None:
    _correlation_id_ctx.set(cid)


# -------- Timing helpers ----------
@contextmanager
def log_timing(operation: str, logger: logging.Logger | str | None = None, **context):
    """
    Context manager that logs operation duration.

    Usage:
        with log_timing("seed_catalog", items=12):
            # do work

    Logs:
        -> seed_catalog starting (items=12)
        <- seed_catalog done in 150.2ms (items=12)
    """
    if isinstance(logger, str):
        logger = logging.getLogger(logger)
    elif logger is None:
        logger = logging.getLogger("pubapi.timing")

    ctx_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
    ctx_display = f" ({ctx_str})" if ctx_str else ""

    logger.debug("-> %s starting%s", operation, ctx_display)
    t0 = time.perf_counter()

    try:
        yield
        duration_ms = (time.perf_counter() - t0) * 1000
        logger.info("<- %s done in %.1fms%s", operation, duration_ms, ctx_display)
    except Exception as e:
        duration_ms = (time.perf_counter() - t0) * 1000
        logger.error("<- %s FAILED in %.1fms: %s%s", operation, duration_ms, e, ctx_display)
        raise


# -------- Main setup ----------
def setup_logging() -> None:
    """Configure logging for the application."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    use_colors = _env_flag("LOG_COLORS", "true")
    to_file = _env_flag("LOG_TO_FILE", "true")

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(ColoredFormatter(use_colors=use_colors))
    console.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(console)

    if to_file:
        log_dir = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
        base_name = os.getenv("LOG_BASENAME", "pubapi")
        os.makedirs(log_dir, exist_ok=True)

        fileh = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, f"{base_name}.log"),
            when="midnight",
            backupCount=int(os.getenv("LOG_RETENTION_DAYS", "30")),
            encoding="utf-8",
            delay=True,
        )
        fileh.suffix = "%Y-%m-%d"
        fileh.setFormatter(FileFormatter())
        fileh.addFilter(CorrelationIdFilter())
        root.addHandler(fileh)

    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(os.getenv("SQL_LOG_LEVEL", "WARNING").upper())

    logging.getLogger("pubapi.logging").debug(
        "Logging initialized: level=%s, colors=%s, file=%s", level, use_colors, to_file
    )
