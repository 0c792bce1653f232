"""
Logging configuration for lazyseq using loguru with Rich integration.

The library stays silent until configure_logging() is called: the package
disables its own loguru records on import, the usual arrangement for a
library that logs through loguru.
"""

from typing import Any, NoReturn
from pathlib import Path
from loguru import logger
from rich.logging import RichHandler
from rich.console import Console

from lazyseq.config.types import LogConfig

# Global console instance for Rich integration
console = Console(stderr=True)

_handler_ids: list[int] = []
_is_configured = False

def configure_logging(config: LogConfig, force: bool = False) -> None:
    """
    Configure logging with loguru and Rich integration.

    Args:
        config: Logging configuration
        force: Replace handlers installed by an earlier call
    """
    global _is_configured

    if _is_configured and not force:
        return

    # Remove default handler (or the ones we added before)
    logger.remove()
    _handler_ids.clear()

    _handler_ids.append(logger.add(
        RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        ),
        level=config["level"],
        format=config["format"],
    ))

    if config.get("file"):
        file_path = Path(config["file"])
        file_path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(logger.add(
            str(file_path),
            level=config["level"],
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | " + config["format"],
            rotation="10 MB",
            retention="7 days",
        ))

    logger.enable("lazyseq")
    _is_configured = True

def get_logger(name: str) -> Any:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logger.bind(name=name)

# Context managers for logging

class LogContext:
    """Context manager for adding context to logs"""

    def __init__(self, **context: Any):
        self.context = context
        self.logger = logger.bind(**context)

    def __enter__(self):
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.logger.debug(f"Exception in context: {exc_val}")
        return False

def trace_context(**context: Any) -> LogContext:
    """Create a logging context carrying extra fields"""
    return LogContext(**context)

# Error handling with logging

def log_and_reraise(
    exception: Exception,
    context: str = "general",
    level: str = "WARNING"
) -> NoReturn:
    """
    Log an exception and re-raise it.

    Args:
        exception: Exception to log
        context: Context for the error
        level: Log level
    """
    logger.bind(
        context=context,
        exception_type=type(exception).__name__,
        exception_message=str(exception)
    ).log(level, f"Exception in {context}: {exception}")

    raise exception
