"""Structured logging using structlog on top of stdlib logging."""

import logging
import sys

import structlog

# Dependencies that log at INFO/DEBUG on every request
NOISY_LOGGERS = ("asyncio", "httpx", "httpcore", "anyio", "claude_agent_sdk", "mcp")

_configured = False


def configure_library_defaults() -> None:
    """Route structlog through stdlib logging until ``setup_logging`` runs.

    The host application's logging config decides where records go; with no
    handlers only warnings reach stderr, and nothing is written to stdout.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_library_defaults()


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog and route all log output to stderr.

    stdout is reserved for the event stream printed by the CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render JSON lines instead of the colored console format
    """
    global _configured
    if _configured:
        return

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [stderr_handler]
    root.setLevel(getattr(logging, level.upper()))

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str = "allrecipes_finder") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger.

    Args:
        name: Logger name

    Returns:
        Bound logger; call ``.bind()`` to attach per-run context
    """
    return structlog.get_logger(name)
