"""structlog setup for the SpectroSPC service.

Application modules log through ``structlog.get_logger(__name__)``; uvicorn
and httpx records go through the stdlib root handler configured here, so
both end up in one stream with one renderer.
"""

import logging
import sys

import structlog

# Libraries whose INFO output is per-request noise for this service
_QUIET_LOGGERS = ("uvicorn.access", "httpx")


def configure_logging(log_format: str = "console", log_level: str = "INFO") -> None:
    """Route structlog and stdlib logging to stderr.

    Args:
        log_format: "json" for one JSON object per line, anything else for
            the colored console renderer.
        log_level: Root level name; unknown names fall back to INFO.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
