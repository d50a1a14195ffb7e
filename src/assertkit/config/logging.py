"""structlog configuration for assertkit.

The library never installs handlers on import; applications opt in by
calling :func:`configure_logging`, which reads the ``[logging]`` section
of the resolved settings unless told otherwise.

Two output modes:
- Human (default): colored console output to stderr
- JSON (``json = true`` or log_json=True): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from assertkit.config.settings import AssertKitSettings

LOGGER_NAME = "assertkit"


def configure_logging(
    settings: AssertKitSettings | None = None,
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        settings: Source of the ``[logging]`` section. Loaded from the
            environment and ``assertkit.toml`` when omitted.
        verbose: Enable DEBUG-level output (every assertion failure is
            logged). When False, only WARNING+. Overrides ``settings``.
        log_json: Use JSON renderer instead of console renderer.
            Overrides ``settings``.
    """
    section = (settings or AssertKitSettings.load()).logging
    if verbose is None:
        verbose = section.verbose
    if log_json is None:
        log_json = section.json_output
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAME)
    lib_logger.handlers.clear()
    lib_logger.addHandler(handler)
    lib_logger.setLevel(level)
    lib_logger.propagate = False
    logging.getLogger("pluggy").setLevel(logging.WARNING)
