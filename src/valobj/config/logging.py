"""structlog output for valobj, driven by :class:`ValobjSettings`.

Records from stdlib loggers under ``valobj`` are rendered by structlog, so
context bound with ``structlog.contextvars`` (the codec binds ``op`` and
``strict``) shows up on every line. ``log_json`` selects JSON lines over the
console renderer; ``verbose`` lowers the ``valobj`` logger to DEBUG.
"""

from __future__ import annotations

import logging
import sys

import structlog

from valobj.config.settings import ValobjSettings

PACKAGE_LOGGER = "valobj"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(settings: ValobjSettings) -> None:
    """Route stderr logging through structlog according to *settings*.

    Replaces any root handlers, so repeated calls never stack output.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if settings.verbose else logging.WARNING
    )
