"""structlog setup for fme.

Everything goes to stderr, leaving stdout to the ``Updated:`` report.
Per-file events carry the operation and note path as fields: the service
binds them with :func:`note_context` and ``merge_contextvars`` folds them
into every record, stdlib ones included.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

FME_LOGGER = "fme"


@contextmanager
def note_context(op: str, path: Path) -> Iterator[None]:
    """Tag log records emitted inside the block with *op* and *path*."""
    with structlog.contextvars.bound_contextvars(op=op, path=str(path)):
        yield


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route fme's stdlib and structlog loggers to one stderr handler.

    ``--verbose`` opens the ``fme`` logger to DEBUG, where per-file updates
    and failures are logged. Third-party loggers stay at WARNING either way.
    With *log_json*, tracebacks become structured ``exception`` lists.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    final: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        final.append(structlog.processors.dict_tracebacks)
    final.append(_renderer(log_json))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=pre_chain, processors=final)
    )

    # One handler per process: repeated calls (CliRunner, tests) replace it.
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(FME_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
