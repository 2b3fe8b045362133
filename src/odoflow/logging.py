"""Structured logging for odoflow.

Built on structlog with stdlib logging as the sink:
- Pretty console output by default
- JSON output when ODOFLOW_LOG_FORMAT=json
- Workflow-scoped context (workflow, project, application) bound through
  contextvars so every event emitted inside a workflow carries it

Usage:
    from odoflow.logging import configure_logging, get_logger, workflow_context

    configure_logging()
    logger = get_logger(__name__)

    with workflow_context("component.create", project="proj1"):
        logger.info("step_committed", step_name="source_kind")
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterator
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "resolve_log_level",
    "workflow_context",
]

LOG_FORMAT_ENV_VAR = "ODOFLOW_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "ODOFLOW_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_VERBOSITY_LEVELS: dict[str, int] = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _env_log_level() -> int:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def _wants_json() -> bool:
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(use_json: bool) -> Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def resolve_log_level(
    verbose: int = 0, quiet: bool = False, verbosity: str = ""
) -> int:
    """Work out the effective log level from CLI flags and configuration.

    Precedence: ``quiet`` > ``verbose`` > configured verbosity > environment.

    Args:
        verbose: Count of ``-v`` flags (1 = INFO, 2+ = DEBUG).
        quiet: Only report errors.
        verbosity: Configured verbosity name ("error", "warning", ...).

    Returns:
        A stdlib logging level constant.
    """
    if quiet:
        return logging.ERROR
    if verbose > 0:
        return logging.INFO if verbose == 1 else logging.DEBUG
    if verbosity:
        return _VERBOSITY_LEVELS.get(verbosity.lower(), logging.WARNING)
    return _env_log_level()


def configure_logging(*, force_json: bool = False, level: int | None = None) -> None:
    """Configure structlog and the root stdlib logger.

    Safe to call more than once; each call replaces the previous handlers.

    Args:
        force_json: Emit JSON regardless of ODOFLOW_LOG_FORMAT.
        level: Explicit log level. Falls back to ODOFLOW_LOG_LEVEL.
    """
    use_json = force_json or _wants_json()
    log_level = level if level is not None else _env_log_level()

    tail: list[Processor] = (
        [structlog.processors.dict_tracebacks]
        if use_json
        else [structlog.processors.format_exc_info]
    )
    structlog.configure(
        processors=[*_shared_processors(), *tail, _renderer(use_json)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr so they never interleave with command output.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(use_json),
            ],
            foreign_pre_chain=_shared_processors(),
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, normally called as ``get_logger(__name__)``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Bind key/values that are attached to every subsequent log event."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Drop all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextlib.contextmanager
def workflow_context(workflow: str, **context: Any) -> Iterator[None]:
    """Bind ``workflow`` (and extra context) for the duration of a block.

    Only the keys bound here are removed on exit, so an outer binding made by
    the CLI survives nested workflows.

    Example:
        with workflow_context("project.delete", project="myproj"):
            await executor.execute_silently(spec)
    """
    keys = ("workflow", *context)
    structlog.contextvars.bind_contextvars(workflow=workflow, **context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*keys)
