"""
Structured logging configuration using structlog.

Pipeline events (analysis_completed, content_type_detected, queries_generated,
...) are emitted as key/value records. Output always goes to stderr: the CLI
writes illustration plans to stdout and the two streams must not mix.
"""

import logging
import sys
from typing import List, Optional

import structlog

from .config import settings


def _renderer_chain(json_output: bool) -> List:
    if json_output:
        # Tracebacks from exc_info=True become an "exception" string field
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer()]


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog for the pipeline and the CLI.

    Args:
        level: Level name overriding settings.log_level (the CLI passes
            "DEBUG" for --verbose to surface per-query selection events)
        json_output: Overrides settings.log_json
    """
    level_name = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer_chain(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
