"""Logging utilities for Polyrelate."""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polyrelate.domain import Relationship

_installed_handlers: list[logging.Handler] = []


@dataclass
class ClassificationStats:
    """Statistics from a classification run."""

    classified_count: int = 0
    by_relationship: Counter[str] = field(default_factory=Counter)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console log output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Repeated configuration (one per CLI invocation) replaces earlier handlers
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyrelate")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ClassificationLogger:
    """Logger for tracking classified pairs and run statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ClassificationStats()

    def start(self) -> None:
        """Mark the start of a run."""
        self._stats.start_time = time.time()

    def finish(self) -> None:
        """Mark the end of a run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Run complete",
            classified=self._stats.classified_count,
            duration_s=round(self._stats.duration_seconds, 4),
        )

    def log_pair_start(self, name: str, first_vertices: int, second_vertices: int) -> None:
        """Log start of a pair classification."""
        self._logger.debug(
            "Classifying pair",
            pair=name,
            first_vertices=first_vertices,
            second_vertices=second_vertices,
        )

    def log_pair_result(self, name: str, relationship: Relationship, duration_ms: float) -> None:
        """Log a classified pair."""
        self._logger.info(
            "Pair classified",
            pair=name,
            relationship=relationship.value,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.classified_count += 1
        self._stats.by_relationship[relationship.value] += 1

    @property
    def stats(self) -> ClassificationStats:
        """Get current run statistics."""
        return self._stats
