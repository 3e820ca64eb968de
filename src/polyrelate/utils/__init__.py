"""Utility functions for polyrelate.

This module provides logging setup and run statistics helpers.
"""

from polyrelate.utils.logging import (
    ClassificationLogger,
    ClassificationStats,
    configure_logging,
)

__all__ = [
    "ClassificationLogger",
    "ClassificationStats",
    "configure_logging",
]
