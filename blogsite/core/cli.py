#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for blogsite commands.

Functions:
    setup_logger: Initialize a BlogLogger for a CLI component

Classes:
    OperationStats: Base statistics shared by all build operations

Usage:
    from blogsite.core.cli import setup_logger

    logger = setup_logger(log_dir, "build")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from blogsite.core.logging_manager import BlogLogger


def setup_logger(log_dir: Path, component_name: str) -> BlogLogger:
    """
    Create a BlogLogger writing to ``<log_dir>/operations``.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier, e.g. 'build'

    Returns:
        Configured BlogLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return BlogLogger(operations_log_dir, component_name=component_name)


@dataclass
class OperationStats:
    """
    Base statistics for a CLI operation.

    Attributes:
        files_processed: Number of source files read
        start_time: Operation start timestamp
    """

    files_processed: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (frozen after the first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "duration": self.duration(),
        }
