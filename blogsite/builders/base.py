#!/usr/bin/env python3
"""
base.py
-------------------
Base class for builders that write blog output.

Provides the common constructor and logging helpers; subclasses
implement ``build()``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from blogsite.core.cli import OperationStats
from blogsite.core.logging_manager import BlogLogger, safe_logger


class BaseBuilder(ABC):
    """
    Abstract base class for builders.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[BlogLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> OperationStats:
        """
        Execute the build.

        Returns:
            Statistics for the build

        Raises:
            SiteBuildError: On any failure writing output
        """
        pass

    def _log_operation(self, operation: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str) -> None:
        safe_logger(self.logger).log_debug(message)

    def _log_warning(self, message: str) -> None:
        safe_logger(self.logger).log_warning(message)

    def _log_error(self, error: Exception, context: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_error(error, context or {})
