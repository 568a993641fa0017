#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETFScreener - Logging Setup

Installs a single text handler on the ``screener`` logger hierarchy.
Library modules only call ``logging.getLogger(__name__)``; handlers are
configured once by the entry point.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Union


class TextFormatter(logging.Formatter):
    """Human-readable text formatter."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        base = f"{timestamp} {record.levelname:8} {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    配置 screener 日志

    Args:
        level: 日志级别 (名称或数值)

    Returns:
        screener 根 logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("screener")
    logger.setLevel(level)

    # 避免重复添加 handler
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger
