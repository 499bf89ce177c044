"""
SMPP Utilities Module

This module provides logging setup and log-safe formatting helpers for the
SMPP client.
"""

import logging
from typing import Optional, Union

from .config import LoggingConfig

TRANSPORT_LOGGER = 'smpptx.transport'


def mask_sensitive_data(text: str, field_name: str = '') -> str:
    """Mask sensitive data for logging."""
    if 'password' in field_name.lower():
        return '*' * min(len(text), 8) if text else ''
    return text


def setup_logging(config: Optional[Union[LoggingConfig, int, str]] = None) -> None:
    """
    Set up basic logging configuration.

    Args:
        config: A ``LoggingConfig``, or a bare level (``logging.DEBUG`` or
            ``'DEBUG'``) applied with the default format
    """
    if config is None:
        config = LoggingConfig()
    elif not isinstance(config, LoggingConfig):
        level = config if isinstance(config, str) else logging.getLevelName(config)
        config = LoggingConfig(level=level)

    config.validate()
    logging.basicConfig(level=config.numeric_level, format=config.format)

    # Per-PDU traffic is logged at DEBUG by the transport layer
    transport_level = logging.DEBUG if config.log_pdus else max(
        config.numeric_level, logging.INFO
    )
    logging.getLogger(TRANSPORT_LOGGER).setLevel(transport_level)


__all__ = [
    # Security
    'mask_sensitive_data',
    # Logging
    'setup_logging',
]
