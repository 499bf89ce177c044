"""
SMPP Configuration Management

This module provides configuration management for the SMPP client, including
default values, validation, and environment or file based loading.
"""

from .base import BaseConfig
from .settings import (
    ConnectionConfig,
    LoggingConfig,
    SMPPClientConfig,
    create_client_config,
    load_config_from_env,
    load_config_from_file,
)

__all__ = [
    'BaseConfig',
    'ConnectionConfig',
    'LoggingConfig',
    'SMPPClientConfig',
    # Factory functions
    'create_client_config',
    'load_config_from_env',
    'load_config_from_file',
]
