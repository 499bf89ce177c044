"""
SMPP Configuration Settings

This module defines configuration classes and factory functions for the SMPP
transmitter client, providing type-safe and validated configuration management.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from ..exceptions import SMPPConfigurationException, SMPPValidationException
from ..protocol.constants import DEFAULT_SEGMENT_DELAY
from ..protocol.validation import validate_password, validate_system_id
from .base import BaseConfig

DEFAULT_ENV_PREFIX = 'SMPP_'


@dataclass
class ConnectionConfig(BaseConfig):
    """Connection-related configuration settings"""

    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    use_tls: bool = False
    # Off by default: carrier gateways commonly use self-signed certificates
    verify_tls: bool = False
    segment_delay: float = DEFAULT_SEGMENT_DELAY

    def validate(self) -> None:
        """Validate connection configuration"""
        for name in ('connect_timeout', 'read_timeout', 'write_timeout'):
            value = getattr(self, name)
            if value <= 0:
                raise SMPPConfigurationException(
                    f'{name} must be positive',
                    config_section='connection',
                    config_key=name,
                    config_value=str(value),
                )
        if self.segment_delay < 0:
            raise SMPPConfigurationException(
                'segment_delay must be non-negative',
                config_section='connection',
                config_key='segment_delay',
                config_value=str(self.segment_delay),
            )


@dataclass
class LoggingConfig(BaseConfig):
    """Logging configuration settings"""

    level: str = 'INFO'
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    log_pdus: bool = False

    def validate(self) -> None:
        """Validate logging configuration"""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            raise SMPPConfigurationException(
                f'Invalid log level: {self.level}',
                config_section='logging',
                config_key='level',
                config_value=self.level,
            )

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper())


@dataclass
class SMPPClientConfig(BaseConfig):
    """Complete SMPP client configuration"""

    # Connection details
    host: str = 'localhost'
    port: int = 2775

    # Authentication
    system_id: str = ''
    password: str = ''

    # Configuration objects
    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Validate complete client configuration"""
        if not self.host:
            raise SMPPConfigurationException('host cannot be empty', config_key='host')
        if not (1 <= self.port <= 65535):
            raise SMPPConfigurationException(
                'port must be between 1 and 65535',
                config_key='port',
                config_value=str(self.port),
            )
        try:
            validate_system_id(self.system_id)
            validate_password(self.password)
        except SMPPValidationException as e:
            raise SMPPConfigurationException(
                f'Invalid {e.field_name}: {e.args[0]}',
                config_key=e.field_name,
                original_error=e,
            ) from e

        self.connection.validate()
        self.logging.validate()


def create_client_config(
    host: str, port: int, system_id: str, password: str, **kwargs: Any
) -> SMPPClientConfig:
    """
    Create a validated client configuration.

    Keyword arguments that name ``ConnectionConfig`` fields (``use_tls``,
    ``read_timeout``, ...) are routed to the nested connection settings.
    """
    connection_fields = set(ConnectionConfig.__dataclass_fields__)
    connection_kwargs = {k: v for k, v in kwargs.items() if k in connection_fields}
    other_kwargs = {k: v for k, v in kwargs.items() if k not in connection_fields}

    data = {
        'host': host,
        'port': port,
        'system_id': system_id,
        'password': password,
        **other_kwargs,
    }
    if connection_kwargs:
        data['connection'] = connection_kwargs

    return SMPPClientConfig.from_dict(data)


def load_config_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> SMPPClientConfig:
    """Load client configuration from ``SMPP_HOST``, ``SMPP_PORT``, ... variables"""
    return SMPPClientConfig.from_env(prefix)


def load_config_from_file(file_path: Union[str, Path]) -> SMPPClientConfig:
    """Load client configuration from a JSON file"""
    return SMPPClientConfig.from_file(file_path)
