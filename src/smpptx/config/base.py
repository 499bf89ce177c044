"""
SMPP Configuration Base Classes

This module provides the base configuration class with dictionary,
environment, and JSON file loading for the SMPP client.
"""

from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

from ..exceptions import SMPPConfigurationException

T = TypeVar('T', bound='BaseConfig')

_TRUE_VALUES = ('true', '1', 'yes', 'on')


@dataclass
class BaseConfig:
    """Base configuration class with validation and serialization."""

    def validate(self) -> None:
        """Validate configuration values. Override in subclasses."""
        pass

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary, building nested configs from sub-dicts."""
        fields = {f.name: f for f in dataclasses.fields(cls)}
        kwargs: Dict[str, Any] = {}

        for name, value in data.items():
            if name not in fields:
                continue
            nested = _nested_config_type(cls, name)
            if nested is not None:
                if isinstance(value, dict):
                    value = nested.from_dict(value)
                elif not isinstance(value, nested):
                    raise SMPPConfigurationException(
                        f'Invalid configuration data for {cls.__name__}: '
                        f'{name} must be a mapping',
                        config_section=cls.__name__,
                        config_key=name,
                    )
            else:
                try:
                    value = _coerce(cls, name, value)
                except (TypeError, ValueError) as e:
                    raise SMPPConfigurationException(
                        f'Invalid value for {cls.__name__}.{name}: {value!r}',
                        config_section=cls.__name__,
                        config_key=name,
                        config_value=str(value),
                        original_error=e,
                    ) from e
            kwargs[name] = value

        try:
            instance = cls(**kwargs)
        except TypeError as e:
            raise SMPPConfigurationException(
                f'Invalid configuration data for {cls.__name__}: {e}',
                config_section=cls.__name__,
                original_error=e,
            ) from e

        instance.validate()
        return instance

    @classmethod
    def from_env(cls: Type[T], prefix: str = '') -> T:
        """
        Create config from environment variables.

        ``host`` is read from ``{PREFIX}HOST``; a field of nested config type
        ``connection`` reads ``{PREFIX}CONNECTION_CONNECT_TIMEOUT`` and so on.
        """
        return cls.from_dict(_env_data(cls, prefix.upper()))

    @classmethod
    def from_file(cls: Type[T], file_path: Union[str, Path]) -> T:
        """Create config from JSON file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise SMPPConfigurationException(
                f'Configuration file not found: {file_path}',
                config_key='config_file',
                config_value=str(file_path),
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SMPPConfigurationException(
                f'Invalid JSON in configuration file: {file_path}',
                config_key='config_file',
                config_value=str(file_path),
                original_error=e,
            ) from e
        except OSError as e:
            raise SMPPConfigurationException(
                f'Error reading configuration file: {file_path}',
                config_key='config_file',
                config_value=str(file_path),
                original_error=e,
            ) from e

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        result = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, BaseConfig):
                result[field_name] = field_value.to_dict()
            else:
                result[field_name] = field_value
        return result


def _nested_config_type(cls: type, name: str):
    default = _field_default(cls, name)
    if isinstance(default, BaseConfig):
        return type(default)
    return None


def _field_default(cls: type, name: str) -> Any:
    for f in dataclasses.fields(cls):
        if f.name != name:
            continue
        if f.default is not dataclasses.MISSING:
            return f.default
        if f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
            return f.default_factory()  # type: ignore[misc]
    return None


def _coerce(cls: type, name: str, value: Any) -> Any:
    """
    Convert a raw value to the type of the field's default.

    Strings are parsed, so ``"2775"`` becomes 2775 and ``"yes"`` becomes True.
    Raises ValueError or TypeError when the value cannot be converted.
    """
    target = type(_field_default(cls, name))
    if target is bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES
        if not isinstance(value, bool):
            raise TypeError(f'expected a boolean, got {type(value).__name__}')
        return value
    if target in (int, float):
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise TypeError(f'expected a number, got {type(value).__name__}')
        if target is int and isinstance(value, float):
            raise TypeError('expected an integer, got float')
        return target(value)
    if target is str and not isinstance(value, str):
        raise TypeError(f'expected a string, got {type(value).__name__}')
    return value


def _env_data(cls: type, prefix: str) -> Dict[str, Any]:
    env_data: Dict[str, Any] = {}

    for f in dataclasses.fields(cls):
        env_key = f'{prefix}{f.name.upper()}'
        nested = _nested_config_type(cls, f.name)
        if nested is not None:
            nested_data = _env_data(nested, f'{env_key}_')
            if nested_data:
                env_data[f.name] = nested_data
            continue

        env_value = os.getenv(env_key)
        if env_value is None:
            continue

        try:
            env_data[f.name] = _coerce(cls, f.name, env_value)
        except ValueError as e:
            raise SMPPConfigurationException(
                f'Invalid environment value for {env_key}: {env_value}',
                config_key=env_key,
                config_value=env_value,
                original_error=e,
            ) from e

    return env_data
