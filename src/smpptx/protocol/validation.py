"""
SMPP Protocol Validation

This module provides validation functions for SMPP protocol fields, ensuring
values fit their wire representation before a PDU is built.
"""

from ..exceptions import SMPPValidationException
from .constants import (
    MAX_ADDRESS_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_SHORT_MESSAGE_LENGTH,
    MAX_SYSTEM_ID_LENGTH,
)


def validate_system_id(system_id: str) -> None:
    """
    Validate SMPP system ID field.

    Args:
        system_id: System ID to validate

    Raises:
        SMPPValidationException: If system ID is invalid
    """
    if not system_id:
        raise SMPPValidationException(
            'System ID cannot be empty',
            field_name='system_id',
            field_value=system_id,
            validation_rule='non_empty',
        )

    if len(system_id) >= MAX_SYSTEM_ID_LENGTH:
        raise SMPPValidationException(
            f'System ID too long: {len(system_id)} >= {MAX_SYSTEM_ID_LENGTH}',
            field_name='system_id',
            field_value=system_id,
            validation_rule='max_length',
        )


def validate_password(password: str) -> None:
    """
    Validate SMPP password field.

    Args:
        password: Password to validate

    Raises:
        SMPPValidationException: If password is invalid
    """
    if len(password) >= MAX_PASSWORD_LENGTH:
        raise SMPPValidationException(
            f'Password too long: {len(password)} >= {MAX_PASSWORD_LENGTH}',
            field_name='password',
            validation_rule='max_length',
        )


def validate_address(address: str, field_name: str = 'address') -> None:
    """
    Validate an SMPP source or destination address.

    Args:
        address: Address to validate
        field_name: Field name for error reporting

    Raises:
        SMPPValidationException: If address does not fit the field
    """
    if len(address) >= MAX_ADDRESS_LENGTH:
        raise SMPPValidationException(
            f'Address too long: {len(address)} >= {MAX_ADDRESS_LENGTH}',
            field_name=field_name,
            field_value=address,
            validation_rule='max_length',
        )


def validate_short_message(message: bytes) -> None:
    """
    Validate that a payload fits the inline short_message field.

    Args:
        message: Encoded message payload

    Raises:
        SMPPValidationException: If the payload is longer than a single PDU allows
    """
    if len(message) > MAX_SHORT_MESSAGE_LENGTH:
        raise SMPPValidationException(
            f'Message too long: {len(message)} bytes '
            f'(max {MAX_SHORT_MESSAGE_LENGTH} for a single submit_sm)',
            field_name='short_message',
            field_value=str(len(message)),
            validation_rule='max_length',
        )
