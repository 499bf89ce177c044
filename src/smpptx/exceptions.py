"""
SMPP Exception Classes

This module defines all SMPP-specific exception classes used throughout the library.
"""

from enum import IntEnum
from typing import Any, Dict, Optional, Union


class SMPPErrorCode(IntEnum):
    """SMPP-specific error codes for better error categorization."""

    UNKNOWN = 0
    CONNECTION_FAILED = 1000
    BIND_FAILED = 1001
    INVALID_PDU = 1002
    TIMEOUT = 1003
    PROTOCOL_ERROR = 1004
    VALIDATION_ERROR = 1005
    COMMAND_STATUS = 1006
    PARTIAL_SUBMISSION = 1007
    NOT_CONNECTED = 1008
    INVALID_STATE = 1009
    CONFIGURATION_ERROR = 1010
    FRAMING_ERROR = 1011


class SMPPException(Exception):
    """Base exception for all SMPP-related errors."""

    def __init__(
        self,
        message: str,
        command_status: Optional[int] = None,
        error_code: Optional[Union[str, SMPPErrorCode]] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.command_status = command_status
        self.error_code = error_code
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        parts = [super().__str__()]

        if self.error_code:
            if isinstance(self.error_code, SMPPErrorCode):
                parts.append(
                    f'Error Code: {self.error_code.name} ({self.error_code.value})'
                )
            else:
                parts.append(f'Error Code: {self.error_code}')

        if self.command_status is not None:
            parts.append(f'Command Status: 0x{self.command_status:08X}')

        if self.context:
            context_str = ', '.join(f'{k}={v}' for k, v in self.context.items())
            parts.append(f'Context: {context_str}')

        return ' | '.join(parts)


class SMPPConnectionException(SMPPException):
    """Exception raised for connection-related errors (dial, TLS handshake, I/O)."""

    def __init__(
        self,
        message: str,
        host: Optional[str] = None,
        port: Optional[int] = None,
        connection_state: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if host:
            context['host'] = host
        if port:
            context['port'] = str(port)
        if connection_state:
            context['state'] = connection_state

        kwargs.setdefault('error_code', SMPPErrorCode.CONNECTION_FAILED)
        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.host = host
        self.port = port
        self.connection_state = connection_state


class SMPPNotConnectedException(SMPPConnectionException):
    """Exception raised when an operation needs an open socket and there is none."""

    def __init__(self, message: str = 'Not connected', **kwargs):
        kwargs.setdefault('error_code', SMPPErrorCode.NOT_CONNECTED)
        super().__init__(message, **kwargs)


class SMPPPDUException(SMPPException):
    """Exception raised for PDU-related errors."""

    def __init__(
        self,
        message: str,
        pdu_type: Optional[str] = None,
        command_id: Optional[int] = None,
        sequence_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if pdu_type:
            context['pdu_type'] = pdu_type
        if command_id is not None:
            context['command_id'] = f'0x{command_id:08X}'
        if sequence_number is not None:
            context['sequence_number'] = str(sequence_number)

        kwargs.setdefault('error_code', SMPPErrorCode.INVALID_PDU)
        super().__init__(
            message,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.pdu_type = pdu_type
        self.command_id = command_id
        self.sequence_number = sequence_number


class SMPPFramingException(SMPPPDUException):
    """Exception raised when header and body lengths disagree or a PDU is cut short."""

    def __init__(
        self,
        message: str,
        command_length: Optional[int] = None,
        received_length: Optional[int] = None,
        **kwargs,
    ):
        kwargs.setdefault('error_code', SMPPErrorCode.FRAMING_ERROR)
        super().__init__(message, **kwargs)
        if command_length is not None:
            self.context['command_length'] = str(command_length)
        if received_length is not None:
            self.context['received_length'] = str(received_length)
        self.command_length = command_length
        self.received_length = received_length


class SMPPTimeoutException(SMPPException):
    """Exception raised when operations timeout."""

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if timeout_duration is not None:
            context['timeout_duration'] = str(timeout_duration)
        if operation:
            context['operation'] = operation

        super().__init__(
            message,
            error_code=SMPPErrorCode.TIMEOUT,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.timeout_duration = timeout_duration
        self.operation = operation


class SMPPStatusException(SMPPException):
    """
    Exception raised when a response PDU carries a nonzero command_status.

    The numeric status is always preserved in ``command_status``; ``label`` holds
    the human-readable description (``'unknown error'`` for unmapped codes).
    """

    def __init__(
        self,
        message: str,
        command_status: int,
        label: str,
        command: Optional[str] = None,
        **kwargs,
    ):
        context = {'label': label}
        if command:
            context['command'] = command

        kwargs.setdefault('error_code', SMPPErrorCode.COMMAND_STATUS)
        super().__init__(
            message,
            command_status=command_status,
            context=context,
            **kwargs,
        )
        self.label = label
        self.command = command


class SMPPBindException(SMPPStatusException):
    """Exception raised when the gateway rejects a bind request."""

    def __init__(
        self,
        message: str,
        command_status: int,
        label: str,
        system_id: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault('error_code', SMPPErrorCode.BIND_FAILED)
        super().__init__(
            message,
            command_status=command_status,
            label=label,
            command='bind_transmitter',
            **kwargs,
        )
        if system_id:
            self.context['system_id'] = system_id
        self.system_id = system_id


class SMPPProtocolException(SMPPException):
    """Exception raised for protocol violations such as uncorrelated responses."""

    def __init__(
        self,
        message: str,
        expected_sequence: Optional[int] = None,
        received_sequence: Optional[int] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if expected_sequence is not None:
            context['expected_sequence'] = str(expected_sequence)
        if received_sequence is not None:
            context['received_sequence'] = str(received_sequence)

        super().__init__(
            message,
            error_code=SMPPErrorCode.PROTOCOL_ERROR,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.expected_sequence = expected_sequence
        self.received_sequence = received_sequence


class SMPPInvalidStateException(SMPPException):
    """Exception raised when operation is attempted in invalid state."""

    def __init__(
        self,
        message: str,
        current_state: Optional[str] = None,
        expected_state: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if current_state:
            context['current_state'] = current_state
        if expected_state:
            context['expected_state'] = expected_state
        if operation:
            context['operation'] = operation

        super().__init__(
            message,
            error_code=SMPPErrorCode.INVALID_STATE,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.current_state = current_state
        self.expected_state = expected_state
        self.operation = operation


class SMPPValidationException(SMPPException):
    """Exception raised for validation errors."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[str] = None,
        validation_rule: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if field_name:
            context['field_name'] = field_name
        if field_value:
            context['field_value'] = field_value
        if validation_rule:
            context['validation_rule'] = validation_rule

        super().__init__(
            message,
            error_code=SMPPErrorCode.VALIDATION_ERROR,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.field_name = field_name
        self.field_value = field_value
        self.validation_rule = validation_rule


class SMPPPartialSubmissionException(SMPPException):
    """Exception raised when one part of a segmented message fails to submit."""

    def __init__(
        self,
        message: str,
        part_number: int,
        total_parts: int,
        submitted_message_ids: Optional[list] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {'part': f'{part_number}/{total_parts}'}

        super().__init__(
            message,
            error_code=SMPPErrorCode.PARTIAL_SUBMISSION,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.part_number = part_number
        self.total_parts = total_parts
        self.submitted_message_ids = submitted_message_ids or []


class SMPPConfigurationException(SMPPException):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_section: Optional[str] = None,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if config_section:
            context['config_section'] = config_section
        if config_key:
            context['config_key'] = config_key
        if config_value:
            context['config_value'] = config_value

        super().__init__(
            message,
            error_code=SMPPErrorCode.CONFIGURATION_ERROR,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.config_section = config_section
        self.config_key = config_key
        self.config_value = config_value
