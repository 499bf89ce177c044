"""
smpptx - Async SMPP v3.4 Transmitter Client

A small async client for submitting SMS through a carrier SMSC over SMPP v3.4.

This package provides:
- Transmitter bind over TCP or TLS
- Single-PDU submit_sm with delivery report and unicode/binary flags
- Segmented submission of long messages with SAR parameters
- Typed PDU encoding/decoding for the commands a transmitter exchanges
- Configuration from code, environment variables, or JSON files

Quick Start:
    from smpptx import SMPPClient, SMSMessage

    async with SMPPClient('smsc.example.com', 2775, 'client', 'secret') as client:
        message_id = await client.send(
            SMSMessage.from_text('12345', '15551234567', 'Hello World!')
        )
"""

import logging

from .client import Session, SessionState, SMPPClient, SMSMessage

# Configuration management
from .config import (
    ConnectionConfig,
    LoggingConfig,
    SMPPClientConfig,
    create_client_config,
    load_config_from_env,
    load_config_from_file,
)

# Exception classes
from .exceptions import (
    SMPPBindException,
    SMPPConfigurationException,
    SMPPConnectionException,
    SMPPErrorCode,
    SMPPException,
    SMPPFramingException,
    SMPPInvalidStateException,
    SMPPNotConnectedException,
    SMPPPartialSubmissionException,
    SMPPPDUException,
    SMPPProtocolException,
    SMPPStatusException,
    SMPPTimeoutException,
    SMPPValidationException,
)

# Protocol constants and PDUs
from .protocol import (
    PDU,
    BindTransmitter,
    BindTransmitterResp,
    CommandId,
    CommandStatus,
    DataCoding,
    EsmClass,
    OptionalTag,
    RegisteredDelivery,
    SubmitSm,
    SubmitSmResp,
    Unbind,
    get_error_message,
)

# Transport layer
from .transport import ConnectionState, SMPPConnection
from .utils import setup_logging

__all__ = [
    # Main classes
    'SMPPClient',
    'SMSMessage',
    'Session',
    'SessionState',
    # Protocol
    'CommandId',
    'CommandStatus',
    'DataCoding',
    'EsmClass',
    'OptionalTag',
    'RegisteredDelivery',
    'get_error_message',
    'PDU',
    'BindTransmitter',
    'BindTransmitterResp',
    'SubmitSm',
    'SubmitSmResp',
    'Unbind',
    # Configuration
    'SMPPClientConfig',
    'ConnectionConfig',
    'LoggingConfig',
    'create_client_config',
    'load_config_from_env',
    'load_config_from_file',
    'setup_logging',
    # Exceptions
    'SMPPException',
    'SMPPErrorCode',
    'SMPPConnectionException',
    'SMPPNotConnectedException',
    'SMPPPDUException',
    'SMPPFramingException',
    'SMPPTimeoutException',
    'SMPPStatusException',
    'SMPPBindException',
    'SMPPProtocolException',
    'SMPPInvalidStateException',
    'SMPPValidationException',
    'SMPPPartialSubmissionException',
    'SMPPConfigurationException',
    # Transport
    'SMPPConnection',
    'ConnectionState',
]

__version__ = '0.1.0'

# Set up default logging to reduce noise unless explicitly configured
logging.getLogger(__name__).addHandler(logging.NullHandler())
