"""
SMPP Protocol Layer

Constants, field codecs, validation, and PDU types for an SMPP v3.4
transmitter session.
"""

from .constants import (
    MAX_SHORT_MESSAGE_LENGTH,
    PDU_HEADER_SIZE,
    STATUS_MESSAGES,
    CommandId,
    CommandStatus,
    DataCoding,
    EsmClass,
    InterfaceVersion,
    NpiType,
    OptionalTag,
    RegisteredDelivery,
    TonType,
    get_command_name,
    get_error_message,
    get_response_command_id,
    is_response_command,
)
from .pdu import (
    PDU,
    BindTransmitter,
    BindTransmitterResp,
    RequestPDU,
    SubmitSm,
    SubmitSmResp,
    Unbind,
)

__all__ = [
    # Constants
    'CommandId',
    'CommandStatus',
    'DataCoding',
    'EsmClass',
    'InterfaceVersion',
    'NpiType',
    'OptionalTag',
    'RegisteredDelivery',
    'TonType',
    'MAX_SHORT_MESSAGE_LENGTH',
    'PDU_HEADER_SIZE',
    'STATUS_MESSAGES',
    'get_command_name',
    'get_error_message',
    'get_response_command_id',
    'is_response_command',
    # PDUs
    'PDU',
    'RequestPDU',
    'BindTransmitter',
    'BindTransmitterResp',
    'SubmitSm',
    'SubmitSmResp',
    'Unbind',
]
