"""
SMPP v3.4 Protocol Constants and Enumerations

This module contains the constants, command IDs, status codes, and enumerations
used by a transmitter-only SMPP v3.4 client.
"""

from enum import IntEnum
from typing import Dict


class CommandId(IntEnum):
    """SMPP Command IDs used by a transmitter session"""

    BIND_TRANSMITTER = 0x00000002
    BIND_TRANSMITTER_RESP = 0x80000002
    SUBMIT_SM = 0x00000004
    SUBMIT_SM_RESP = 0x80000004
    UNBIND = 0x00000006
    UNBIND_RESP = 0x80000006
    GENERIC_NACK = 0x80000000


class CommandStatus(IntEnum):
    """SMPP Command Status codes as defined by SMPP v3.4"""

    ESME_ROK = 0x00000000  # No Error
    ESME_RINVMSGLEN = 0x00000001  # Message Length is invalid
    ESME_RINVCMDLEN = 0x00000002  # Command Length is invalid
    ESME_RINVCMDID = 0x00000003  # Invalid Command ID
    ESME_RINVBNDSTS = 0x00000004  # Incorrect BIND Status for given command
    ESME_RALYBND = 0x00000005  # ESME Already in Bound State
    ESME_RINVPRTFLG = 0x00000006  # Invalid Priority Flag
    ESME_RINVREGDLVFLG = 0x00000007  # Invalid Registered Delivery Flag
    ESME_RSYSERR = 0x00000008  # System Error
    ESME_RINVSRCADR = 0x0000000A  # Invalid Source Address
    ESME_RINVDSTADR = 0x0000000B  # Invalid Dest Addr
    ESME_RINVMSGID = 0x0000000C  # Message ID is invalid
    ESME_RBINDFAIL = 0x0000000D  # Bind Failed
    ESME_RINVPASWD = 0x0000000E  # Invalid Password
    ESME_RINVSYSID = 0x0000000F  # Invalid System ID
    ESME_RMSGQFUL = 0x00000014  # Message Queue Full
    ESME_RSUBMITFAIL = 0x00000045  # submit_sm or submit_multi failed
    ESME_RTHROTTLED = 0x00000058  # Throttling error
    ESME_RUNKNOWNERR = 0x000000FF  # Unknown Error


class TonType(IntEnum):
    """Type of Number (TON) values"""

    UNKNOWN = 0x00
    INTERNATIONAL = 0x01
    NATIONAL = 0x02
    NETWORK_SPECIFIC = 0x03
    SUBSCRIBER = 0x04
    ALPHANUMERIC = 0x05
    ABBREVIATED = 0x06


class NpiType(IntEnum):
    """Numbering Plan Indicator (NPI) values"""

    UNKNOWN = 0x00
    ISDN = 0x01  # ISDN (E163/E164)
    DATA = 0x03  # Data (X.121)
    TELEX = 0x04  # Telex (F.69)
    LAND_MOBILE = 0x06  # Land Mobile (E.212)
    NATIONAL = 0x08
    PRIVATE = 0x09


class DataCoding(IntEnum):
    """Data Coding Scheme values"""

    DEFAULT = 0x00  # SMSC Default Alphabet (GSM 7-bit)
    IA5_ASCII = 0x01
    LATIN_1 = 0x03
    BINARY = 0x04  # Octet unspecified (8-bit binary)
    UCS2 = 0x08  # UCS2 (ISO/IEC-10646)


class EsmClass(IntEnum):
    """ESM Class values"""

    DEFAULT = 0x00
    BINARY = 0x04


class RegisteredDelivery(IntEnum):
    """Registered Delivery values"""

    NO_RECEIPT = 0x00
    SUCCESS_FAILURE = 0x01


class InterfaceVersion(IntEnum):
    """SMPP Interface Version values"""

    VERSION_3_3 = 0x33
    VERSION_3_4 = 0x34


class OptionalTag(IntEnum):
    """Optional Parameter Tags used by the client"""

    SAR_MSG_REF_NUM = 0x020C
    SAR_TOTAL_SEGMENTS = 0x020E
    SAR_SEGMENT_SEQNUM = 0x020F
    MESSAGE_PAYLOAD = 0x0424


# Default Values
DEFAULT_SYSTEM_TYPE = ''
DEFAULT_INTERFACE_VERSION = InterfaceVersion.VERSION_3_4
DEFAULT_ADDR_TON = TonType.UNKNOWN
DEFAULT_ADDR_NPI = NpiType.UNKNOWN
DEFAULT_SOURCE_ADDR_TON = TonType.UNKNOWN
DEFAULT_SOURCE_ADDR_NPI = NpiType.UNKNOWN
DEFAULT_DEST_ADDR_TON = TonType.INTERNATIONAL
DEFAULT_DEST_ADDR_NPI = NpiType.ISDN

# PDU Structure Constants
PDU_HEADER_SIZE = 16  # Size of PDU header in bytes
MAX_PDU_SIZE = 65536  # Maximum PDU size
MAX_SEQUENCE_NUMBER = 0x7FFFFFFF
RESPONSE_BIT = 0x80000000
MAX_SHORT_MESSAGE_LENGTH = 254  # sm_length is one octet, 255 reserved by carriers
MAX_SYSTEM_ID_LENGTH = 16
MAX_PASSWORD_LENGTH = 9
MAX_ADDRESS_LENGTH = 21

# Segmentation: 160/70 character limits less the room reserved for reassembly headers
MAX_SEGMENT_LENGTH = 153
MAX_UNICODE_SEGMENT_LENGTH = 67
UCS2_CHAR_SIZE = 2
DEFAULT_SEGMENT_DELAY = 0.2

UNKNOWN_ERROR_MESSAGE = 'unknown error'

STATUS_MESSAGES: Dict[int, str] = {
    CommandStatus.ESME_ROK: 'no error',
    CommandStatus.ESME_RINVMSGLEN: 'invalid message length',
    CommandStatus.ESME_RINVPRTFLG: 'invalid priority flag',
    CommandStatus.ESME_RINVREGDLVFLG: 'invalid registered delivery flag',
    CommandStatus.ESME_RSYSERR: 'system error',
    CommandStatus.ESME_RINVSRCADR: 'invalid source address',
    CommandStatus.ESME_RINVDSTADR: 'invalid destination address',
    CommandStatus.ESME_RINVMSGID: 'invalid message ID',
    CommandStatus.ESME_RBINDFAIL: 'bind failed',
    CommandStatus.ESME_RINVPASWD: 'invalid password',
    CommandStatus.ESME_RINVSYSID: 'invalid system ID',
    CommandStatus.ESME_RMSGQFUL: 'message queue full',
    CommandStatus.ESME_RSUBMITFAIL: 'submit failed',
    CommandStatus.ESME_RTHROTTLED: 'throttled - rate limit exceeded',
}


def get_error_message(status_code: int) -> str:
    """Get human-readable error message for a status code"""
    return STATUS_MESSAGES.get(status_code, UNKNOWN_ERROR_MESSAGE)


def get_command_name(command_id: int) -> str:
    """Get the lower-case SMPP name of a command ID, e.g. ``submit_sm_resp``"""
    try:
        return CommandId(command_id).name.lower()
    except ValueError:
        return f'0x{command_id:08X}'


def is_response_command(command_id: int) -> bool:
    """Check if a command ID represents a response PDU"""
    return bool(command_id & RESPONSE_BIT)


def get_response_command_id(command_id: int) -> int:
    """Get the response command ID for a given request command ID"""
    return command_id | RESPONSE_BIT
