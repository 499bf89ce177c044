"""
SMPP Bind PDU Implementations

This module contains the transmitter bind request and response, and the
unbind request that closes a session.
"""

from dataclasses import dataclass

from ..codec import decode_cstring
from ..constants import (
    DEFAULT_ADDR_NPI,
    DEFAULT_ADDR_TON,
    DEFAULT_INTERFACE_VERSION,
    DEFAULT_SYSTEM_TYPE,
    CommandId,
)
from .base import PDU, RequestPDU


@dataclass
class BindTransmitter(RequestPDU):
    """BIND_TRANSMITTER PDU - Authenticate as a message transmitter"""

    command_id = CommandId.BIND_TRANSMITTER

    system_id: str
    password: str
    system_type: str = DEFAULT_SYSTEM_TYPE
    interface_version: int = DEFAULT_INTERFACE_VERSION
    addr_ton: int = DEFAULT_ADDR_TON
    addr_npi: int = DEFAULT_ADDR_NPI
    address_range: str = ''

    def encode_body(self, pdu: PDU) -> None:
        pdu.append_cstring(self.system_id)
        pdu.append_cstring(self.password)
        pdu.append_cstring(self.system_type)
        pdu.append_byte(self.interface_version)
        pdu.append_byte(self.addr_ton)
        pdu.append_byte(self.addr_npi)
        pdu.append_cstring(self.address_range)


@dataclass
class BindTransmitterResp:
    """BIND_TRANSMITTER_RESP PDU - Carries the gateway's system_id"""

    system_id: str = ''

    @classmethod
    def from_pdu(cls, pdu: PDU) -> 'BindTransmitterResp':
        # Error responses may arrive with an empty body
        system_id, _ = decode_cstring(bytes(pdu.body), 0, encoding='latin-1')
        return cls(system_id=system_id)


@dataclass
class Unbind(RequestPDU):
    """UNBIND PDU - Request to end the session (empty body)"""

    command_id = CommandId.UNBIND

    def encode_body(self, pdu: PDU) -> None:
        pass
