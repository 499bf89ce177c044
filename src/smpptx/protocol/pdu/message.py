"""
SMPP Message PDU Implementations

This module contains the submit_sm request builder and the submit_sm_resp
parser used to submit short messages.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..codec import pack_tlv_parameter
from ..constants import (
    DEFAULT_DEST_ADDR_NPI,
    DEFAULT_DEST_ADDR_TON,
    DEFAULT_SOURCE_ADDR_NPI,
    DEFAULT_SOURCE_ADDR_TON,
    CommandId,
    DataCoding,
    EsmClass,
    RegisteredDelivery,
)
from ..validation import validate_short_message
from .base import PDU, RequestPDU


@dataclass
class SubmitSm(RequestPDU):
    """
    SUBMIT_SM PDU - Submit a short message to the gateway

    The short message is written inline as ``sm_length`` plus
    ``short_message``, so it must fit in a single octet length. Optional
    parameters are appended after the mandatory fields in the order given.
    """

    command_id = CommandId.SUBMIT_SM

    source_addr: str
    destination_addr: str
    short_message: bytes = b''
    service_type: str = ''
    source_addr_ton: int = DEFAULT_SOURCE_ADDR_TON
    source_addr_npi: int = DEFAULT_SOURCE_ADDR_NPI
    dest_addr_ton: int = DEFAULT_DEST_ADDR_TON
    dest_addr_npi: int = DEFAULT_DEST_ADDR_NPI
    esm_class: int = EsmClass.DEFAULT
    protocol_id: int = 0
    priority_flag: int = 0
    schedule_delivery_time: str = ''
    validity_period: str = ''
    registered_delivery: int = RegisteredDelivery.NO_RECEIPT
    replace_if_present_flag: int = 0
    data_coding: int = DataCoding.DEFAULT
    sm_default_msg_id: int = 0
    optional_parameters: List[Tuple[int, bytes]] = field(default_factory=list)

    def add_optional_parameter(self, tag: int, value: bytes) -> None:
        # Pack eagerly so a bad tag or length fails here, not mid-send
        pack_tlv_parameter(tag, value)
        self.optional_parameters.append((tag, value))

    def encode_body(self, pdu: PDU) -> None:
        validate_short_message(self.short_message)

        pdu.append_cstring(self.service_type)
        pdu.append_byte(self.source_addr_ton)
        pdu.append_byte(self.source_addr_npi)
        pdu.append_cstring(self.source_addr)
        pdu.append_byte(self.dest_addr_ton)
        pdu.append_byte(self.dest_addr_npi)
        pdu.append_cstring(self.destination_addr)
        pdu.append_byte(self.esm_class)
        pdu.append_byte(self.protocol_id)
        pdu.append_byte(self.priority_flag)
        pdu.append_cstring(self.schedule_delivery_time)
        pdu.append_cstring(self.validity_period)
        pdu.append_byte(self.registered_delivery)
        pdu.append_byte(self.replace_if_present_flag)
        pdu.append_byte(self.data_coding)
        pdu.append_byte(self.sm_default_msg_id)
        pdu.append_byte(len(self.short_message))
        pdu.append_raw(self.short_message)

        for tag, value in self.optional_parameters:
            pdu.append_tlv(tag, value)


@dataclass
class SubmitSmResp:
    """SUBMIT_SM_RESP PDU - Carries the gateway-assigned message_id"""

    message_id: str = ''

    @classmethod
    def from_pdu(cls, pdu: PDU) -> 'SubmitSmResp':
        """
        Extract the message_id from a submit_sm_resp body.

        A single trailing null terminator is stripped when present; an empty
        body yields an empty message_id.
        """
        raw = pdu.get_bytes(0, len(pdu.body))
        if raw.endswith(b'\x00'):
            raw = raw[:-1]
        return cls(message_id=raw.decode('latin-1'))
