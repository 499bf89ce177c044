"""
SMS Message Requests

The message value handed to ``SMPPClient.send`` and the helpers that map it
onto submit_sm fields: data coding selection and segmentation.
"""

from dataclasses import dataclass
from typing import List

from ..protocol.codec import encode_message_text
from ..protocol.constants import (
    MAX_SEGMENT_LENGTH,
    MAX_UNICODE_SEGMENT_LENGTH,
    UCS2_CHAR_SIZE,
    DataCoding,
    EsmClass,
    RegisteredDelivery,
)


@dataclass
class SMSMessage:
    """
    An SMS message to submit.

    Attributes:
        source_addr: Sender address
        dest_addr: Recipient address
        payload: Encoded message bytes
        data_coding: Data coding used when neither flag below is set
        is_unicode: Payload is UCS-2 encoded
        is_binary: Payload is 8-bit binary data; takes precedence over is_unicode
        request_delivery_report: Ask the gateway for a delivery receipt
    """

    source_addr: str
    dest_addr: str
    payload: bytes
    data_coding: int = DataCoding.DEFAULT
    is_unicode: bool = False
    is_binary: bool = False
    request_delivery_report: bool = False

    @classmethod
    def from_text(
        cls,
        source_addr: str,
        dest_addr: str,
        text: str,
        unicode: bool = False,
        request_delivery_report: bool = False,
    ) -> 'SMSMessage':
        """Build a message from text, UCS-2 encoded when ``unicode`` is set."""
        return cls(
            source_addr=source_addr,
            dest_addr=dest_addr,
            payload=encode_message_text(text, unicode=unicode),
            is_unicode=unicode,
            request_delivery_report=request_delivery_report,
        )

    @property
    def effective_data_coding(self) -> int:
        if self.is_binary:
            return DataCoding.BINARY
        if self.is_unicode:
            return DataCoding.UCS2
        return self.data_coding

    @property
    def esm_class(self) -> int:
        return EsmClass.BINARY if self.is_binary else EsmClass.DEFAULT

    @property
    def registered_delivery(self) -> int:
        if self.request_delivery_report:
            return RegisteredDelivery.SUCCESS_FAILURE
        return RegisteredDelivery.NO_RECEIPT

    def with_payload(self, payload: bytes) -> 'SMSMessage':
        return SMSMessage(
            source_addr=self.source_addr,
            dest_addr=self.dest_addr,
            payload=payload,
            data_coding=self.data_coding,
            is_unicode=self.is_unicode,
            is_binary=self.is_binary,
            request_delivery_report=self.request_delivery_report,
        )


def segment_size(message: SMSMessage) -> int:
    """
    Maximum payload bytes per part of a segmented message.

    153 characters for the default alphabet and binary data, 67 UCS-2
    characters (two bytes each) for unicode.
    """
    if message.is_unicode and not message.is_binary:
        return MAX_UNICODE_SEGMENT_LENGTH * UCS2_CHAR_SIZE
    return MAX_SEGMENT_LENGTH


def split_payload(payload: bytes, part_size: int, utf16: bool = False) -> List[bytes]:
    """
    Split a payload into consecutive parts of at most ``part_size`` bytes.

    With ``utf16`` the payload is UTF-16-BE and a part never ends between the
    two halves of a surrogate pair; such a part is cut two bytes short.
    """
    if part_size <= 0:
        raise ValueError(f'part_size must be positive, got {part_size}')
    if not payload:
        return [b'']

    parts = []
    start = 0
    while start < len(payload):
        end = min(start + part_size, len(payload))
        # 0xD8-0xDB is the first byte of a high surrogate
        if utf16 and end < len(payload) and end - start > 2:
            if 0xD8 <= payload[end - 2] <= 0xDB:
                end -= 2
        parts.append(payload[start:end])
        start = end
    return parts
