"""
SMPP PDU Base Classes and Utilities

This module contains the PDU byte accumulator and the base class for typed
request builders, following the SMPP v3.4 wire layout.

The module provides:
- PDU: one protocol message, header fields plus an append-only body buffer
- RequestPDU: base for "fields to encode" values that render into a PDU
"""

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from ...exceptions import SMPPFramingException, SMPPPDUException
from ..codec import encode_cstring, pack_tlv_parameter
from ..constants import (
    MAX_PDU_SIZE,
    PDU_HEADER_SIZE,
    CommandStatus,
    get_command_name,
    is_response_command,
)

HEADER_FORMAT = '>LLLL'


@dataclass
class PDU:
    """
    A single SMPP Protocol Data Unit.

    The body is built incrementally with the ``append_*`` methods, in wire
    order. ``command_length`` is recomputed from the body whenever the header
    is encoded; on a decoded header it holds the length declared by the peer.

    Attributes:
        command_id: The SMPP command identifier
        command_status: Status code (0 for requests, error code for responses)
        sequence_number: Sequence number for request/response matching
        body: Command-specific mandatory and optional parameters
        command_length: Total length of header and body
    """

    command_id: int
    sequence_number: int = 0
    command_status: int = CommandStatus.ESME_ROK
    body: bytearray = field(default_factory=bytearray)
    command_length: int = PDU_HEADER_SIZE

    @property
    def name(self) -> str:
        return get_command_name(self.command_id)

    @property
    def body_length(self) -> int:
        """Body length implied by ``command_length``"""
        return self.command_length - PDU_HEADER_SIZE

    def is_response(self) -> bool:
        return is_response_command(self.command_id)

    def append_raw(self, data: bytes) -> None:
        """Append already-encoded bytes verbatim."""
        self.body.extend(data)

    def append_byte(self, value: int) -> None:
        """Append a single octet (flags, TON/NPI, data_coding)."""
        if not (0 <= value <= 0xFF):
            raise SMPPPDUException(f'Byte value out of range: {value}')
        self.body.append(value)

    def append_cstring(self, value: str) -> None:
        """Append a C-octet string; an empty string still emits its terminator."""
        self.body.extend(encode_cstring(value))

    def append_tlv(self, tag: int, value: bytes) -> None:
        """Append a tag-length-value optional parameter."""
        self.body.extend(pack_tlv_parameter(tag, value))

    def get_bytes(self, start: int, end: int) -> bytes:
        """
        Return ``body[start:end]``.

        Invalid bounds yield ``b''``, which callers treat as an absent field.
        """
        if start >= len(self.body) or end > len(self.body) or start >= end:
            return b''
        return bytes(self.body[start:end])

    def encode_header(self) -> bytes:
        """
        Encode the 16-byte header, refreshing ``command_length`` from the body.

        Raises:
            SMPPPDUException: If the PDU exceeds the maximum size
        """
        self.command_length = PDU_HEADER_SIZE + len(self.body)
        if self.command_length > MAX_PDU_SIZE:
            raise SMPPPDUException(
                f'PDU too large: {self.command_length} bytes exceeds maximum {MAX_PDU_SIZE}',
                pdu_type=self.name,
                sequence_number=self.sequence_number,
            )

        return struct.pack(
            HEADER_FORMAT,
            self.command_length,
            self.command_id,
            self.command_status,
            self.sequence_number,
        )

    def encode(self) -> bytes:
        """Encode the complete PDU (header followed by body)."""
        return self.encode_header() + bytes(self.body)

    @classmethod
    def decode_header(cls, data: bytes) -> 'PDU':
        """
        Decode a 16-byte header into a PDU with an empty body.

        The caller must then read exactly ``body_length`` further bytes and
        hand them to ``attach_body``.

        Raises:
            SMPPFramingException: If the header is short or declares an
                impossible length
        """
        if len(data) != PDU_HEADER_SIZE:
            raise SMPPFramingException(
                f'Invalid PDU header size: {len(data)} != {PDU_HEADER_SIZE}',
                received_length=len(data),
            )

        command_length, command_id, command_status, sequence_number = struct.unpack(
            HEADER_FORMAT, data
        )

        if command_length < PDU_HEADER_SIZE:
            raise SMPPFramingException(
                f'Invalid PDU length: {command_length} < {PDU_HEADER_SIZE}',
                command_id=command_id,
                sequence_number=sequence_number,
                command_length=command_length,
            )

        if command_length > MAX_PDU_SIZE:
            raise SMPPFramingException(
                f'PDU length exceeds maximum: {command_length} > {MAX_PDU_SIZE}',
                command_id=command_id,
                sequence_number=sequence_number,
                command_length=command_length,
            )

        return cls(
            command_id=command_id,
            sequence_number=sequence_number,
            command_status=command_status,
            command_length=command_length,
        )

    def attach_body(self, data: bytes) -> None:
        """
        Set the body of a decoded PDU, checking it against the declared length.

        Raises:
            SMPPFramingException: If the body length disagrees with the header
        """
        if len(data) != self.body_length:
            raise SMPPFramingException(
                f'PDU length mismatch: header declares {self.body_length} body bytes, '
                f'got {len(data)}',
                command_id=self.command_id,
                sequence_number=self.sequence_number,
                command_length=self.command_length,
                received_length=PDU_HEADER_SIZE + len(data),
            )
        self.body = bytearray(data)

    @classmethod
    def decode(cls, data: bytes) -> 'PDU':
        """Decode a complete PDU from bytes."""
        pdu = cls.decode_header(bytes(data[:PDU_HEADER_SIZE]))
        pdu.attach_body(bytes(data[PDU_HEADER_SIZE:]))
        return pdu

    def __repr__(self) -> str:
        return (
            f'PDU(command={self.name}, '
            f'command_status=0x{self.command_status:08X}, '
            f'sequence_number={self.sequence_number}, '
            f'body_length={len(self.body)})'
        )


class RequestPDU(ABC):
    """
    Base class for typed request PDUs.

    Subclasses hold the fields to encode; ``to_pdu`` renders them into a fresh
    ``PDU`` accumulator so the bytes can be checked without a socket.
    """

    command_id: ClassVar[int]

    @abstractmethod
    def encode_body(self, pdu: PDU) -> None:
        """Append this request's mandatory and optional parameters to ``pdu``."""

    def to_pdu(self, sequence_number: int) -> PDU:
        pdu = PDU(command_id=self.command_id, sequence_number=sequence_number)
        self.encode_body(pdu)
        return pdu
