"""
SMPP Protocol Codec Utilities

This module provides encoding and decoding utilities for SMPP protocol fields,
including C-string handling, TLV packing, and message text encoding.
"""

import struct
from typing import Tuple

from ..exceptions import SMPPPDUException


def encode_cstring(s: str, encoding: str = 'utf-8') -> bytes:
    """
    Encode a string as a C-style null-terminated string.

    The terminator is always emitted, so an empty string encodes to a single
    ``0x00`` byte.

    Args:
        s: String to encode
        encoding: Character encoding to use

    Returns:
        Encoded bytes with null terminator

    Raises:
        SMPPPDUException: If encoding fails or the string holds a NUL
    """
    try:
        encoded = s.encode(encoding)
    except UnicodeEncodeError as e:
        raise SMPPPDUException(f'String encoding error: {e}') from e

    if b'\x00' in encoded:
        raise SMPPPDUException('C-octet string cannot contain a null byte')

    return encoded + b'\x00'


def decode_cstring(
    data: bytes, offset: int = 0, encoding: str = 'utf-8'
) -> Tuple[str, int]:
    """
    Decode a C-style null-terminated string from bytes.

    A missing terminator at the end of ``data`` is tolerated and the remaining
    bytes are returned, since some gateways omit it on the last field.

    Args:
        data: Byte data to decode from
        offset: Starting offset in data
        encoding: Character encoding to use

    Returns:
        Tuple of (decoded_string, new_offset)

    Raises:
        SMPPPDUException: If decoding fails
    """
    if offset >= len(data):
        return '', offset

    end_offset = data.find(b'\x00', offset)
    if end_offset == -1:
        raw, new_offset = data[offset:], len(data)
    else:
        raw, new_offset = data[offset:end_offset], end_offset + 1

    try:
        return raw.decode(encoding), new_offset
    except UnicodeDecodeError as e:
        raise SMPPPDUException(f'String decoding error: {e}') from e


def pack_tlv_parameter(tag: int, value: bytes) -> bytes:
    """
    Pack a TLV (Tag-Length-Value) parameter.

    Args:
        tag: Parameter tag (16-bit)
        value: Parameter value bytes

    Returns:
        Packed TLV bytes

    Raises:
        SMPPPDUException: If tag or length is invalid
    """
    if not (0 <= tag <= 0xFFFF):
        raise SMPPPDUException(f'Invalid TLV tag: {tag}')

    length = len(value)
    if length > 0xFFFF:
        raise SMPPPDUException(f'TLV value too long: {length} bytes')

    return struct.pack('>HH', tag, length) + bytes(value)


def unpack_tlv_parameter(data: bytes, offset: int = 0) -> Tuple[int, bytes, int]:
    """
    Unpack a TLV (Tag-Length-Value) parameter.

    Args:
        data: Byte data containing TLV
        offset: Starting offset in data

    Returns:
        Tuple of (tag, value, new_offset)

    Raises:
        SMPPPDUException: If insufficient data
    """
    if offset + 4 > len(data):
        raise SMPPPDUException('Insufficient data for TLV header')

    tag, length = struct.unpack('>HH', data[offset : offset + 4])

    value_offset = offset + 4
    if value_offset + length > len(data):
        raise SMPPPDUException('Insufficient data for TLV value')

    value = bytes(data[value_offset : value_offset + length])
    return tag, value, value_offset + length


def encode_message_text(message: str, unicode: bool = False) -> bytes:
    """
    Encode message text for the short_message field.

    Args:
        message: Message text to encode
        unicode: Encode as UCS-2 (UTF-16-BE) instead of the default alphabet

    Returns:
        Encoded message bytes

    Raises:
        SMPPPDUException: If the text cannot be represented
    """
    try:
        if unicode:
            return message.encode('utf-16-be')
        # GSM 7-bit default alphabet - use latin-1 as approximation
        return message.encode('latin-1')
    except UnicodeEncodeError as e:
        raise SMPPPDUException(f'Message encoding error: {e}') from e
