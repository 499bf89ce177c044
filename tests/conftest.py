"""
Shared test fixtures and configuration for SMPP unit tests.
"""

import asyncio
import struct
from unittest.mock import AsyncMock, MagicMock

import pytest

from smpptx.protocol.constants import CommandId


def build_pdu(
    command_id: int, sequence_number: int, command_status: int = 0, body: bytes = b''
) -> bytes:
    """Encode a raw PDU the way a gateway would send it."""
    return (
        struct.pack('>LLLL', 16 + len(body), command_id, command_status, sequence_number)
        + body
    )


def response_chunks(
    command_id: int, sequence_number: int, command_status: int = 0, body: bytes = b''
) -> list:
    """Header and body as the two ``readexactly`` results of one response PDU."""
    data = build_pdu(command_id, sequence_number, command_status, body)
    chunks = [data[:16]]
    if body:
        chunks.append(data[16:])
    return chunks


@pytest.fixture
def mock_reader():
    """Mock asyncio StreamReader"""
    reader = AsyncMock(spec=asyncio.StreamReader)
    # Simulate a closed stream unless a test queues responses
    reader.readexactly.side_effect = asyncio.IncompleteReadError(b'', 16)
    return reader


@pytest.fixture
def mock_writer():
    """Mock asyncio StreamWriter"""
    writer = AsyncMock(spec=asyncio.StreamWriter)
    writer.write = MagicMock()
    writer.close = MagicMock()
    writer.transport = MagicMock()
    return writer


@pytest.fixture
def make_pdu():
    """Factory for raw PDU bytes."""
    return build_pdu


@pytest.fixture
def make_response():
    """Factory for the ``readexactly`` chunks of one response PDU."""
    return response_chunks


@pytest.fixture
def bind_resp_chunks():
    """Successful bind_transmitter_resp for sequence number 1."""
    return response_chunks(CommandId.BIND_TRANSMITTER_RESP, 1, body=b'SMSC\x00')


# Common test data
@pytest.fixture
def sample_host_port():
    """Sample host and port for testing."""
    return {'host': 'localhost', 'port': 2775}
