"""
SMPP Connection Handling

This module provides the TCP/TLS connection used by an SMPP session: one
physical socket, one PDU in flight at a time, length-prefixed framing.
"""

import asyncio
import logging
import ssl
from enum import Enum
from typing import Optional

from smpptx.exceptions import (
    SMPPConnectionException,
    SMPPFramingException,
    SMPPNotConnectedException,
    SMPPTimeoutException,
)
from smpptx.protocol.constants import PDU_HEADER_SIZE
from smpptx.protocol.pdu import PDU

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """SMPP Connection States"""

    CLOSED = 'CLOSED'
    OPEN = 'OPEN'


def create_insecure_ssl_context() -> ssl.SSLContext:
    """
    Build the default client TLS context.

    Certificate and hostname verification are switched off on purpose: carrier
    SMPP endpoints commonly present self-signed certificates. Pass your own
    context to ``connect_secure`` (or set ``verify_tls``) to verify the peer.
    """
    context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class SMPPConnection:
    """
    SMPP Connection Handler

    Owns one stream to the gateway and performs bit-exact reads and writes of
    whole PDUs. There is no background reader: every ``read_pdu`` call reads
    exactly one PDU from the socket.
    """

    def __init__(
        self,
        host: str,
        port: int,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        write_timeout: float = 30.0,
    ):
        """
        Initialize SMPP connection

        Args:
            host: Remote host address
            port: Remote port number
            connect_timeout: Timeout for establishing the connection in seconds
            read_timeout: Timeout for reading one PDU in seconds
            write_timeout: Timeout for writing one PDU in seconds
        """
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.write_timeout = write_timeout

        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        self._state = ConnectionState.CLOSED
        self._secure = False

    @property
    def state(self) -> ConnectionState:
        """Get current connection state"""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if connection is established"""
        return self._state == ConnectionState.OPEN and self._writer is not None

    @property
    def is_secure(self) -> bool:
        return self._secure

    def _set_state(self, new_state: ConnectionState) -> None:
        old_state = self._state
        if old_state != new_state:
            self._state = new_state
            logger.debug(
                f'Connection state changed: {old_state.value} -> {new_state.value}'
            )

    async def connect(self) -> None:
        """Establish a plain TCP connection"""
        await self._open(ssl_context=None)

    async def connect_secure(self, ssl_context: Optional[ssl.SSLContext] = None) -> None:
        """
        Establish a TLS connection.

        Args:
            ssl_context: TLS settings; defaults to ``create_insecure_ssl_context()``
        """
        if ssl_context is None:
            ssl_context = create_insecure_ssl_context()
        await self._open(ssl_context=ssl_context)

    async def _open(self, ssl_context: Optional[ssl.SSLContext]) -> None:
        if self.is_connected:
            raise SMPPConnectionException(
                'Already connected', host=self.host, port=self.port
            )

        transport_name = 'TLS' if ssl_context is not None else 'TCP'
        logger.info(f'Connecting to {self.host}:{self.port} over {transport_name}')

        try:
            self._reader, self._writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port, ssl=ssl_context),
                timeout=self.connect_timeout,
            )
        except asyncio.TimeoutError as e:
            raise SMPPConnectionException(
                f'Connection timeout to {self.host}:{self.port} '
                f'after {self.connect_timeout} seconds',
                host=self.host,
                port=self.port,
                original_error=e,
            ) from e
        except (OSError, ssl.SSLError) as e:
            raise SMPPConnectionException(
                f'Failed to connect to {self.host}:{self.port}: {e}',
                host=self.host,
                port=self.port,
                original_error=e,
            ) from e

        self._secure = ssl_context is not None
        self._set_state(ConnectionState.OPEN)
        logger.info(f'Connected to {self.host}:{self.port}')

    async def write_pdu(self, pdu: PDU) -> None:
        """
        Write one PDU, header then body, under the write timeout.

        ``command_length`` is recomputed from the current body.

        Raises:
            SMPPNotConnectedException: If no socket is open
            SMPPTimeoutException: If the write deadline expires
            SMPPConnectionException: If the write fails
        """
        if not self.is_connected or self._writer is None:
            raise SMPPNotConnectedException(host=self.host, port=self.port)

        data = pdu.encode()
        logger.debug(
            f'Sending PDU: {pdu.name} (seq={pdu.sequence_number}, len={len(data)})'
        )

        try:
            self._writer.write(data)
            await asyncio.wait_for(self._writer.drain(), timeout=self.write_timeout)
        except asyncio.TimeoutError as e:
            raise SMPPTimeoutException(
                f'Write timeout for PDU {pdu.name}',
                timeout_duration=self.write_timeout,
                operation='write',
                original_error=e,
            ) from e
        except OSError as e:
            raise SMPPConnectionException(
                f'Failed to send PDU {pdu.name}: {e}',
                host=self.host,
                port=self.port,
                original_error=e,
            ) from e

    async def read_pdu(self) -> PDU:
        """
        Read exactly one PDU under the read timeout.

        Raises:
            SMPPNotConnectedException: If no socket is open
            SMPPTimeoutException: If the read deadline expires
            SMPPFramingException: If the header declares an impossible length or
                the peer closes the stream part way through a PDU
            SMPPConnectionException: If the peer closed the stream between PDUs
                or the read fails
        """
        if not self.is_connected or self._reader is None:
            raise SMPPNotConnectedException(host=self.host, port=self.port)

        try:
            return await asyncio.wait_for(
                self._read_frame(self._reader), timeout=self.read_timeout
            )
        except asyncio.TimeoutError as e:
            raise SMPPTimeoutException(
                'PDU receive timeout',
                timeout_duration=self.read_timeout,
                operation='read',
                original_error=e,
            ) from e
        except OSError as e:
            raise SMPPConnectionException(
                f'Failed to receive PDU: {e}',
                host=self.host,
                port=self.port,
                original_error=e,
            ) from e

    async def _read_frame(self, reader: asyncio.StreamReader) -> PDU:
        try:
            header_data = await reader.readexactly(PDU_HEADER_SIZE)
        except asyncio.IncompleteReadError as e:
            if not e.partial:
                raise SMPPConnectionException(
                    'Connection closed by peer',
                    host=self.host,
                    port=self.port,
                    original_error=e,
                ) from e
            raise SMPPFramingException(
                f'Connection closed inside PDU header after {len(e.partial)} bytes',
                received_length=len(e.partial),
                original_error=e,
            ) from e

        pdu = PDU.decode_header(header_data)

        body_data = b''
        if pdu.body_length > 0:
            try:
                body_data = await reader.readexactly(pdu.body_length)
            except asyncio.IncompleteReadError as e:
                raise SMPPFramingException(
                    f'Connection closed inside PDU body: expected {pdu.body_length} '
                    f'bytes, got {len(e.partial)}',
                    command_id=pdu.command_id,
                    sequence_number=pdu.sequence_number,
                    command_length=pdu.command_length,
                    received_length=PDU_HEADER_SIZE + len(e.partial),
                    original_error=e,
                ) from e

        pdu.attach_body(body_data)
        logger.debug(
            f'Received PDU: {pdu.name} (seq={pdu.sequence_number}, '
            f'status={pdu.command_status}, len={pdu.command_length})'
        )
        return pdu

    async def close(self) -> None:
        """Close the connection; closing a closed connection is a no-op"""
        writer = self._writer
        if writer is None:
            self._set_state(ConnectionState.CLOSED)
            return

        self._writer = None
        self._reader = None
        self._set_state(ConnectionState.CLOSED)

        try:
            writer.close()
            await writer.wait_closed()
        except (OSError, ssl.SSLError) as e:
            logger.warning(f'Error closing writer: {e}')

        logger.info(f'Disconnected from {self.host}:{self.port}')

    def abort(self) -> None:
        """
        Close the socket immediately without waiting.

        Safe to call from another task while ``read_pdu`` or ``write_pdu`` is
        blocked; the blocked call then fails.
        """
        writer = self._writer
        self._writer = None
        self._reader = None
        self._set_state(ConnectionState.CLOSED)

        if writer is not None:
            writer.transport.abort()
            logger.info(f'Connection to {self.host}:{self.port} aborted')

    def __repr__(self) -> str:
        return f'SMPPConnection(host={self.host}, port={self.port}, state={self._state.value})'

    async def __aenter__(self):
        """Async context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
