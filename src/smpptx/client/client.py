"""
SMPP Client (ESME) Implementation

This module provides an async SMPP transmitter client that binds to an SMSC,
submits short messages (splitting long ones into parts), and unbinds.

Exactly one request is in flight at a time: every call writes one PDU and then
waits for its response. Share a client between tasks only behind your own lock.
"""

import asyncio
import logging
import ssl
import struct
from typing import Iterable, List, Optional, Tuple

from ..config import SMPPClientConfig
from ..exceptions import (
    SMPPBindException,
    SMPPConnectionException,
    SMPPException,
    SMPPFramingException,
    SMPPInvalidStateException,
    SMPPPartialSubmissionException,
    SMPPProtocolException,
    SMPPStatusException,
    SMPPTimeoutException,
    SMPPValidationException,
)
from ..protocol import (
    PDU,
    BindTransmitter,
    BindTransmitterResp,
    CommandId,
    CommandStatus,
    OptionalTag,
    RequestPDU,
    SubmitSm,
    SubmitSmResp,
    Unbind,
    get_error_message,
    get_response_command_id,
)
from ..protocol.constants import DEFAULT_SEGMENT_DELAY
from ..protocol.validation import validate_address, validate_short_message
from ..transport import SMPPConnection
from ..utils import mask_sensitive_data
from .message import SMSMessage, segment_size, split_payload
from .session import Session, SessionState

logger = logging.getLogger(__name__)

MAX_SEGMENTS = 255
MAX_SAR_REFERENCE = 0xFFFF


class SMPPClient:
    """
    Async SMPP Transmitter Client

    Lifecycle: ``connect`` opens the socket and binds in one step, ``send`` and
    ``send_segmented`` submit messages while bound, ``disconnect`` unbinds and
    always closes the socket.
    """

    def __init__(
        self,
        host: str,
        port: int,
        system_id: str,
        password: str,
        use_tls: bool = False,
        ssl_context: Optional[ssl.SSLContext] = None,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        write_timeout: float = 30.0,
        segment_delay: float = DEFAULT_SEGMENT_DELAY,
    ):
        """
        Initialize SMPP Client

        Args:
            host: SMSC server hostname or IP
            port: SMSC server port
            system_id: System ID for authentication
            password: Password for authentication
            use_tls: Connect over TLS by default
            ssl_context: TLS settings; None skips certificate verification
            connect_timeout: Timeout for establishing the connection
            read_timeout: Timeout for reading one response PDU
            write_timeout: Timeout for writing one request PDU
            segment_delay: Pause between the parts of a segmented message
        """
        self.host = host
        self.port = port
        self.system_id = system_id
        self.password = password
        self.use_tls = use_tls
        self.ssl_context = ssl_context
        self.segment_delay = segment_delay

        self._session = Session()
        self._sar_reference = 0
        self._connection = SMPPConnection(
            host=host,
            port=port,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            write_timeout=write_timeout,
        )

    @classmethod
    def from_config(cls, config: SMPPClientConfig) -> 'SMPPClient':
        """Create a client from a validated ``SMPPClientConfig``"""
        config.validate()
        connection = config.connection

        ssl_context = None
        if connection.use_tls and connection.verify_tls:
            ssl_context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)

        return cls(
            host=config.host,
            port=config.port,
            system_id=config.system_id,
            password=config.password,
            use_tls=connection.use_tls,
            ssl_context=ssl_context,
            connect_timeout=connection.connect_timeout,
            read_timeout=connection.read_timeout,
            write_timeout=connection.write_timeout,
            segment_delay=connection.segment_delay,
        )

    @property
    def is_connected(self) -> bool:
        """Check if client is connected to SMSC"""
        return self._connection.is_connected

    @property
    def is_bound(self) -> bool:
        """Check if client is bound to SMSC"""
        return self._session.bound and self.is_connected

    @property
    def state(self) -> SessionState:
        if not self.is_connected:
            return SessionState.DISCONNECTED
        if self._session.bound:
            return SessionState.BOUND
        return SessionState.CONNECTED

    @property
    def session(self) -> Session:
        return self._session

    def next_sequence(self) -> int:
        """Return the next sequence number (1..0x7FFFFFFF, wrapping)"""
        return self._session.next_sequence()

    async def connect(self, use_tls: Optional[bool] = None) -> None:
        """
        Open the connection and bind as transmitter.

        If the bind fails the connection is closed before the error is raised,
        so callers never see a connected but unbound client.

        Args:
            use_tls: Override the client's ``use_tls`` setting for this connect
        """
        if self.is_connected:
            raise SMPPConnectionException(
                'Already connected', host=self.host, port=self.port
            )

        if use_tls is None:
            use_tls = self.use_tls

        logger.info(f'Connecting to SMSC at {self.host}:{self.port}')
        if use_tls:
            await self._connection.connect_secure(self.ssl_context)
        else:
            await self._connection.connect()

        try:
            await self.bind()
        except BaseException:
            # Includes cancellation, so no unbound socket is left behind
            self._session.reset()
            await self._connection.close()
            raise

    async def bind(self) -> None:
        """Bind as transmitter; any nonzero response status fails the bind"""
        if not self.is_connected:
            raise SMPPInvalidStateException(
                'Not connected to SMSC',
                current_state=self.state.value,
                expected_state=SessionState.CONNECTED.value,
                operation='bind_transmitter',
            )

        if self._session.bound:
            raise SMPPInvalidStateException('Already bound', operation='bind_transmitter')

        logger.info(f'Binding as transmitter (system_id={self.system_id})')
        logger.debug(
            f'bind_transmitter credentials: system_id={self.system_id}, '
            f'password={mask_sensitive_data(self.password, "password")}'
        )

        response = await self._request(
            BindTransmitter(system_id=self.system_id, password=self.password)
        )

        if response.command_status != CommandStatus.ESME_ROK:
            label = get_error_message(response.command_status)
            raise SMPPBindException(
                f'Bind failed: {label} (status {response.command_status})',
                command_status=response.command_status,
                label=label,
                system_id=self.system_id,
            )

        self._session.bound = True
        smsc_id = BindTransmitterResp.from_pdu(response).system_id
        logger.info(f'Successfully bound as transmitter to {smsc_id or self.host}')

    async def send(self, message: SMSMessage) -> str:
        """
        Submit a message that fits in a single submit_sm.

        Returns:
            Message ID assigned by the SMSC

        Raises:
            SMPPInvalidStateException: If the client is not bound
            SMPPValidationException: If the payload exceeds 254 bytes
            SMPPStatusException: If the SMSC rejects the message
        """
        return await self._submit(message)

    async def send_segmented(self, message: SMSMessage) -> str:
        """
        Submit a message, splitting it into parts when it is too long for one SMS.

        Parts are sent in order with ``segment_delay`` seconds between them and
        carry SAR reference, total, and sequence parameters. The first failing
        part aborts the send.

        Returns:
            Message ID of the first part

        Raises:
            SMPPPartialSubmissionException: If any part fails
        """
        part_size = segment_size(message)
        if len(message.payload) <= part_size:
            return await self.send(message)

        parts = split_payload(
            message.payload,
            part_size,
            utf16=message.is_unicode and not message.is_binary,
        )
        total = len(parts)
        if total > MAX_SEGMENTS:
            raise SMPPValidationException(
                f'Message too long: {total} parts needed, max {MAX_SEGMENTS}',
                field_name='payload',
                field_value=str(len(message.payload)),
                validation_rule='max_segments',
            )

        reference = self._next_sar_reference()
        logger.info(
            f'Sending {total}-part message to {message.dest_addr} (ref={reference})'
        )

        message_ids: List[str] = []
        for number, part in enumerate(parts, start=1):
            if number > 1:
                await asyncio.sleep(self.segment_delay)

            sar_parameters = [
                (OptionalTag.SAR_MSG_REF_NUM, struct.pack('>H', reference)),
                (OptionalTag.SAR_TOTAL_SEGMENTS, bytes([total])),
                (OptionalTag.SAR_SEGMENT_SEQNUM, bytes([number])),
            ]

            try:
                message_id = await self._submit(
                    message.with_payload(part), sar_parameters
                )
            except SMPPException as e:
                logger.error(f'Part {number} of {total} failed: {e}')
                raise SMPPPartialSubmissionException(
                    f'Failed to send part {number} of {total}',
                    part_number=number,
                    total_parts=total,
                    submitted_message_ids=message_ids,
                    original_error=e,
                ) from e

            message_ids.append(message_id)

        return message_ids[0]

    async def disconnect(self) -> None:
        """
        Unbind if bound, then close the connection.

        The connection is closed even when the unbind fails; a transport error
        during unbind is re-raised afterwards. A nonzero unbind status is only
        logged.
        """
        try:
            if self._session.bound and self.is_connected:
                logger.info('Unbinding from SMSC')
                response = await self._request(Unbind())
                if response.command_status != CommandStatus.ESME_ROK:
                    logger.warning(
                        f'Unbind response error: '
                        f'{get_error_message(response.command_status)} '
                        f'(status {response.command_status})'
                    )
        except SMPPException as e:
            logger.warning(f'Error during unbind: {e}')
            raise
        finally:
            self._session.reset()
            await self._connection.close()

    def abort(self) -> None:
        """
        Drop the connection immediately.

        Usable from another task to interrupt a call blocked on the socket.
        """
        self._session.reset()
        self._connection.abort()

    async def _submit(
        self,
        message: SMSMessage,
        optional_parameters: Iterable[Tuple[int, bytes]] = (),
    ) -> str:
        if not self.is_bound:
            raise SMPPInvalidStateException(
                'Not bound to SMPP server',
                current_state=self.state.value,
                expected_state=SessionState.BOUND.value,
                operation='submit_sm',
            )

        validate_short_message(message.payload)
        validate_address(message.source_addr, 'source_addr')
        validate_address(message.dest_addr, 'destination_addr')

        request = SubmitSm(
            source_addr=message.source_addr,
            destination_addr=message.dest_addr,
            short_message=message.payload,
            esm_class=message.esm_class,
            registered_delivery=message.registered_delivery,
            data_coding=message.effective_data_coding,
        )
        for tag, value in optional_parameters:
            request.add_optional_parameter(tag, value)

        logger.debug(
            f'Submitting SMS from {message.source_addr} to {message.dest_addr} '
            f'({len(message.payload)} bytes, data_coding=0x{request.data_coding:02X})'
        )

        response = await self._request(request)

        if response.command_status != CommandStatus.ESME_ROK:
            label = get_error_message(response.command_status)
            raise SMPPStatusException(
                f'submit_sm failed: {label} (status {response.command_status})',
                command_status=response.command_status,
                label=label,
                command='submit_sm',
            )

        message_id = SubmitSmResp.from_pdu(response).message_id
        logger.debug(f'SMS submitted successfully, message_id: {message_id}')
        return message_id

    async def _request(self, request: RequestPDU) -> PDU:
        """Write one request and read its correlated response"""
        pdu = request.to_pdu(self.next_sequence())
        try:
            await self._connection.write_pdu(pdu)
            response = await self._connection.read_pdu()
        except (SMPPTimeoutException, SMPPFramingException) as e:
            # A late or partial response would desynchronize every later read
            logger.error(f'Dropping connection after {pdu.name} failure: {e}')
            self.abort()
            raise

        if response.sequence_number != pdu.sequence_number:
            raise SMPPProtocolException(
                f'Response sequence mismatch for {pdu.name}',
                expected_sequence=pdu.sequence_number,
                received_sequence=response.sequence_number,
            )

        if response.command_id == CommandId.GENERIC_NACK:
            if response.command_status == CommandStatus.ESME_ROK:
                raise SMPPProtocolException(
                    f'generic_nack without error status for {pdu.name}',
                    expected_sequence=pdu.sequence_number,
                    received_sequence=response.sequence_number,
                )
            logger.warning(f'Received generic_nack for {pdu.name}')
        elif response.command_id != get_response_command_id(pdu.command_id):
            raise SMPPProtocolException(
                f'Unexpected response {response.name} to {pdu.name}',
                expected_sequence=pdu.sequence_number,
                received_sequence=response.sequence_number,
            )

        return response

    def _next_sar_reference(self) -> int:
        self._sar_reference = self._sar_reference % MAX_SAR_REFERENCE + 1
        return self._sar_reference

    async def __aenter__(self) -> 'SMPPClient':
        """Async context manager entry - connect and bind."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - unbind and disconnect."""
        try:
            await self.disconnect()
        except SMPPException as e:
            logger.warning(f'Error during disconnect: {e}')

    def __repr__(self) -> str:
        return (
            f'SMPPClient(host={self.host}, port={self.port}, '
            f'system_id={self.system_id}, state={self.state.value})'
        )
