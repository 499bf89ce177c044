"""Unit tests for SMPP bind and unbind PDUs."""

import struct

import pytest

from smpptx.exceptions import SMPPPDUException
from smpptx.protocol.constants import CommandId, CommandStatus
from smpptx.protocol.pdu.base import PDU
from smpptx.protocol.pdu.bind import BindTransmitter, BindTransmitterResp, Unbind


class TestBindTransmitter:
    """Test BIND_TRANSMITTER encoding."""

    def test_defaults(self):
        bind = BindTransmitter(system_id='client', password='secret')
        assert bind.command_id == CommandId.BIND_TRANSMITTER
        assert bind.system_type == ''
        assert bind.interface_version == 0x34
        assert bind.addr_ton == 0
        assert bind.addr_npi == 0
        assert bind.address_range == ''

    def test_body_layout(self):
        pdu = BindTransmitter(system_id='client', password='secret').to_pdu(1)
        assert bytes(pdu.body) == b'client\x00secret\x00\x00\x34\x00\x00\x00'

    def test_encode(self):
        data = BindTransmitter(system_id='id', password='pw').to_pdu(1).encode()
        body = b'id\x00pw\x00\x00\x34\x00\x00\x00'
        assert data == struct.pack('>LLLL', 16 + len(body), 0x00000002, 0, 1) + body

    def test_empty_credentials_keep_terminators(self):
        pdu = BindTransmitter(system_id='', password='').to_pdu(1)
        assert bytes(pdu.body) == b'\x00\x00\x00\x34\x00\x00\x00'

    def test_custom_fields(self):
        bind = BindTransmitter(
            system_id='a',
            password='b',
            system_type='VMA',
            interface_version=0x33,
            addr_ton=1,
            addr_npi=1,
            address_range='^1',
        )
        assert bytes(bind.to_pdu(9).body) == b'a\x00b\x00VMA\x00\x33\x01\x01^1\x00'

    def test_invalid_system_id_encoding(self):
        with pytest.raises(SMPPPDUException):
            BindTransmitter(system_id='bad\x00id', password='').to_pdu(1)


class TestBindTransmitterResp:
    """Test BIND_TRANSMITTER_RESP decoding."""

    def test_system_id(self):
        pdu = PDU(
            CommandId.BIND_TRANSMITTER_RESP, sequence_number=1, body=bytearray(b'SMSC\x00')
        )
        assert BindTransmitterResp.from_pdu(pdu).system_id == 'SMSC'

    def test_empty_body(self):
        pdu = PDU(
            CommandId.BIND_TRANSMITTER_RESP,
            sequence_number=1,
            command_status=CommandStatus.ESME_RBINDFAIL,
        )
        assert BindTransmitterResp.from_pdu(pdu).system_id == ''


class TestUnbind:
    """Test UNBIND encoding."""

    def test_empty_body(self):
        pdu = Unbind().to_pdu(3)
        assert pdu.command_id == CommandId.UNBIND
        assert pdu.encode() == struct.pack('>LLLL', 16, 0x00000006, 0, 3)
