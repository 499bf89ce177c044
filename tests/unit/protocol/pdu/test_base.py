"""Unit tests for SMPP PDU base classes."""

import struct

import pytest

from smpptx.exceptions import SMPPFramingException, SMPPPDUException
from smpptx.protocol.constants import MAX_PDU_SIZE, CommandId, CommandStatus
from smpptx.protocol.pdu.base import PDU, RequestPDU


class TestPDUAppend:
    """Test the body accumulator methods."""

    def test_new_pdu_is_empty(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        assert pdu.body == bytearray()
        assert pdu.command_length == 16
        assert pdu.command_status == CommandStatus.ESME_ROK

    def test_append_cstring(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_cstring('abc')
        assert bytes(pdu.body) == b'abc\x00'

    def test_append_empty_cstring(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_cstring('')
        assert bytes(pdu.body) == b'\x00'

    def test_append_byte(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_byte(0)
        pdu.append_byte(0xFF)
        assert bytes(pdu.body) == b'\x00\xff'

    @pytest.mark.parametrize('value', [-1, 256])
    def test_append_byte_out_of_range(self, value):
        pdu = PDU(CommandId.SUBMIT_SM)
        with pytest.raises(SMPPPDUException, match='Byte value out of range'):
            pdu.append_byte(value)

    def test_append_raw(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_raw(b'\x00\x01\x02')
        assert bytes(pdu.body) == b'\x00\x01\x02'

    def test_append_tlv(self):
        """Test a 300 byte message_payload TLV header."""
        pdu = PDU(CommandId.SUBMIT_SM)
        value = b'x' * 300
        pdu.append_tlv(0x0424, value)
        assert bytes(pdu.body) == b'\x04\x24\x01\x2c' + value

    def test_appends_are_in_order(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_cstring('a')
        pdu.append_byte(1)
        pdu.append_tlv(0x020E, b'\x02')
        assert bytes(pdu.body) == b'a\x00\x01\x02\x0e\x00\x01\x02'


class TestPDUGetBytes:
    """Test bounded body reads."""

    def test_valid_range(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, body=bytearray(b'abcdef'))
        assert pdu.get_bytes(1, 4) == b'bcd'
        assert pdu.get_bytes(0, 6) == b'abcdef'

    @pytest.mark.parametrize('start,end', [(6, 7), (2, 7), (3, 3), (4, 2), (10, 20)])
    def test_invalid_range_is_empty(self, start, end):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, body=bytearray(b'abcdef'))
        assert pdu.get_bytes(start, end) == b''

    def test_empty_body(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP)
        assert pdu.get_bytes(0, 0) == b''


class TestPDUHeader:
    """Test header encoding and decoding."""

    def test_encode_header(self):
        pdu = PDU(CommandId.SUBMIT_SM, sequence_number=7)
        pdu.append_raw(b'\x01\x02\x03')
        header = pdu.encode_header()
        assert header == struct.pack('>LLLL', 19, 0x00000004, 0, 7)
        assert pdu.command_length == 19

    def test_encode_is_header_plus_body(self):
        pdu = PDU(CommandId.UNBIND, sequence_number=2)
        pdu.append_raw(b'xy')
        assert pdu.encode() == struct.pack('>LLLL', 18, 6, 0, 2) + b'xy'

    def test_header_round_trip(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, sequence_number=0x7FFFFFFF, command_status=0x58)
        pdu.append_cstring('msg-1')
        decoded = PDU.decode_header(pdu.encode_header())

        assert decoded.command_id == CommandId.SUBMIT_SM_RESP
        assert decoded.command_status == 0x58
        assert decoded.sequence_number == 0x7FFFFFFF
        assert decoded.command_length == 16 + len(pdu.body)
        assert decoded.body_length == len(pdu.body)
        assert decoded.body == bytearray()

    def test_encode_too_large(self):
        pdu = PDU(CommandId.SUBMIT_SM)
        pdu.append_raw(b'\x00' * MAX_PDU_SIZE)
        with pytest.raises(SMPPPDUException, match='PDU too large'):
            pdu.encode_header()

    def test_decode_short_header(self):
        with pytest.raises(SMPPFramingException, match='Invalid PDU header size'):
            PDU.decode_header(b'\x00' * 15)

    def test_decode_length_below_header(self):
        data = struct.pack('>LLLL', 15, 0x80000004, 0, 1)
        with pytest.raises(SMPPFramingException, match='Invalid PDU length: 15') as exc:
            PDU.decode_header(data)
        assert exc.value.command_length == 15

    def test_decode_length_above_maximum(self):
        data = struct.pack('>LLLL', MAX_PDU_SIZE + 1, 0x80000004, 0, 1)
        with pytest.raises(SMPPFramingException, match='PDU length exceeds maximum'):
            PDU.decode_header(data)


class TestPDUDecode:
    """Test complete PDU decoding."""

    def test_decode_complete(self):
        data = struct.pack('>LLLL', 20, 0x80000004, 0, 3) + b'abc\x00'
        pdu = PDU.decode(data)
        assert pdu.command_id == CommandId.SUBMIT_SM_RESP
        assert pdu.sequence_number == 3
        assert bytes(pdu.body) == b'abc\x00'
        assert pdu.is_response()
        assert pdu.name == 'submit_sm_resp'

    def test_decode_body_length_mismatch(self):
        data = struct.pack('>LLLL', 20, 0x80000004, 0, 3) + b'ab'
        with pytest.raises(SMPPFramingException, match='PDU length mismatch') as exc:
            PDU.decode(data)
        assert exc.value.received_length == 18

    def test_attach_body(self):
        pdu = PDU.decode_header(struct.pack('>LLLL', 18, 0x80000002, 0, 1))
        pdu.attach_body(b'A\x00')
        assert bytes(pdu.body) == b'A\x00'

    def test_repr(self):
        pdu = PDU(CommandId.UNBIND, sequence_number=5)
        assert 'unbind' in repr(pdu)
        assert 'sequence_number=5' in repr(pdu)


class TestRequestPDU:
    """Test the typed request base class."""

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            RequestPDU()

    def test_to_pdu(self):
        class Ping(RequestPDU):
            command_id = CommandId.UNBIND

            def encode_body(self, pdu):
                pdu.append_byte(1)

        pdu = Ping().to_pdu(42)
        assert pdu.command_id == CommandId.UNBIND
        assert pdu.sequence_number == 42
        assert bytes(pdu.body) == b'\x01'
