"""Unit tests for SMPP message PDUs."""

import pytest

from smpptx.exceptions import SMPPPDUException, SMPPValidationException
from smpptx.protocol.constants import CommandId, DataCoding, OptionalTag
from smpptx.protocol.pdu.base import PDU
from smpptx.protocol.pdu.message import SubmitSm, SubmitSmResp


def expected_body(
    source=b'1234',
    dest=b'5678',
    esm_class=0,
    registered_delivery=0,
    data_coding=0,
    message=b'Hi',
):
    return (
        b'\x00'  # service_type
        + b'\x00\x00'  # source TON/NPI
        + source
        + b'\x00'
        + b'\x01\x01'  # destination TON/NPI
        + dest
        + b'\x00'
        + bytes([esm_class, 0, 0])  # esm_class, protocol_id, priority_flag
        + b'\x00\x00'  # schedule_delivery_time, validity_period
        + bytes([registered_delivery, 0, data_coding, 0])
        + bytes([len(message)])
        + message
    )


class TestSubmitSm:
    """Test SUBMIT_SM encoding."""

    def test_command_id(self):
        assert SubmitSm('1', '2').command_id == CommandId.SUBMIT_SM

    def test_body_layout(self):
        pdu = SubmitSm(source_addr='1234', destination_addr='5678', short_message=b'Hi').to_pdu(1)
        assert bytes(pdu.body) == expected_body()

    def test_flags(self):
        request = SubmitSm(
            source_addr='1234',
            destination_addr='5678',
            short_message=b'\x01\x02',
            esm_class=0x04,
            registered_delivery=1,
            data_coding=DataCoding.BINARY,
        )
        assert bytes(request.to_pdu(1).body) == expected_body(
            esm_class=4, registered_delivery=1, data_coding=4, message=b'\x01\x02'
        )

    def test_empty_message(self):
        pdu = SubmitSm(source_addr='1234', destination_addr='5678').to_pdu(1)
        assert bytes(pdu.body) == expected_body(message=b'')

    def test_max_inline_message(self):
        pdu = SubmitSm('1234', '5678', short_message=b'a' * 254).to_pdu(1)
        assert pdu.body[-255] == 254

    def test_message_too_long(self):
        with pytest.raises(SMPPValidationException, match='255 bytes'):
            SubmitSm('1234', '5678', short_message=b'a' * 255).to_pdu(1)

    def test_optional_parameters_follow_message(self):
        request = SubmitSm('1234', '5678', short_message=b'Hi')
        request.add_optional_parameter(OptionalTag.SAR_MSG_REF_NUM, b'\x00\x07')
        request.add_optional_parameter(OptionalTag.SAR_TOTAL_SEGMENTS, b'\x02')
        request.add_optional_parameter(OptionalTag.SAR_SEGMENT_SEQNUM, b'\x01')

        body = bytes(request.to_pdu(1).body)
        assert body == expected_body() + (
            b'\x02\x0c\x00\x02\x00\x07' b'\x02\x0e\x00\x01\x02' b'\x02\x0f\x00\x01\x01'
        )

    def test_invalid_optional_parameter(self):
        request = SubmitSm('1234', '5678')
        with pytest.raises(SMPPPDUException, match='Invalid TLV tag'):
            request.add_optional_parameter(0x10000, b'')
        assert request.optional_parameters == []


class TestSubmitSmResp:
    """Test SUBMIT_SM_RESP decoding."""

    def test_message_id(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, body=bytearray(b'abc123\x00'))
        assert SubmitSmResp.from_pdu(pdu).message_id == 'abc123'

    def test_message_id_without_terminator(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, body=bytearray(b'abc123'))
        assert SubmitSmResp.from_pdu(pdu).message_id == 'abc123'

    def test_only_one_terminator_stripped(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, body=bytearray(b'id\x00\x00'))
        assert SubmitSmResp.from_pdu(pdu).message_id == 'id\x00'

    def test_empty_body(self):
        pdu = PDU(CommandId.SUBMIT_SM_RESP, command_status=0x58)
        assert SubmitSmResp.from_pdu(pdu).message_id == ''
