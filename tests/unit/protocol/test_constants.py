"""Unit tests for SMPP protocol constants and lookup helpers."""

import pytest

from smpptx.protocol.constants import (
    MAX_SEQUENCE_NUMBER,
    STATUS_MESSAGES,
    CommandId,
    CommandStatus,
    get_command_name,
    get_error_message,
    get_response_command_id,
    is_response_command,
)


class TestCommandIds:
    """Test command ID values and helpers."""

    def test_wire_values(self):
        assert CommandId.BIND_TRANSMITTER == 0x00000002
        assert CommandId.BIND_TRANSMITTER_RESP == 0x80000002
        assert CommandId.SUBMIT_SM == 0x00000004
        assert CommandId.SUBMIT_SM_RESP == 0x80000004
        assert CommandId.UNBIND == 0x00000006
        assert CommandId.UNBIND_RESP == 0x80000006
        assert CommandId.GENERIC_NACK == 0x80000000

    @pytest.mark.parametrize(
        'request_id,response_id',
        [
            (CommandId.BIND_TRANSMITTER, CommandId.BIND_TRANSMITTER_RESP),
            (CommandId.SUBMIT_SM, CommandId.SUBMIT_SM_RESP),
            (CommandId.UNBIND, CommandId.UNBIND_RESP),
        ],
    )
    def test_response_command_id(self, request_id, response_id):
        assert get_response_command_id(request_id) == response_id
        assert is_response_command(response_id)
        assert not is_response_command(request_id)

    def test_command_name(self):
        assert get_command_name(CommandId.SUBMIT_SM_RESP) == 'submit_sm_resp'
        assert get_command_name(0x00000099) == '0x00000099'

    def test_max_sequence_number_excludes_response_bit(self):
        assert MAX_SEQUENCE_NUMBER == 0x7FFFFFFF


class TestStatusMessages:
    """Test the command status description table."""

    @pytest.mark.parametrize(
        'status,label',
        [
            (0x00, 'no error'),
            (0x01, 'invalid message length'),
            (0x08, 'system error'),
            (0x0A, 'invalid source address'),
            (0x0B, 'invalid destination address'),
            (0x0D, 'bind failed'),
            (0x0E, 'invalid password'),
            (0x0F, 'invalid system ID'),
            (0x14, 'message queue full'),
            (0x45, 'submit failed'),
            (0x58, 'throttled - rate limit exceeded'),
        ],
    )
    def test_known_codes(self, status, label):
        assert get_error_message(status) == label

    def test_throttled_is_88(self):
        assert CommandStatus.ESME_RTHROTTLED == 88
        assert get_error_message(88) == 'throttled - rate limit exceeded'

    @pytest.mark.parametrize('status', [0x02, 0x63, 0xFF, 0x12345])
    def test_unknown_codes(self, status):
        assert status not in STATUS_MESSAGES
        assert get_error_message(status) == 'unknown error'
