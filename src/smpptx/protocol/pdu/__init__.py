"""
SMPP PDU Module

This module provides the PDU byte accumulator and the typed PDUs a
transmitter session exchanges with the gateway.

The module is organized into:
- base: PDU accumulator, header codec, and the request builder base class
- bind: bind_transmitter, its response, and unbind
- message: submit_sm and submit_sm_resp
"""

from .base import PDU, RequestPDU
from .bind import BindTransmitter, BindTransmitterResp, Unbind
from .message import SubmitSm, SubmitSmResp

__all__ = [
    # Base classes
    'PDU',
    'RequestPDU',
    # Bind PDUs
    'BindTransmitter',
    'BindTransmitterResp',
    'Unbind',
    # Message PDUs
    'SubmitSm',
    'SubmitSmResp',
]
