"""
SMPP Client Module

This module provides the async SMPP transmitter client and the message
value it submits.

The module includes:
- SMPPClient: connect/bind, send, send_segmented, disconnect
- SMSMessage: the message request shape
- Session, SessionState: bound flag, sequence counter, lifecycle states
"""

from .client import SMPPClient
from .message import SMSMessage, segment_size, split_payload
from .session import Session, SessionState

__all__ = [
    # Main client class
    'SMPPClient',
    'SMSMessage',
    'Session',
    'SessionState',
    'segment_size',
    'split_payload',
]
