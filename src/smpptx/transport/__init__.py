"""
SMPP Transport Layer

This module provides the transport layer for SMPP sessions: a TCP or TLS
connection that reads and writes one length-prefixed PDU at a time.
"""

from .connection import ConnectionState, SMPPConnection, create_insecure_ssl_context

__all__ = [
    # Connection classes
    'SMPPConnection',
    'ConnectionState',
    'create_insecure_ssl_context',
]
