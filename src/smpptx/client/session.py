"""
SMPP Session State

Protocol state of one transmitter session: whether it is bound and which
sequence number comes next. A ``Session`` is owned by a single client; callers
sharing a client across tasks must serialize access themselves.
"""

from dataclasses import dataclass
from enum import Enum

from ..protocol.constants import MAX_SEQUENCE_NUMBER


class SessionState(Enum):
    """Client-visible session states"""

    DISCONNECTED = 'disconnected'
    CONNECTED = 'connected'
    BOUND = 'bound'


@dataclass
class Session:
    """Bound flag and sequence counter of one SMPP session"""

    bound: bool = False
    sequence_number: int = 1

    def next_sequence(self) -> int:
        """
        Return the current sequence number and advance the counter.

        The counter wraps back to 1 instead of exceeding ``0x7FFFFFFF`` so the
        high bit, which marks response command IDs, is never set.
        """
        current = self.sequence_number
        self.sequence_number += 1
        if self.sequence_number > MAX_SEQUENCE_NUMBER:
            self.sequence_number = 1
        return current

    def reset(self) -> None:
        self.bound = False
