#!/usr/bin/env python3
"""
SMPP Client Example

This example demonstrates how to use the SMPP transmitter client to connect
to an SMSC, send a short message and a long segmented message, and unbind.

Connection settings are read from SMPP_* environment variables
(SMPP_HOST, SMPP_PORT, SMPP_SYSTEM_ID, SMPP_PASSWORD, SMPP_CONNECTION_USE_TLS)
and fall back to a local test gateway.
"""

import asyncio
import logging
import os
import sys

# Add src directory to path for imports
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
)

from smpptx import (  # noqa: E402
    SMPPClient,
    SMPPException,
    SMPPPartialSubmissionException,
    SMSMessage,
    create_client_config,
    load_config_from_env,
    setup_logging,
)

logger = logging.getLogger(__name__)


class SMSClient:
    """Example SMS sender wrapping SMPPClient."""

    def __init__(self, client: SMPPClient):
        self.client = client

    async def connect_and_bind(self) -> None:
        await self.client.connect()
        logger.info(f'✅ Bound to {self.client.host}:{self.client.port}')

    async def send_sms(
        self, source: str, destination: str, text: str, unicode: bool = False
    ) -> str:
        message = SMSMessage.from_text(
            source, destination, text, unicode=unicode, request_delivery_report=True
        )
        message_id = await self.client.send_segmented(message)
        logger.info(f'📤 Sent to {destination}, message_id={message_id}')
        return message_id

    async def disconnect(self) -> None:
        await self.client.disconnect()
        logger.info('👋 Disconnected')


def load_config():
    if os.getenv('SMPP_HOST'):
        return load_config_from_env()
    return create_client_config(
        host='localhost', port=2775, system_id='test_client', password='password'
    )


async def main() -> int:
    config = load_config()
    setup_logging(config.logging)

    sender = SMSClient(SMPPClient.from_config(config))

    try:
        await sender.connect_and_bind()
    except SMPPException as e:
        logger.error(f'❌ Could not bind: {e}')
        return 1

    try:
        await sender.send_sms('12345', '15551234567', 'Hello from smpptx!')
        await sender.send_sms('12345', '15551234567', 'Long message. ' * 30)
        await sender.send_sms('12345', '15551234567', 'Привет, мир!', unicode=True)
    except SMPPPartialSubmissionException as e:
        logger.error(
            f'❌ Segmented send stopped at part {e.part_number}/{e.total_parts}: {e}'
        )
    except SMPPException as e:
        logger.error(f'❌ Send failed: {e}')
    finally:
        try:
            await sender.disconnect()
        except SMPPException as e:
            logger.warning(f'Unbind did not complete cleanly: {e}')

    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
