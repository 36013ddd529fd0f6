"""Shared fixtures for the source transaction stage tests."""

from unittest.mock import AsyncMock, patch

import pytest

from source_tx_relayer.models import MessageId

from helpers import ETH_TOKEN_BRIDGE, SOLANA_EMITTER


@pytest.fixture
def evm_message_id():
    """A VAA emitted by the Ethereum token bridge."""
    return MessageId(
        emitter_chain=2,
        emitter_address=bytes.fromhex(ETH_TOKEN_BRIDGE),
        sequence=12345,
    )


@pytest.fixture
def solana_message_id():
    """A VAA emitted on Solana (non-EVM)."""
    return MessageId(
        emitter_chain=1,
        emitter_address=bytes.fromhex(SOLANA_EMITTER),
        sequence=777,
    )


@pytest.fixture
def mock_sleep():
    """Replace the resolver's backoff sleep so tests run instantly."""
    with patch("source_tx_relayer.hash_resolver.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep
