"""
Source transaction hash lookup against the Wormscan indexer.

Wormscan lags behind chain finality, so a VAA that was just signed is often
not indexed yet. The resolver absorbs that delay with a small number of
attempts and a linear backoff, and reports failure as an empty hash.
"""

import asyncio
import logging
from typing import Any

import httpx

from .chains import is_evm_chain
from .exceptions import IndexerError, IndexerServerError, IndexerUnavailableError, NotIndexedYetError
from .models import MessageId

logger = logging.getLogger(__name__)


class HashResolver:
    """Fetches the source transaction hash of a VAA from Wormscan."""

    BACKOFF_STEP: float = 0.2  # seconds
    DEFAULT_TIMEOUT: float = 10.0  # seconds

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            timeout: Per-request HTTP timeout in seconds
            transport: Optional httpx transport (custom routing or tests)
        """
        self.timeout = timeout
        self.transport = transport

    @staticmethod
    def build_url(base_endpoint: str, message_id: MessageId) -> str:
        return (
            f"{base_endpoint.rstrip('/')}/api/v1/vaas/{message_id.emitter_chain}/"
            f"{message_id.emitter_address_hex}/{message_id.sequence}"
        )

    @classmethod
    def backoff_delay(cls, attempt: int) -> float:
        """Delay after failed attempt ``attempt`` (0-indexed): 0.2s, 0.4s, 0.6s, ..."""
        return (attempt + 1) * cls.BACKOFF_STEP

    @staticmethod
    def normalize(emitter_chain: int, tx_hash: str) -> str:
        """Prefix EVM transaction hashes with 0x, leave every other chain alone."""
        if tx_hash and is_evm_chain(emitter_chain) and not tx_hash.startswith("0x"):
            return f"0x{tx_hash}"
        return tx_hash

    async def resolve(
        self,
        message_id: MessageId,
        attempts: int,
        base_endpoint: str | None,
        log: logging.Logger | None = None,
    ) -> str:
        """
        Resolve the source transaction hash of a VAA.

        At least one request is made, even when ``attempts`` is zero or
        negative. Not-indexed, server and transport failures (including an
        unusable endpoint URL) are logged and retried, never raised.

        The backoff sleep only happens between attempts: a failed final
        attempt returns immediately instead of sleeping once more, so the
        worst-case added delay is the sum of (k + 1) * 0.2s for k < attempts - 1.

        Args:
            message_id: VAA to look up
            attempts: Maximum number of requests
            base_endpoint: Wormscan base URL, None when the environment has no indexer
            log: Logger to report to (defaults to the module logger)

        Returns:
            The normalized transaction hash, or an empty string if not found
        """
        log = log or logger
        max_attempts = max(attempts, 1)
        tx_hash = ""

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            for attempt in range(max_attempts):
                try:
                    tx_hash = await self._fetch_once(client, message_id, base_endpoint)
                except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError,
                        ValueError, IndexerError) as e:
                    log.error(
                        f"could not obtain txHash, attempt: {attempt} of {attempts}. {e}"
                    )
                    tx_hash = ""

                if tx_hash:
                    break

                if attempt + 1 < max_attempts:
                    await asyncio.sleep(self.backoff_delay(attempt))

        tx_hash = self.normalize(message_id.emitter_chain, tx_hash)
        log.debug(f"Source Transaction Hash: {tx_hash or 'Not Found'}")
        return tx_hash

    async def _fetch_once(
        self,
        client: httpx.AsyncClient,
        message_id: MessageId,
        base_endpoint: str | None,
    ) -> str:
        """Issue a single lookup, returns an empty string if the body has no hash."""
        if not base_endpoint:
            raise IndexerUnavailableError("No Wormscan endpoint configured")

        response = await client.get(self.build_url(base_endpoint, message_id))

        if response.status_code == 404:
            raise NotIndexedYetError("Not found yet.")
        if response.status_code > 500:
            raise IndexerServerError(response.status_code)

        return self._extract_tx_hash(response.json())

    @staticmethod
    def _extract_tx_hash(body: Any) -> str:
        match body:
            case {"data": {"txHash": str() as tx_hash}}:
                return tx_hash
            case _:
                return ""
