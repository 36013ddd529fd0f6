"""
Shared data models for the source transaction stage.

This module contains the message identifier, the processing context handed
over by the host pipeline, and the environment enum.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from web3 import Web3

from .chains import is_evm_chain

EMITTER_ADDRESS_LENGTH = 32
MAX_SEQUENCE = 2**64 - 1


class Environment(str, Enum):
    """Wormhole network the relayer is running against."""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"


@dataclass(frozen=True, slots=True)
class MessageId:
    """Uniquely identifies one VAA.

    Attributes:
        emitter_chain: Wormhole chain id of the emitting chain
        emitter_address: 32-byte universal emitter address
        sequence: Emitter sequence number (uint64)
    """
    emitter_chain: int
    emitter_address: bytes
    sequence: int

    def __post_init__(self) -> None:
        """Validate the identifier fields."""
        if len(self.emitter_address) != EMITTER_ADDRESS_LENGTH:
            raise ValueError(
                f"Emitter address must be {EMITTER_ADDRESS_LENGTH} bytes, "
                f"got {len(self.emitter_address)}"
            )
        if not 0 <= self.sequence <= MAX_SEQUENCE:
            raise ValueError(f"Sequence out of uint64 range: {self.sequence}")
        if self.emitter_chain <= 0:
            raise ValueError(f"Invalid emitter chain: {self.emitter_chain}")

    def __str__(self) -> str:
        return f"{self.emitter_chain}/{self.emitter_address_hex}/{self.sequence}"

    @property
    def emitter_address_hex(self) -> str:
        return self.emitter_address.hex()

    @property
    def cache_key(self) -> str:
        """Stable string form used as the dedup cache key."""
        return f"{self.emitter_chain}-{self.emitter_address_hex}-{self.sequence}"

    @property
    def native_emitter_address(self) -> str:
        """Emitter in the chain's own address format, for log output.

        For EVM-family chains the universal address is the 20-byte contract
        address left-padded with zeros.
        """
        if is_evm_chain(self.emitter_chain):
            return Web3.to_checksum_address("0x" + self.emitter_address[-20:].hex())
        return self.emitter_address_hex

    @classmethod
    def parse(cls, vaa_id: str) -> "MessageId":
        """
        Build a MessageId from a Wormscan VAA id ("chain/emitter/sequence").

        Args:
            vaa_id: VAA id, the emitter may be 0x-prefixed or shorter than 32 bytes

        Returns:
            MessageId: Parsed identifier

        Raises:
            ValueError: If the id is malformed
        """
        parts = vaa_id.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"Expected 'chain/emitter/sequence', got: {vaa_id!r}")

        chain_part, emitter_part, sequence_part = parts
        emitter_hex = emitter_part.removeprefix("0x")
        if len(emitter_hex) > EMITTER_ADDRESS_LENGTH * 2:
            raise ValueError(f"Emitter address too long: {emitter_part}")

        try:
            emitter_address = bytes.fromhex(emitter_hex.rjust(EMITTER_ADDRESS_LENGTH * 2, "0"))
        except ValueError:
            raise ValueError(f"Emitter address is not hex: {emitter_part}") from None

        return cls(
            emitter_chain=int(chain_part),
            emitter_address=emitter_address,
            sequence=int(sequence_part),
        )


@dataclass
class ProcessingContext:
    """Per-message context supplied by the host pipeline.

    The source transaction stage fills in ``source_tx_hash``: a normalized
    hash, or an empty string when the indexer could not provide one.
    """
    vaa: MessageId
    env: Environment
    logger: logging.Logger | None = None
    source_tx_hash: str | None = None
