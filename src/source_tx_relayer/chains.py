"""
Wormhole chain identifiers.

Only the chains the relayer needs to reason about are listed here. The
EVM-family set decides whether an indexed transaction hash gets a ``0x``
prefix.
"""

from enum import IntEnum


class ChainId(IntEnum):
    """Wormhole chain ids (not EVM chain ids)."""
    SOLANA = 1
    ETHEREUM = 2
    TERRA = 3
    BSC = 4
    POLYGON = 5
    AVALANCHE = 6
    OASIS = 7
    ALGORAND = 8
    AURORA = 9
    FANTOM = 10
    KARURA = 11
    ACALA = 12
    KLAYTN = 13
    CELO = 14
    NEAR = 15
    MOONBEAM = 16
    NEON = 17
    TERRA2 = 18
    INJECTIVE = 19
    OSMOSIS = 20
    SUI = 21
    APTOS = 22
    ARBITRUM = 23
    OPTIMISM = 24
    GNOSIS = 25
    PYTHNET = 26
    XPLA = 28
    BTC = 29
    BASE = 30
    SEI = 32
    WORMCHAIN = 3104
    SEPOLIA = 10002
    ARBITRUM_SEPOLIA = 10003
    BASE_SEPOLIA = 10004
    OPTIMISM_SEPOLIA = 10005
    HOLESKY = 10006
    POLYGON_SEPOLIA = 10007


EVM_CHAINS: frozenset[int] = frozenset({
    ChainId.ETHEREUM,
    ChainId.BSC,
    ChainId.POLYGON,
    ChainId.AVALANCHE,
    ChainId.OASIS,
    ChainId.AURORA,
    ChainId.FANTOM,
    ChainId.KARURA,
    ChainId.ACALA,
    ChainId.KLAYTN,
    ChainId.CELO,
    ChainId.MOONBEAM,
    ChainId.NEON,
    ChainId.ARBITRUM,
    ChainId.OPTIMISM,
    ChainId.GNOSIS,
    ChainId.BASE,
    ChainId.SEPOLIA,
    ChainId.ARBITRUM_SEPOLIA,
    ChainId.BASE_SEPOLIA,
    ChainId.OPTIMISM_SEPOLIA,
    ChainId.HOLESKY,
    ChainId.POLYGON_SEPOLIA,
})


def is_evm_chain(chain_id: int) -> bool:
    """Return True if the Wormhole chain id belongs to an EVM-family chain."""
    return chain_id in EVM_CHAINS


def chain_name(chain_id: int) -> str:
    """Human readable chain name for log lines, falls back to the raw id."""
    try:
        return ChainId(chain_id).name.lower()
    except ValueError:
        return str(chain_id)
