"""
Source transaction relayer stage.

Resolves the source transaction hash of Wormhole VAAs through the Wormscan
indexer, for use as one stage of a relayer pipeline.
"""

from .config import SourceTxConfig, SourceTxOptions
from .dedup_cache import DedupCache
from .hash_resolver import HashResolver
from .models import Environment, MessageId, ProcessingContext
from .source_tx_stage import SourceTxStage

__all__ = [
    "DedupCache",
    "Environment",
    "HashResolver",
    "MessageId",
    "ProcessingContext",
    "SourceTxConfig",
    "SourceTxOptions",
    "SourceTxStage",
]
__version__ = "0.1.0"
