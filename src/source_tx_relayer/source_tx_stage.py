"""
Source transaction pipeline stage.

This module contains the stage the host pipeline invokes once per VAA. It
looks the VAA up in the dedup cache, falls back to the Wormscan resolver on a
miss, stores the result on the processing context and always hands control
to the next stage.
"""

import logging
from collections.abc import Awaitable, Callable

from .chains import chain_name
from .config import SourceTxConfig, SourceTxOptions
from .dedup_cache import DedupCache
from .hash_resolver import HashResolver
from .models import Environment, ProcessingContext

logger = logging.getLogger(__name__)

Next = Callable[[], Awaitable[None]]


class SourceTxStage:
    """
    Enriches each processing context with its source transaction hash.

    Resolution is best effort: a VAA the indexer cannot provide gets an empty
    ``source_tx_hash`` and processing continues downstream.
    """

    def __init__(
        self,
        config: SourceTxConfig | None = None,
        options: SourceTxOptions | None = None,
        resolver: HashResolver | None = None,
        cache: DedupCache | None = None,
    ) -> None:
        """
        Initialize the stage.

        Args:
            config: Fully resolved configuration. When omitted, the configuration
                is resolved once from the environment of the first context seen.
            options: Explicit overrides applied over the environment defaults
                during that lazy resolution
            resolver: Hash resolver (a default one is built from the config otherwise)
            cache: Dedup cache (a fresh 100-entry cache otherwise)
        """
        self.config = config
        self.options = options
        self._resolver = resolver
        self.cache = cache if cache is not None else DedupCache()

        self.cache_hits = 0
        self.cache_misses = 0
        self.resolved = 0
        self.unresolved = 0

    @classmethod
    def for_environment(
        cls,
        env: Environment | str,
        options: SourceTxOptions | None = None,
    ) -> "SourceTxStage":
        """Create a stage whose configuration is fixed up front for ``env``."""
        return cls(config=SourceTxConfig.for_environment(env, options))

    @classmethod
    def from_env(cls) -> "SourceTxStage":
        """
        Create a stage from environment variables.

        Raises:
            ValueError: If the environment variables hold invalid values
        """
        config = SourceTxConfig.from_env()
        config.log_config()
        return cls(config=config)

    @property
    def resolver(self) -> HashResolver:
        if self._resolver is None:
            timeout = self.config.request_timeout if self.config else HashResolver.DEFAULT_TIMEOUT
            self._resolver = HashResolver(timeout=timeout)
        return self._resolver

    def _ensure_config(self, env: Environment) -> SourceTxConfig:
        # The first context's environment decides for the stage's whole lifetime.
        if self.config is None:
            self.config = SourceTxConfig.for_environment(env, self.options)
            logger.info(
                f"Source tx stage configured for {Environment(env).value}: "
                f"endpoint={self.config.wormscan_endpoint} retries={self.config.retries}"
            )
        return self.config

    async def __call__(self, ctx: ProcessingContext, next: Next) -> None:
        """
        Resolve ``ctx.source_tx_hash`` and invoke the next stage.

        Args:
            ctx: Processing context of the current VAA
            next: Continuation running the downstream stages
        """
        ctx.source_tx_hash = await self._lookup(ctx)
        await next()

    async def _lookup(self, ctx: ProcessingContext) -> str:
        log = ctx.logger or logger
        try:
            config = self._ensure_config(ctx.env)
            vaa_id = ctx.vaa.cache_key

            if cached := self.cache.get(vaa_id):
                self.cache_hits += 1
                log.debug(f"Already fetched tx hash: {cached}")
                return cached

            self.cache_misses += 1
            if log.isEnabledFor(logging.DEBUG):
                log.debug(
                    f"Fetching tx hash for {ctx.vaa} "
                    f"({chain_name(ctx.vaa.emitter_chain)} emitter {ctx.vaa.native_emitter_address})..."
                )
            tx_hash = await self.resolver.resolve(
                ctx.vaa,
                config.retries,
                config.wormscan_endpoint,
                log,
            )
        except Exception as e:
            log.error(f"Unexpected error resolving source tx hash: {e}", exc_info=True)
            self.unresolved += 1
            return ""

        if not tx_hash:
            self.unresolved += 1
            log.debug("Could not retrieve tx hash.")
            return ""

        # TODO: gate caching on the VAA consistency level once finality rules are defined per chain
        self.cache.set(vaa_id, tx_hash)
        self.resolved += 1
        log.debug(f"Retrieved tx hash: {tx_hash}")
        return tx_hash

    def get_stats(self) -> dict:
        """
        Get current stage statistics.

        Returns:
            Dictionary with cache and resolution counters
        """
        return {
            **self.cache.get_stats(),
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'resolved': self.resolved,
            'unresolved': self.unresolved,
        }
