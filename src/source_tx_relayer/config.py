"""
Configuration module for the source transaction stage.

Each Wormhole environment has its own Wormscan endpoint and retry budget.
Hosts may override any of these, either explicitly through SourceTxOptions
or through environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlparse

from .models import Environment

logger = logging.getLogger(__name__)

WORMSCAN_ENDPOINTS: dict[Environment, str | None] = {
    Environment.MAINNET: "https://api.wormscan.io",
    Environment.TESTNET: "https://api.testnet.wormscan.io",
    Environment.DEVNET: None,
}

DEFAULT_REQUEST_TIMEOUT = 10.0  # seconds

DEFAULT_RETRIES: dict[Environment, int] = {
    Environment.MAINNET: 5,
    Environment.TESTNET: 3,
    Environment.DEVNET: 3,
}


@dataclass(frozen=True, slots=True)
class SourceTxOptions:
    """Explicit overrides supplied by the host.

    A field left as None falls back to the environment default.
    """
    wormscan_endpoint: str | None = None
    retries: int | None = None
    request_timeout: float | None = None


@dataclass(frozen=True, slots=True)
class SourceTxConfig:
    """Resolved configuration for one stage instance.

    Attributes:
        wormscan_endpoint: Base URL of the indexer, None disables lookups
        retries: Maximum fetch attempts per message (at least one is always made)
        request_timeout: Per-request HTTP timeout in seconds
    """

    wormscan_endpoint: str | None
    retries: int
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    ALLOWED_SCHEMES: ClassVar[tuple[str, ...]] = ("http", "https")

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.wormscan_endpoint is not None:
            parsed = urlparse(self.wormscan_endpoint)
            if parsed.scheme not in self.ALLOWED_SCHEMES or not parsed.netloc:
                raise ValueError(
                    f"Invalid Wormscan endpoint: {self.wormscan_endpoint}. "
                    "Expected an http or https URL"
                )
            try:
                parsed.port
            except ValueError:
                raise ValueError(
                    f"Invalid Wormscan endpoint port: {self.wormscan_endpoint}"
                ) from None

        if self.request_timeout <= 0:
            raise ValueError(f"Request timeout must be positive, got {self.request_timeout}")

    @classmethod
    def for_environment(
        cls,
        env: Environment | str,
        overrides: SourceTxOptions | None = None,
    ) -> "SourceTxConfig":
        """
        Merge explicit overrides over the defaults of an environment.

        Args:
            env: Environment whose defaults are used
            overrides: Explicit options, these take precedence

        Returns:
            SourceTxConfig: Resolved configuration

        Raises:
            ValueError: If the environment is unknown or a value is invalid
        """
        env = Environment(env)
        overrides = overrides or SourceTxOptions()

        endpoint = overrides.wormscan_endpoint
        if endpoint is None:
            endpoint = WORMSCAN_ENDPOINTS[env]

        retries = overrides.retries
        if retries is None:
            retries = DEFAULT_RETRIES[env]

        request_timeout = overrides.request_timeout
        if request_timeout is None:
            request_timeout = DEFAULT_REQUEST_TIMEOUT

        return cls(
            wormscan_endpoint=endpoint,
            retries=retries,
            request_timeout=request_timeout,
        )

    @classmethod
    def from_env(cls) -> "SourceTxConfig":
        """
        Load configuration from environment variables.

        Reads WORMHOLE_ENV (default: testnet), WORMSCAN_ENDPOINT,
        SOURCE_TX_RETRIES and SOURCE_TX_REQUEST_TIMEOUT.

        Returns:
            SourceTxConfig: Configuration for the selected environment

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env_name = os.environ.get("WORMHOLE_ENV", Environment.TESTNET.value).lower()
        try:
            env = Environment(env_name)
        except ValueError:
            raise ValueError(
                f"Unsupported WORMHOLE_ENV: {env_name}. "
                f"Supported: {', '.join(e.value for e in Environment)}"
            ) from None

        return cls.for_environment(env, cls._options_from_env())

    @staticmethod
    def _options_from_env() -> SourceTxOptions:
        endpoint = os.environ.get("WORMSCAN_ENDPOINT") or None

        retries: int | None = None
        if raw_retries := os.environ.get("SOURCE_TX_RETRIES"):
            try:
                retries = int(raw_retries)
            except ValueError:
                raise ValueError(f"SOURCE_TX_RETRIES must be an integer, got {raw_retries!r}") from None

        timeout: float | None = None
        if raw_timeout := os.environ.get("SOURCE_TX_REQUEST_TIMEOUT"):
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"SOURCE_TX_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from None

        return SourceTxOptions(
            wormscan_endpoint=endpoint,
            retries=retries,
            request_timeout=timeout,
        )

    def log_config(self) -> None:
        """Log configuration settings."""
        logger.info("=== Source Tx Stage Configuration ===")
        logger.info(f"  Wormscan endpoint: {self.wormscan_endpoint or '[NOT SET]'}")
        logger.info(f"  Retries: {self.retries}")
        logger.info(f"  Request timeout: {self.request_timeout}s")
