"""
Errors raised while talking to the Wormscan indexer.

These never leave the hash resolver: every one of them is a failed attempt
that feeds the retry loop.
"""


class IndexerError(Exception):
    """Base class for indexer lookup failures."""


class NotIndexedYetError(IndexerError):
    """The indexer has not seen the VAA yet (HTTP 404)."""


class IndexerServerError(IndexerError):
    """The indexer answered with a server failure status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Got: {status_code}")
        self.status_code = status_code


class IndexerUnavailableError(IndexerError):
    """No indexer endpoint is configured for the current environment."""
