"""Scripted Wormscan responses shared by the resolver and stage tests."""

import httpx

ETH_TOKEN_BRIDGE = "0000000000000000000000003ee18b2214aff97000d974cf647e7c347e8fa585"
SOLANA_EMITTER = "ec7372995d5cc8732397fb0ad35c0121e0eaa90d26f828a534cab54391b3a4f5"


class RecordingIndexer:
    """Scripted Wormscan stand-in for httpx.MockTransport.

    Each request consumes the next scripted reply; the last reply repeats.
    A reply is either an httpx.Response or an exception to raise.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests) - 1, len(self.replies) - 1)
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def found(tx_hash: str) -> httpx.Response:
    return httpx.Response(200, json={"data": {"txHash": tx_hash}})


def not_found() -> httpx.Response:
    return httpx.Response(404, json={"message": "not found"})
