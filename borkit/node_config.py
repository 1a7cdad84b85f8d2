"""Node configuration and network selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from urllib.parse import urlparse

MAINNET_CHAIN_ID = 137
AMOY_CHAIN_ID = 80002

DEFAULT_HEIMDALL_URL = "http://localhost:1317"


class BorNetwork(enum.Enum):
    """Which Bor network to run on."""

    MAINNET = "mainnet"
    AMOY = "amoy"


@dataclass
class BorNodeConfig:
    """Configuration for a Bor node."""

    network: BorNetwork
    heimdall_url: str
    data_dir: str
    rpc_addr: str = "127.0.0.1"
    rpc_port: int = 8545
    p2p_port: int = 30303

    def __post_init__(self) -> None:
        parsed = urlparse(self.heimdall_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"invalid Heimdall URL: {self.heimdall_url!r}")
        for name in ("rpc_port", "p2p_port"):
            port = getattr(self, name)
            if not 0 <= port <= 0xFFFF:
                raise ValueError(f"{name} out of range: {port}")

    @classmethod
    def mainnet(cls) -> "BorNodeConfig":
        """Defaults for Polygon PoS mainnet."""
        return cls(
            network=BorNetwork.MAINNET,
            heimdall_url=DEFAULT_HEIMDALL_URL,
            data_dir="~/.boreth",
        )

    @classmethod
    def amoy(cls) -> "BorNodeConfig":
        """Defaults for the Amoy testnet."""
        return cls(
            network=BorNetwork.AMOY,
            heimdall_url=DEFAULT_HEIMDALL_URL,
            data_dir="~/.boreth-amoy",
        )

    def chain_id(self) -> int:
        """Chain ID of the configured network."""
        if self.network is BorNetwork.MAINNET:
            return MAINNET_CHAIN_ID
        return AMOY_CHAIN_ID