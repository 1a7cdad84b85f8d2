"""Consensus-driven system calls: ``commitSpan`` and ``onStateReceive``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

SYSTEM_ADDRESS = bytes.fromhex("ff" * 19 + "fe")
BOR_VALIDATOR_SET_ADDRESS = (0x1000).to_bytes(20, "big")
STATE_RECEIVER_ADDRESS = (0x1001).to_bytes(20, "big")

# keccak256("commitSpan(uint256,bytes)")[:4]
COMMIT_SPAN_SELECTOR = bytes.fromhex("60cc80d8")
# keccak256("onStateReceive(uint256,bytes)")[:4]
ON_STATE_RECEIVE_SELECTOR = bytes.fromhex("26c53bea")

UINT256_MAX = 2**256 - 1
_WORD = 32


def _check_uint256(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= UINT256_MAX:
        raise ValueError(f"{name} does not fit in uint256: {value}")
    return value


def _word(value: int) -> bytes:
    return value.to_bytes(_WORD, "big")


def _encode_uint256_and_bytes(number: int, payload: bytes) -> bytes:
    """ABI-encode the parameter tuple ``(uint256, bytes)``."""
    padding = b"\x00" * (-len(payload) % _WORD)
    return _word(number) + _word(2 * _WORD) + _word(len(payload)) + payload + padding


@dataclass(frozen=True)
class CommitSpanCall:
    """Call to the validator set contract that commits the next span."""

    span_id: int
    validator_bytes: bytes

    def __post_init__(self) -> None:
        _check_uint256(self.span_id, "span_id")
        object.__setattr__(self, "validator_bytes", bytes(self.validator_bytes))

    def call_data(self) -> bytes:
        """ABI call data for ``commitSpan(uint256,bytes)``."""
        return COMMIT_SPAN_SELECTOR + _encode_uint256_and_bytes(self.span_id, self.validator_bytes)

    @staticmethod
    def to_address() -> bytes:
        return BOR_VALIDATOR_SET_ADDRESS

    @staticmethod
    def caller() -> bytes:
        return SYSTEM_ADDRESS


@dataclass(frozen=True)
class StateReceiveCall:
    """Call to the state receiver contract relaying one state sync event."""

    state_id: int
    data: bytes

    def __post_init__(self) -> None:
        _check_uint256(self.state_id, "state_id")
        object.__setattr__(self, "data", bytes(self.data))

    def call_data(self) -> bytes:
        """ABI call data for ``onStateReceive(uint256,bytes)``."""
        return ON_STATE_RECEIVE_SELECTOR + _encode_uint256_and_bytes(self.state_id, self.data)

    @staticmethod
    def to_address() -> bytes:
        return STATE_RECEIVER_ADDRESS

    @staticmethod
    def caller() -> bytes:
        return SYSTEM_ADDRESS


def prepare_state_sync_calls(events: Iterable[tuple[int, bytes]]) -> list[StateReceiveCall]:
    """Build one ``onStateReceive`` call per event, in the order given."""
    return [StateReceiveCall(state_id, data) for state_id, data in events]