"""Response types and the interface of the ``bor_*`` RPC namespace."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from borkit.primitives import _address_from_hex, _address_to_hex, _field, _int_field

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U256_MAX = 2**256 - 1
_HASH_LENGTH = 32


def _hash_to_hex(value: bytes) -> str:
    return "0x" + bytes(value).hex()


def _hash_from_hex(text: Any, name: str) -> bytes:
    if not isinstance(text, str):
        raise ValueError(f"{name} must be a hex string")
    body = text[2:] if text[:2].lower() == "0x" else text
    if len(body) != _HASH_LENGTH * 2:
        raise ValueError(f"{name} must hold {_HASH_LENGTH * 2} hex digits")
    try:
        return bytes.fromhex(body)
    except ValueError as exc:
        raise ValueError(f"{name} is not valid hex: {text!r}") from exc


def _check_hash(value: Any, name: str) -> bytes:
    raw = bytes(value)
    if len(raw) != _HASH_LENGTH:
        raise ValueError(f"{name} must be {_HASH_LENGTH} bytes, got {len(raw)}")
    return raw


def _check_u256(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if not 0 <= value <= _U256_MAX:
        raise ValueError(f"{name} does not fit in uint256: {value}")
    return value


def _u256_from_json(value: Any, name: str) -> int:
    if isinstance(value, str):
        try:
            number = int(value, 16) if value[:2].lower() == "0x" else int(value, 10)
        except ValueError as exc:
            raise ValueError(f"{name} is not a number: {value!r}") from exc
        return _check_u256(number, name)
    return _check_u256(value, name)


@dataclass
class ValidatorInfo:
    """Validator details as returned over RPC."""

    address: bytes
    voting_power: int
    proposer_priority: int

    def __post_init__(self) -> None:
        self.address = bytes(self.address)
        if len(self.address) != 20:
            raise ValueError(f"address must be 20 bytes, got {len(self.address)}")

    def to_dict(self) -> dict:
        return {
            "address": _address_to_hex(self.address),
            "votingPower": self.voting_power,
            "proposerPriority": self.proposer_priority,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ValidatorInfo":
        return cls(
            address=_address_from_hex(_field(data, "address"), "address"),
            voting_power=_int_field(data, "votingPower", _I64_MIN, _I64_MAX),
            proposer_priority=_int_field(data, "proposerPriority", _I64_MIN, _I64_MAX),
        )


def _validator_list(data: dict, key: str) -> list[ValidatorInfo]:
    items = _field(data, key)
    if not isinstance(items, list):
        raise ValueError(f"field `{key}` must be a list")
    return [ValidatorInfo.from_dict(item) for item in items]


@dataclass
class BorSnapshotResponse:
    """Result of ``bor_getSnapshot`` and ``bor_getSnapshotAtHash``."""

    number: int
    hash: bytes
    validator_set: list[ValidatorInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.hash = _check_hash(self.hash, "hash")

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "hash": _hash_to_hex(self.hash),
            "validatorSet": [v.to_dict() for v in self.validator_set],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BorSnapshotResponse":
        return cls(
            number=_int_field(data, "number", 0, _U64_MAX),
            hash=_hash_from_hex(_field(data, "hash"), "hash"),
            validator_set=_validator_list(data, "validatorSet"),
        )


@dataclass
class CurrentValidatorsResponse:
    """Result of ``bor_getCurrentValidators``."""

    validators: list[ValidatorInfo] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"validators": [v.to_dict() for v in self.validators]}

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentValidatorsResponse":
        return cls(validators=_validator_list(data, "validators"))


@dataclass
class BorReceiptResponse:
    """One receipt returned by ``bor_getTransactionReceiptsByBlock``."""

    tx_hash: bytes
    block_number: int
    block_hash: bytes
    cumulative_gas_used: int
    gas_used: int
    is_bor_tx: bool
    status: int

    def __post_init__(self) -> None:
        self.tx_hash = _check_hash(self.tx_hash, "tx_hash")
        self.block_hash = _check_hash(self.block_hash, "block_hash")
        _check_u256(self.cumulative_gas_used, "cumulative_gas_used")
        _check_u256(self.gas_used, "gas_used")

    def to_dict(self) -> dict:
        return {
            "txHash": _hash_to_hex(self.tx_hash),
            "blockNumber": self.block_number,
            "blockHash": _hash_to_hex(self.block_hash),
            "cumulativeGasUsed": hex(self.cumulative_gas_used),
            "gasUsed": hex(self.gas_used),
            "isBorTx": self.is_bor_tx,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BorReceiptResponse":
        is_bor_tx = _field(data, "isBorTx")
        if not isinstance(is_bor_tx, bool):
            raise ValueError("field `isBorTx` must be a boolean")
        return cls(
            tx_hash=_hash_from_hex(_field(data, "txHash"), "txHash"),
            block_number=_int_field(data, "blockNumber", 0, _U64_MAX),
            block_hash=_hash_from_hex(_field(data, "blockHash"), "blockHash"),
            cumulative_gas_used=_u256_from_json(
                _field(data, "cumulativeGasUsed"), "cumulativeGasUsed"
            ),
            gas_used=_u256_from_json(_field(data, "gasUsed"), "gasUsed"),
            is_bor_tx=is_bor_tx,
            status=_int_field(data, "status", 0, _U64_MAX),
        )


class BorApi(ABC):
    """The ``bor_*`` RPC namespace.

    Implementations raise :class:`borkit.rpc_methods.BorRpcError` on failure.
    """

    @abstractmethod
    def bor_get_snapshot(self, block_number: int) -> BorSnapshotResponse:
        """Snapshot at a block number."""

    @abstractmethod
    def bor_get_snapshot_at_hash(self, block_hash: bytes) -> BorSnapshotResponse:
        """Snapshot at a block hash."""

    @abstractmethod
    def bor_get_current_validators(self) -> CurrentValidatorsResponse:
        """The current validator set."""

    @abstractmethod
    def bor_get_current_proposer(self) -> bytes:
        """Address of the current proposer."""

    @abstractmethod
    def bor_get_root_hash(self, start: int, end: int) -> bytes:
        """Root hash over the blocks from ``start`` to ``end``."""

    @abstractmethod
    def bor_get_author(self, block_number: int) -> bytes:
        """Block signer recovered from the seal; the coinbase is always zero."""

    @abstractmethod
    def bor_get_transaction_receipts_by_block(
        self, block_number: int
    ) -> list[BorReceiptResponse]:
        """Receipts of a block, with the Bor receipt merged in."""