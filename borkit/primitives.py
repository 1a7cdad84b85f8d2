"""Core Bor chain types: validators, validator sets and spans."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from Crypto.Hash import keccak

ADDRESS_LENGTH = 20

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def _checked_address(value: Any, name: str) -> bytes:
    try:
        raw = bytes(value)
    except TypeError as exc:
        raise ValueError(f"{name} must be bytes, got {type(value).__name__}") from exc
    if len(raw) != ADDRESS_LENGTH:
        raise ValueError(f"{name} must be {ADDRESS_LENGTH} bytes, got {len(raw)}")
    return raw


def _address_to_hex(address: bytes) -> str:
    """Render an address as an EIP-55 checksummed hex string."""
    lower = address.hex()
    digest = _keccak256(lower.encode("ascii")).hex()
    checksummed = "".join(
        char.upper() if char.isalpha() and int(nibble, 16) >= 8 else char
        for char, nibble in zip(lower, digest)
    )
    return "0x" + checksummed


def _address_from_hex(text: Any, name: str) -> bytes:
    if not isinstance(text, str):
        raise ValueError(f"{name} must be a hex string")
    body = text[2:] if text[:2].lower() == "0x" else text
    if len(body) != ADDRESS_LENGTH * 2:
        raise ValueError(f"{name} must hold {ADDRESS_LENGTH * 2} hex digits")
    try:
        return bytes.fromhex(body)
    except ValueError as exc:
        raise ValueError(f"{name} is not valid hex: {text!r}") from exc


def _field(data: dict, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _int_field(data: dict, key: str, low: int, high: int) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer")
    if not low <= value <= high:
        raise ValueError(f"field `{key}` out of range: {value}")
    return value


@dataclass
class Validator:
    """A Bor validator."""

    id: int
    address: bytes
    voting_power: int
    signer: bytes
    proposer_priority: int

    def __post_init__(self) -> None:
        self.address = _checked_address(self.address, "address")
        self.signer = _checked_address(self.signer, "signer")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "address": _address_to_hex(self.address),
            "voting_power": self.voting_power,
            "signer": _address_to_hex(self.signer),
            "proposer_priority": self.proposer_priority,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Validator":
        return cls(
            id=_int_field(data, "id", 0, _U64_MAX),
            address=_address_from_hex(_field(data, "address"), "address"),
            voting_power=_int_field(data, "voting_power", _I64_MIN, _I64_MAX),
            signer=_address_from_hex(_field(data, "signer"), "signer"),
            proposer_priority=_int_field(data, "proposer_priority", _I64_MIN, _I64_MAX),
        )


@dataclass
class ValidatorSet:
    """A set of validators with an optional proposer."""

    validators: list[Validator] = field(default_factory=list)
    proposer: Optional[Validator] = None

    def to_dict(self) -> dict:
        return {
            "validators": [v.to_dict() for v in self.validators],
            "proposer": self.proposer.to_dict() if self.proposer is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ValidatorSet":
        validators = _field(data, "validators")
        if not isinstance(validators, list):
            raise ValueError("field `validators` must be a list")
        proposer = data.get("proposer")
        return cls(
            validators=[Validator.from_dict(v) for v in validators],
            proposer=Validator.from_dict(proposer) if proposer is not None else None,
        )


@dataclass
class Span:
    """A range of blocks together with the validator set that produces them."""

    id: int
    start_block: int
    end_block: int
    validator_set: ValidatorSet
    selected_producers: list[Validator]
    bor_chain_id: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "start_block": self.start_block,
            "end_block": self.end_block,
            "validator_set": self.validator_set.to_dict(),
            "selected_producers": [v.to_dict() for v in self.selected_producers],
            "bor_chain_id": self.bor_chain_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Span":
        producers = _field(data, "selected_producers")
        if not isinstance(producers, list):
            raise ValueError("field `selected_producers` must be a list")
        chain_id = _field(data, "bor_chain_id")
        if not isinstance(chain_id, str):
            raise ValueError("field `bor_chain_id` must be a string")
        return cls(
            id=_int_field(data, "id", 0, _U64_MAX),
            start_block=_int_field(data, "start_block", 0, _U64_MAX),
            end_block=_int_field(data, "end_block", 0, _U64_MAX),
            validator_set=ValidatorSet.from_dict(_field(data, "validator_set")),
            selected_producers=[Validator.from_dict(v) for v in producers],
            bor_chain_id=chain_id,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "Span":
        return cls.from_dict(json.loads(text))


def span_id_at(block: int, span_size: int) -> int:
    """Return the span ID containing ``block``."""
    return block // span_size


def encode_validator_bytes(validators: Iterable[Validator]) -> bytes:
    """Concatenate the 20-byte signer addresses of ``validators``."""
    return b"".join(v.signer for v in validators)


def decode_validator_bytes(data: bytes) -> list[bytes]:
    """Split ``data`` into 20-byte addresses, ignoring any trailing remainder."""
    whole = len(data) - len(data) % ADDRESS_LENGTH
    return [bytes(data[i : i + ADDRESS_LENGTH]) for i in range(0, whole, ADDRESS_LENGTH)]