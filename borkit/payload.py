"""Payload building: user transactions followed by boundary system transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from borkit.executor import SystemCallRecord, execute_system_tx_plan, plan_system_txs


@dataclass
class PayloadConfig:
    """Parameters for building one block payload."""

    block_number: int
    gas_limit: int
    sprint_size: int
    span_size: int
    producer: bytes
    timestamp: int
    has_pending_span: bool = False
    pending_span_id: Optional[int] = None
    pending_validator_bytes: Optional[bytes] = None
    pending_state_sync_events: list[tuple[int, bytes]] = field(default_factory=list)


@dataclass
class PayloadTx:
    """A transaction included in a payload."""

    data: bytes
    gas_used: int
    is_system_tx: bool = False


@dataclass
class BuiltPayload:
    """A payload ready for sealing."""

    block_number: int
    transactions: list[PayloadTx]
    total_gas_used: int
    system_calls: list[SystemCallRecord]
    commit_span_executed: bool
    state_sync_count: int


def build_payload(config: PayloadConfig, user_txs: Iterable[PayloadTx]) -> BuiltPayload:
    """Build a payload from ``config`` and candidate user transactions.

    User transactions are taken in order until the next one would exceed the
    gas limit; system transactions (which use no gas) are appended after them.
    """
    transactions: list[PayloadTx] = []
    total_gas_used = 0

    for tx in user_txs:
        if total_gas_used + tx.gas_used > config.gas_limit:
            break
        total_gas_used += tx.gas_used
        transactions.append(tx)

    plan = plan_system_txs(
        config.block_number,
        config.sprint_size,
        config.span_size,
        config.has_pending_span,
        config.pending_state_sync_events,
    )
    result = execute_system_tx_plan(
        plan, config.pending_span_id, config.pending_validator_bytes
    )

    transactions.extend(
        PayloadTx(data=call.data, gas_used=0, is_system_tx=True)
        for call in result.system_calls
    )

    return BuiltPayload(
        block_number=config.block_number,
        transactions=transactions,
        total_gas_used=total_gas_used,
        system_calls=result.system_calls,
        commit_span_executed=result.commit_span_executed,
        state_sync_count=result.state_sync_count,
    )