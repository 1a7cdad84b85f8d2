"""Planning and recording of the system transactions run at block boundaries.

Order matters for state roots: user transactions first, then ``commitSpan``
at span boundaries, then ``onStateReceive`` at sprint boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from borkit.system_call import CommitSpanCall, prepare_state_sync_calls


@dataclass(frozen=True)
class SystemCallRecord:
    """One executed system call."""

    to: bytes
    caller: bytes
    data: bytes


@dataclass
class SystemTxPlan:
    """Which system transactions a block must run."""

    execute_commit_span: bool
    state_sync_events: list[tuple[int, bytes]] = field(default_factory=list)


@dataclass
class SystemTxResult:
    """Outcome of running a block's system transactions."""

    commit_span_executed: bool = False
    state_sync_count: int = 0
    system_calls: list[SystemCallRecord] = field(default_factory=list)


def plan_system_txs(
    block_number: int,
    sprint_size: int,
    span_size: int,
    has_pending_span: bool,
    pending_state_sync_events: Iterable[tuple[int, bytes]],
) -> SystemTxPlan:
    """Decide which system transactions block ``block_number`` runs.

    Block 0 is never a boundary.
    """
    is_sprint_boundary = block_number > 0 and block_number % sprint_size == 0
    is_span_boundary = block_number > 0 and block_number % span_size == 0
    return SystemTxPlan(
        execute_commit_span=is_span_boundary and has_pending_span,
        state_sync_events=list(pending_state_sync_events) if is_sprint_boundary else [],
    )


def execute_system_tx_plan(
    plan: SystemTxPlan,
    span_id: Optional[int] = None,
    validator_bytes: Optional[bytes] = None,
) -> SystemTxResult:
    """Run ``plan`` and record each system call made.

    ``commitSpan`` is skipped unless both the span ID and validator bytes are given.
    """
    calls: list[SystemCallRecord] = []
    committed = False

    if plan.execute_commit_span and span_id is not None and validator_bytes is not None:
        commit = CommitSpanCall(span_id, validator_bytes)
        calls.append(
            SystemCallRecord(
                to=CommitSpanCall.to_address(),
                caller=CommitSpanCall.caller(),
                data=commit.call_data(),
            )
        )
        committed = True

    state_calls = prepare_state_sync_calls(plan.state_sync_events)
    calls.extend(
        SystemCallRecord(to=call.to_address(), caller=call.caller(), data=call.call_data())
        for call in state_calls
    )

    return SystemTxResult(
        commit_span_executed=committed,
        state_sync_count=len(state_calls),
        system_calls=calls,
    )