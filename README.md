# borkit

Building blocks for working with the Bor proof-of-authority chain: validator
and span types, the consensus system calls (`commitSpan`, `onStateReceive`),
sprint/span boundary planning, payload assembly, RPC response types and the
checkpoint root-hash computation.

## Installation

```
pip install borkit
```

For running the tests:

```
pip install "borkit[test]"
pytest
```

## Validators and spans (`borkit.primitives`)

```python
from borkit.primitives import Validator, encode_validator_bytes, decode_validator_bytes, span_id_at

signer = bytes([0xaa] * 20)
validator = Validator(id=1, address=signer, voting_power=100, signer=signer, proposer_priority=0)

raw = encode_validator_bytes([validator])    # 20 bytes per validator
assert decode_validator_bytes(raw) == [signer]
assert span_id_at(6400, 6400) == 1
```

Addresses are 20-byte `bytes`; a `Validator` with an address or signer of any
other length raises `ValueError`. `decode_validator_bytes` ignores a trailing
remainder shorter than 20 bytes.

`Span`, `ValidatorSet` and `Validator` convert to and from plain dictionaries
with `to_dict` / `from_dict` (addresses are written as checksummed `0x` hex),
and `Span` also offers `to_json` / `from_json`. Missing fields, wrong types and
out-of-range integers raise `ValueError` when reading.

## System calls (`borkit.system_call`)

```python
from borkit.system_call import CommitSpanCall, StateReceiveCall, prepare_state_sync_calls

call = CommitSpanCall(span_id=42, validator_bytes=bytes([0xaa] * 20))
data = call.call_data()          # starts with the selector 0x60cc80d8

calls = prepare_state_sync_calls([(1, b"event1"), (2, b"event2")])
assert [c.state_id for c in calls] == [1, 2]
```

`call_data()` returns the selector followed by the ABI encoding of
`(uint256, bytes)`. `CommitSpanCall.to_address()` is the validator set contract
at `0x…1000`, `StateReceiveCall.to_address()` the state receiver at `0x…1001`,
and both `caller()` methods return `SYSTEM_ADDRESS`
(`0xff…fe`). IDs outside the `uint256` range raise `ValueError`.

## Planning system transactions (`borkit.executor`)

```python
from borkit.executor import plan_system_txs, execute_system_tx_plan

plan = plan_system_txs(6400, 16, 6400, True, [(10, b"sync1")])
result = execute_system_tx_plan(plan, 1, bytes([0xaa] * 20))
assert result.commit_span_executed
assert result.state_sync_count == 1
# result.system_calls: commitSpan first, then one onStateReceive per event
```

State sync events are kept only at sprint boundaries and `commitSpan` is
planned only at span boundaries with a pending span. Block 0 is never a
boundary. `execute_system_tx_plan` skips `commitSpan` unless both the span ID
and the validator bytes are given. Each `SystemCallRecord` holds `to`,
`caller` and `data`.

## Building payloads (`borkit.payload`)

```python
from borkit.payload import PayloadConfig, PayloadTx, build_payload

config = PayloadConfig(
    block_number=16,
    gas_limit=30_000_000,
    sprint_size=16,
    span_size=6400,
    producer=bytes([0xaa] * 20),
    timestamp=1000,
    pending_state_sync_events=[(1, b"sync")],
)
payload = build_payload(config, [PayloadTx(data=b"user_tx", gas_used=21_000)])
assert payload.total_gas_used == 21_000
assert payload.state_sync_count == 1
```

User transactions are taken in order until the next one would exceed the gas
limit; system transactions are appended afterwards with `is_system_tx=True`
and use no gas.

## RPC helpers (`borkit.rpc_methods`, `borkit.rpc_types`)

```python
from borkit.rpc_methods import compute_root_hash, keccak256

h1, h2 = bytes([1] * 32), bytes([2] * 32)
assert compute_root_hash([h1, h2]) == keccak256(h1 + h2)
```

`compute_root_hash` pads the list with zero hashes to the next power of two
and hashes adjacent pairs with Keccak-256 until one root remains. An empty
list gives 32 zero bytes; a single hash is returned as is; a hash that is not
32 bytes raises `ValueError`.

The errors `BlockNotFoundError`, `ExtraDataError` and
`InvalidBlockRangeError` derive from `BorRpcError`.

`borkit.rpc_types` holds `ValidatorInfo`, `BorSnapshotResponse`,
`CurrentValidatorsResponse` and `BorReceiptResponse`, which convert to and
from camelCase dictionaries (gas amounts in receipts are written as hex
strings), and `BorApi`, an abstract base class naming the `bor_*` methods an
implementation must provide.

## Node configuration (`borkit.node_config`)

```python
from borkit.node_config import BorNodeConfig, BorNetwork

config = BorNodeConfig.amoy()
assert config.network is BorNetwork.AMOY
assert config.chain_id() == 80002
assert BorNodeConfig.mainnet().chain_id() == 137
```

Both presets point the Heimdall URL at `http://localhost:1317` and listen for
RPC on `127.0.0.1:8545` and P2P on port 30303. An invalid URL or port raises
`ValueError`.

## What this package does not do

borkit is a library of data types and pure functions. It does not run a node,
connect to peers, talk to Heimdall, serve RPC, execute transactions in an EVM
or store blocks, snapshots or receipts. `execute_system_tx_plan` and
`build_payload` produce call data and records; they do not apply any state
change. `BorApi` only describes the RPC methods; no implementation is
included. There is no command-line program.