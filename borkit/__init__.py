"""Bor chain types, system calls, boundary planning, payload building and RPC helpers."""

__version__ = "0.1.0"

__all__ = [
    "executor",
    "node_config",
    "payload",
    "primitives",
    "rpc_methods",
    "rpc_types",
    "system_call",
]