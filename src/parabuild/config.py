from __future__ import annotations

import os

MANIFEST_NAME = "Cargo.toml"
DEFAULT_NODE_DIR = "node"

DEFAULT_PLAIN_CHAIN_SPEC = "plain-parachain-chainspec.json"
DEFAULT_RAW_CHAIN_SPEC = "raw-parachain-chainspec.json"
WASM_FILE_TEMPLATE = "para-{para_id}-wasm"
GENESIS_FILE_TEMPLATE = "para-{para_id}-genesis-state"

# Dependencies that mark a manifest as a parachain project.
PARACHAIN_DEPENDENCIES = (
    "cumulus-client-collator",
    "cumulus-primitives-core",
    "parachains-common",
    "polkadot-sdk",
)

MAX_PARA_ID = 2**32 - 1


def cargo_program() -> str:
    return os.environ.get("PARABUILD_CARGO", "").strip() or "cargo"


def wasm_file_name(para_id: int) -> str:
    return WASM_FILE_TEMPLATE.format(para_id=para_id)


def genesis_file_name(para_id: int) -> str:
    return GENESIS_FILE_TEMPLATE.format(para_id=para_id)
