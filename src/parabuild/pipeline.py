"""
PIPELINE ORDER (each stage reads the file the previous one wrote):
1) build-spec             -> plain chain spec (para_id patched)
2) build-spec --raw       -> raw chain spec
3) export-genesis-wasm    -> genesis wasm      (from raw spec)
4) export-genesis-state   -> genesis state     (from raw spec)

No checkpointing: a failure stops the run and leaves earlier outputs on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from . import config
from .chain_spec import (
    check_para_id,
    export_wasm_file,
    generate_genesis_state_file,
    generate_plain_chain_spec,
    generate_raw_chain_spec,
)
from .runner import CommandRunner, default_runner

logger = logging.getLogger(__name__)


@dataclass
class GenesisArtifacts:
    plain_chain_spec: Path
    raw_chain_spec: Path
    wasm: Path
    genesis_state: Path

    def as_dict(self) -> Dict[str, str]:
        return {
            "plain_chain_spec": str(self.plain_chain_spec),
            "raw_chain_spec": str(self.raw_chain_spec),
            "wasm": str(self.wasm),
            "genesis_state": str(self.genesis_state),
        }


def generate_genesis_artifacts(
    binary_path: Union[str, Path],
    out_dir: Union[str, Path],
    para_id: int,
    *,
    plain_name: str = config.DEFAULT_PLAIN_CHAIN_SPEC,
    raw_name: str = config.DEFAULT_RAW_CHAIN_SPEC,
    wasm_name: Optional[str] = None,
    genesis_name: Optional[str] = None,
    strict: bool = False,
    runner: Optional[CommandRunner] = None,
) -> GenesisArtifacts:
    check_para_id(para_id)
    runner = default_runner(runner)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    plain = out_dir / plain_name

    logger.info("=== plain chain spec ===")
    generate_plain_chain_spec(binary_path, plain, para_id, runner=runner)
    logger.info("=== raw chain spec ===")
    raw = generate_raw_chain_spec(binary_path, plain, raw_name, strict=strict, runner=runner)
    logger.info("=== genesis wasm ===")
    wasm = export_wasm_file(
        binary_path, raw, wasm_name or config.wasm_file_name(para_id), strict=strict, runner=runner
    )
    logger.info("=== genesis state ===")
    genesis = generate_genesis_state_file(
        binary_path, raw, genesis_name or config.genesis_file_name(para_id), strict=strict, runner=runner
    )
    logger.info("genesis artifacts complete for para %d", para_id)
    return GenesisArtifacts(plain_chain_spec=plain, raw_chain_spec=raw, wasm=wasm, genesis_state=genesis)
