__all__ = ['build', 'chain_spec', 'config', 'errors', 'manifest', 'pipeline', 'profile', 'runner']

from .errors import (
    BuildDiagnostic, ParachainError, MissingBinary, MissingChainSpec,
    InvalidChainSpec, MissingCommand, ManifestError,
)
from .runner import CommandRunner, CmdResult, CommandError, DISCARD

from .profile import Profile
from .manifest import Manifest, from_path

from .build import build_parachain, binary_path, is_supported
from .chain_spec import (
    check_command_exists, generate_plain_chain_spec, generate_raw_chain_spec,
    export_wasm_file, generate_genesis_state_file, get_parachain_id, replace_para_id,
)
from .pipeline import GenesisArtifacts, generate_genesis_artifacts
