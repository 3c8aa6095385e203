from __future__ import annotations
from pathlib import Path
import stat
import sys

import pytest

from parabuild.runner import CmdResult, CommandError, CommandRunner

PLAIN_SPEC = """{
  "name": "Local Testnet",
  "id": "local_testnet",
  "para_id": 1000,
  "genesis": {
    "runtime": {
      "parachainInfo": {
        "parachainId": 1000
      }
    }
  }
}
"""

# Minimal stand-in for a node binary: answers `--help` for the subcommands it
# knows and writes small artifacts for the export commands.
FAKE_NODE = r"""#!/bin/sh
cmd="$1"
shift
for a in "$@"; do
  if [ "$a" = "--help" ]; then
    case "$cmd" in
      build-spec|export-genesis-wasm|export-genesis-state) exit 0 ;;
      *) exit 1 ;;
    esac
  fi
done
case "$cmd" in
  build-spec)
    chain=""
    while [ $# -gt 0 ]; do
      if [ "$1" = "--chain" ]; then shift; chain="$1"; fi
      shift
    done
    if [ -n "$chain" ]; then
      cat "$chain"
    else
      cat <<'EOF'
__PLAIN_SPEC__EOF
    fi
    ;;
  export-genesis-wasm)
    for a in "$@"; do out="$a"; done
    printf '0x0061736d01000000' > "$out"
    ;;
  export-genesis-state)
    for a in "$@"; do out="$a"; done
    printf '0x000000000000' > "$out"
    ;;
  *)
    exit 1
    ;;
esac
""".replace("__PLAIN_SPEC__", PLAIN_SPEC)


class FakeRunner(CommandRunner):
    """Records every call; never spawns a process."""

    def __init__(self, outputs=None, fail=(), fail_run=(), on_run=None):
        self.calls = []
        self.outputs = dict(outputs or {})
        # fail: probe and real call both fail; fail_run: only the non --help call.
        self.fail = set(fail)
        self.fail_run = set(fail_run)
        self.on_run = on_run

    def run(self, program, args, *, cwd=None, stdout=None):
        program = str(program)
        args = [str(a) for a in args]
        self.calls.append((program, args, cwd, stdout))
        key = args[0] if args else ""
        if key in self.fail:
            raise CommandError(program, args, 1)
        if key in self.fail_run and "--help" not in args:
            raise CommandError(program, args, 1)
        if self.on_run is not None:
            self.on_run(program, args, cwd)
        if isinstance(stdout, (str, Path)):
            Path(stdout).write_text(self.outputs.get(key, ""), encoding="utf-8")
        return CmdResult(returncode=0, command=[program, *args])

    def argv(self):
        return [[p, *a] for p, a, _c, _s in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def plain_spec_text():
    return PLAIN_SPEC


@pytest.fixture
def fake_node(tmp_path: Path) -> Path:
    if sys.platform.startswith("win"):
        pytest.skip("fake node binary is a POSIX shell script")
    p = tmp_path / "bin" / "parachain-template-node"
    p.parent.mkdir(parents=True)
    p.write_text(FAKE_NODE, encoding="utf-8")
    p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return p


def write_manifest(project: Path, name: str, deps: str = "", workspace_deps: str | None = None) -> Path:
    project.mkdir(parents=True, exist_ok=True)
    text = f'[package]\nname = "{name}"\nversion = "0.1.0"\nedition = "2021"\n\n[dependencies]\n{deps}\n'
    if workspace_deps is not None:
        text += f"\n[workspace]\nmembers = []\n\n[workspace.dependencies]\n{workspace_deps}\n"
    p = project / "Cargo.toml"
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture
def manifest_writer():
    return write_manifest
