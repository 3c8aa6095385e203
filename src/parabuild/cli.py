from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .build import build_parachain, is_supported
from .chain_spec import (
    export_wasm_file,
    generate_genesis_state_file,
    generate_plain_chain_spec,
    generate_raw_chain_spec,
)
from .errors import BuildDiagnostic, ParachainError
from .pipeline import generate_genesis_artifacts
from .profile import Profile


def _cmd_build(args: argparse.Namespace) -> Dict[str, Any]:
    binary = build_parachain(
        args.path,
        package=args.package,
        profile=Profile.from_release(args.release),
        node_path=args.node_path,
    )
    return {"binary": str(binary)}


def _cmd_chain_spec(args: argparse.Namespace) -> Dict[str, Any]:
    generate_plain_chain_spec(args.binary, args.output, args.para_id)
    return {"plain_chain_spec": str(args.output)}


def _cmd_raw_spec(args: argparse.Namespace) -> Dict[str, Any]:
    raw = generate_raw_chain_spec(args.binary, args.chain, args.name, strict=args.strict)
    return {"raw_chain_spec": str(raw)}


def _cmd_export_wasm(args: argparse.Namespace) -> Dict[str, Any]:
    wasm = export_wasm_file(args.binary, args.chain, args.name, strict=args.strict)
    return {"wasm": str(wasm)}


def _cmd_export_genesis_state(args: argparse.Namespace) -> Dict[str, Any]:
    genesis = generate_genesis_state_file(args.binary, args.chain, args.name, strict=args.strict)
    return {"genesis_state": str(genesis)}


def _cmd_generate(args: argparse.Namespace) -> Dict[str, Any]:
    artifacts = generate_genesis_artifacts(args.binary, args.out_dir, args.para_id, strict=args.strict)
    return artifacts.as_dict()


def _cmd_is_supported(args: argparse.Namespace) -> Dict[str, Any]:
    return {"supported": is_supported(args.path)}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="parabuild", description="Build a parachain node and generate its chain spec and genesis artifacts.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (includes every spawned command)")
    p.add_argument("--json-diagnostics", action="store_true", help="Print errors as JSON diagnostics on stderr")
    p.add_argument("--report", default=None, help="Write a JSON build report to this path")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="cargo build the project and locate the node binary")
    b.add_argument("--path", default=".", help="Project directory (default: cwd)")
    b.add_argument("--package", default=None, help="Only build this package")
    b.add_argument("--release", action="store_true", help="Build with optimizations")
    b.add_argument("--node-path", default=None, help="Node crate directory (default: <path>/node)")
    b.set_defaults(func=_cmd_build)

    c = sub.add_parser("chain-spec", help="Generate the plain chain spec and set its para id")
    c.add_argument("--binary", required=True, help="Node binary")
    c.add_argument("--output", default=config.DEFAULT_PLAIN_CHAIN_SPEC, help="Plain chain spec path")
    c.add_argument("--para-id", type=int, required=True)
    c.set_defaults(func=_cmd_chain_spec)

    def stage(name: str, help_text: str, default_name: Optional[str], func) -> None:
        s = sub.add_parser(name, help=help_text)
        s.add_argument("--binary", required=True, help="Node binary")
        s.add_argument("--chain", required=True, help="Source chain spec")
        s.add_argument("--name", default=default_name, required=default_name is None, help="Output file name (written next to --chain)")
        s.add_argument("--strict", action="store_true", help="Reject empty or non-JSON source specs")
        s.set_defaults(func=func)

    stage("raw-spec", "Convert a plain chain spec to raw", config.DEFAULT_RAW_CHAIN_SPEC, _cmd_raw_spec)
    stage("export-wasm", "Export the genesis wasm runtime", None, _cmd_export_wasm)
    stage("export-genesis-state", "Export the genesis state", None, _cmd_export_genesis_state)

    g = sub.add_parser("generate", help="Run every chain spec stage into one directory")
    g.add_argument("--binary", required=True, help="Node binary")
    g.add_argument("--para-id", type=int, required=True)
    g.add_argument("--out-dir", default=".", help="Output directory (default: cwd)")
    g.add_argument("--strict", action="store_true", help="Reject empty or non-JSON intermediate specs")
    g.set_defaults(func=_cmd_generate)

    s = sub.add_parser("is-supported", help="Exit 0 if the project is a parachain, 1 otherwise")
    s.add_argument("--path", default=".", help="Project directory (default: cwd)")
    s.set_defaults(func=_cmd_is_supported)
    return p


def _write_report(path: str, command: str, status: str, artifacts: Dict[str, Any], diags: List[BuildDiagnostic]) -> None:
    report = {
        "command": command,
        "status": status,
        "artifacts": artifacts,
        "diagnostics": [d.to_json() for d in diags],
    }
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(report, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    artifacts: Dict[str, Any] = {}
    diags: List[BuildDiagnostic] = []
    try:
        artifacts = args.func(args)
    except ParachainError as e:
        diags.append(e.diag)
    except (OSError, ValueError) as e:
        diags.append(BuildDiagnostic(
            code="PB-IO-0001",
            severity="fatal",
            message_human=str(e),
            remediation="Check the input files and paths.",
        ))

    if args.report:
        _write_report(args.report, args.command, "error" if diags else "ok", artifacts, diags)

    if diags:
        for d in diags:
            if args.json_diagnostics:
                print(json.dumps(d.to_json(), ensure_ascii=False), file=sys.stderr)
            else:
                print(f"ERROR [{d.code}]: {d.message_human}", file=sys.stderr)
        return 2

    if args.command == "is-supported":
        print("supported" if artifacts["supported"] else "not supported")
        return 0 if artifacts["supported"] else 1
    for key, value in artifacts.items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
