from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BuildDiagnostic:
    code: str
    severity: str
    message_human: str
    remediation: str
    subject: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


class ParachainError(Exception):
    """Base class for every failure raised by parabuild."""

    def __init__(self, diag: BuildDiagnostic):
        super().__init__(diag.message_human)
        self.diag = diag


class MissingBinary(ParachainError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(BuildDiagnostic(
            code="PB-BIN-0001",
            severity="fatal",
            message_human=f"Failed to locate the node binary '{name}' in the build output.",
            remediation="Check that the build succeeded and that the node manifest names the binary.",
            subject=name,
        ))


class MissingChainSpec(ParachainError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(BuildDiagnostic(
            code="PB-SPEC-0001",
            severity="fatal",
            message_human=f"Chain specification file not found: {path}",
            remediation="Generate the chain specification first or pass the correct path.",
            subject=path,
        ))


class InvalidChainSpec(ParachainError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(BuildDiagnostic(
            code="PB-SPEC-0002",
            severity="fatal",
            message_human=f"Chain specification {path} is not usable: {reason}",
            remediation="Regenerate the chain specification; a previous stage may have failed mid-write.",
            subject=path,
        ))


class MissingCommand(ParachainError):
    def __init__(self, command: str, binary: str):
        self.command = command
        self.binary = binary
        super().__init__(BuildDiagnostic(
            code="PB-CMD-0001",
            severity="fatal",
            message_human=f"Command '{command}' is not supported by binary {binary}.",
            remediation="Use a node binary that provides this subcommand (wrong version or missing binary).",
            subject=binary,
        ))


class ManifestError(ParachainError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(BuildDiagnostic(
            code="PB-MAN-0001",
            severity="fatal",
            message_human=f"Invalid manifest {path}: {reason}",
            remediation="Point to a directory containing a valid Cargo.toml.",
            subject=path,
        ))
