"""
External process execution.

Every pipeline component spawns processes through a CommandRunner so tests
can swap in a runner that records calls instead of executing them.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import BuildDiagnostic, ParachainError

logger = logging.getLogger(__name__)


class _Discard:
    def __repr__(self) -> str:
        return "DISCARD"


# Pass as stdout= to throw the process output away.
DISCARD = _Discard()

StdoutTarget = Union[None, _Discard, str, Path]


@dataclass
class CmdResult:
    returncode: int
    command: List[str] = field(default_factory=list)
    cwd: Optional[str] = None
    duration: float = 0.0


class CommandError(ParachainError):
    def __init__(self, program: str, args: Sequence[str], returncode: Optional[int], reason: str = ""):
        self.program = program
        self.args_list = list(args)
        self.returncode = returncode
        self.reason = reason
        cmdline = format_command([program, *self.args_list])
        if returncode is None:
            msg = f"Failed to run `{cmdline}`: {reason}"
        else:
            msg = f"`{cmdline}` exited with status {returncode}"
        super().__init__(BuildDiagnostic(
            code="PB-RUN-0001",
            severity="fatal",
            message_human=msg,
            remediation="Inspect the command output above and re-run the failed stage.",
            subject=program,
        ))


def format_command(command: Sequence[str]) -> str:
    return " ".join(shlex.quote(str(part)) for part in command)


class CommandRunner:
    """Runs a program to completion, raising CommandError unless it exits 0."""

    def run(
        self,
        program: Union[str, Path],
        args: Sequence[str],
        *,
        cwd: Optional[Union[str, Path]] = None,
        stdout: StdoutTarget = None,
    ) -> CmdResult:
        program = str(program)
        command = [program, *[str(a) for a in args]]
        logger.debug("running %s (cwd=%s)", format_command(command), cwd or ".")
        started = time.time()
        if stdout is None or isinstance(stdout, _Discard):
            result = self._spawn(program, args, command, cwd, None if stdout is None else subprocess.DEVNULL)
        else:
            # A bad output path is an IO error, not a failure to run the program.
            with open(stdout, "wb") as fh:
                result = self._spawn(program, args, command, cwd, fh)
        if result.returncode != 0:
            raise CommandError(program, args, result.returncode)
        return CmdResult(
            returncode=result.returncode,
            command=command,
            cwd=str(cwd) if cwd is not None else None,
            duration=round(time.time() - started, 2),
        )

    @staticmethod
    def _spawn(program, args, command, cwd, stdout):
        try:
            return subprocess.run(command, cwd=cwd, stdout=stdout, check=False)
        except OSError as e:
            raise CommandError(program, args, None, str(e)) from e


def default_runner(runner: Optional[CommandRunner]) -> CommandRunner:
    return runner if runner is not None else CommandRunner()
