from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from . import manifest
from .config import DEFAULT_NODE_DIR, PARACHAIN_DEPENDENCIES, cargo_program
from .errors import MissingBinary
from .profile import Profile
from .runner import CommandRunner, default_runner

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def build_args(package: Optional[str], profile: Profile) -> List[str]:
    args = ["build"]
    if package:
        args += ["--package", package]
    if profile is Profile.RELEASE:
        args.append("--release")
    return args


def build_parachain(
    path: PathLike,
    package: Optional[str] = None,
    profile: Profile = Profile.DEBUG,
    node_path: Optional[PathLike] = None,
    *,
    runner: Optional[CommandRunner] = None,
) -> Path:
    """
    Build the parachain and return the path to the node binary.

    `node_path` is the directory holding the node manifest; it defaults to
    `<path>/node`. A failing build raises CommandError unchanged.
    """
    path = Path(path)
    runner = default_runner(runner)
    logger.info("building %s (%s)", path, profile)
    runner.run(cargo_program(), build_args(package, profile), cwd=path)
    node = Path(node_path) if node_path is not None else path / DEFAULT_NODE_DIR
    return binary_path(profile.target_folder(path), node)


def binary_path(target_path: PathLike, node_path: PathLike) -> Path:
    node_name = manifest.from_path(node_path).package()
    binary = Path(target_path) / node_name
    if not binary.exists():
        raise MissingBinary(node_name)
    return binary


def is_supported(path: Optional[PathLike] = None) -> bool:
    """True if the manifest at `path` depends on one of the parachain framework crates."""
    m = manifest.from_path(path)
    return any(m.has_dependency(d) for d in PARACHAIN_DEPENDENCIES)
