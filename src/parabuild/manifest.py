"""
Cargo manifest reading.

Only the bits the pipeline needs: the package name and the dependency
tables (direct and workspace-shared).
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import MANIFEST_NAME
from .errors import ManifestError


@dataclass
class Manifest:
    path: Path
    package_name: Optional[str] = None
    dependencies: Dict[str, Any] = field(default_factory=dict)
    workspace_dependencies: Optional[Dict[str, Any]] = None

    def package(self) -> str:
        if not self.package_name:
            raise ManifestError(str(self.path), "missing [package] name")
        return self.package_name

    def has_dependency(self, name: str) -> bool:
        if name in self.dependencies:
            return True
        return self.workspace_dependencies is not None and name in self.workspace_dependencies


def manifest_path(path: Optional[Union[str, Path]] = None) -> Path:
    p = Path(path) if path is not None else Path.cwd()
    if p.name != MANIFEST_NAME:
        p = p / MANIFEST_NAME
    return p


def from_path(path: Optional[Union[str, Path]] = None) -> Manifest:
    """Read the manifest at `path` (a project directory or a Cargo.toml). Defaults to the cwd."""
    p = manifest_path(path)
    if not p.is_file():
        raise ManifestError(str(p), "file not found")
    try:
        with open(p, "rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(str(p), str(e)) from e

    package = data.get("package") or {}
    workspace = data.get("workspace")
    ws_deps = None
    if isinstance(workspace, dict):
        ws_deps = dict(workspace.get("dependencies") or {})
    return Manifest(
        path=p,
        package_name=package.get("name"),
        dependencies=dict(data.get("dependencies") or {}),
        workspace_dependencies=ws_deps,
    )
