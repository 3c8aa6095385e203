from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Union


class Profile(Enum):
    DEBUG = "debug"
    RELEASE = "release"

    @property
    def directory(self) -> str:
        return self.value

    @classmethod
    def from_release(cls, release: bool) -> "Profile":
        return cls.RELEASE if release else cls.DEBUG

    def target_folder(self, path: Union[str, Path]) -> Path:
        """Build output directory for this profile under a cargo project."""
        return Path(path) / "target" / self.directory

    def __str__(self) -> str:
        return self.value
