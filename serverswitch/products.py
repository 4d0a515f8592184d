"""Installed product description and the package's error type."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class SwitchError(Exception):
    """Raised when switching the server cannot be completed."""


@dataclass(frozen=True)
class Product:
    """An installed product whose executables carry configuration files."""

    name: str
    ver: str
    lang: str
    install_path: Path
    exe_names: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "install_path", Path(self.install_path))
        object.__setattr__(self, "exe_names", tuple(self.exe_names))

    def backup_name(self, orig_name: str) -> str:
        """Name of the backup file made for ``orig_name`` of this product."""
        return f"{orig_name}.{self.name} {self.ver} {self.lang}.bak"