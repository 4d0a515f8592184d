"""Backing up configuration files before they are changed."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from serverswitch.products import Product, SwitchError


def create_backup(
    data: bytes,
    orig_name: str,
    backup_dir: Path | str,
    product: Product,
    stdout: TextIO | None = None,
) -> Path:
    """Write ``data`` to a backup file unless one already exists; return its path."""
    stdout = stdout if stdout is not None else sys.stdout
    backup_name = product.backup_name(orig_name)
    backup_path = Path(backup_dir) / backup_name

    if backup_path.exists():
        print(f"Backup '{backup_name}' already exists.", file=stdout)
        return backup_path

    try:
        with backup_path.open("wb") as backup_file:
            backup_file.write(data)
    except OSError as exc:
        raise SwitchError(
            f"Failed to create/open backup file: '{backup_path}'. Info: {exc}"
        ) from exc

    print(f"Backup created: '{backup_name}'", file=stdout)
    return backup_path