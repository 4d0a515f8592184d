"""Backing up and switching the server in every installed product's configuration."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from serverswitch.backup import create_backup
from serverswitch.products import Product
from serverswitch.selection import select_server
from serverswitch.switcher import switch_server


def config_path(install_path: Path | str, cfg_fullname: str) -> Path:
    """Location of an executable's configuration file inside an installation."""
    return Path(install_path) / "Progs" / cfg_fullname


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    print("Press Enter to close.", file=stdout)
    stdout.flush()
    stdin.readline()


def run(
    products: Iterable[Product],
    backup_dir: Path | str,
    server_index: int | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Back up and rewrite every product's configuration; return the chosen server."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    server = select_server(server_index, stdin, stdout)

    print("Creating backups and changing server domain...\n", file=stdout)
    for product in products:
        for exe_name in product.exe_names:
            cfg_fullname = f"{exe_name}.exe.config"
            cfg_path = config_path(product.install_path, cfg_fullname)
            try:
                with cfg_path.open("r+b") as cfg_file:
                    data = cfg_file.read()
            except OSError as exc:
                print(
                    f"Failed to open settings file: '{cfg_path}'. Info: {exc}",
                    file=stdout,
                )
                continue
            create_backup(data, cfg_fullname, backup_dir, product, stdout)
            switch_server(cfg_path, server, stdout)

    if server_index is None:
        print("\nComplete.", file=stdout)
        _pause(stdin, stdout)

    return server