"""Choosing the server domain to switch to."""

from __future__ import annotations

import sys
from typing import TextIO

from serverswitch.products import SwitchError

SERVERS: tuple[str, ...] = (
    "userarea.zenno.io",
    "userarea.zennolab.com",
    "userarea-us.zennolab.com",
    "userarea-hk.zennolab.com",
)

_ATTEMPTS = 3


def select_server(
    server_index: int | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Return the chosen server, by 1-based index or by asking on ``stdin``."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if server_index is not None:
        if server_index < 1 or server_index > len(SERVERS):
            raise SwitchError(f"Invalid server number: '{server_index}'")
        return SERVERS[server_index - 1]

    for number, server in enumerate(SERVERS, start=1):
        print(f"{number}: '{server}'", file=stdout)
    print("\nType server number and press Enter:", file=stdout)

    for _ in range(_ATTEMPTS):
        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SwitchError(f"Error when parse input. Info: '{exc}'") from exc

        first = line[:1]
        if first and first in "123456789":
            position = int(first) - 1
            if position < len(SERVERS):
                server = SERVERS[position]
                print(f"\nSelected: '{server}'\n", file=stdout)
                return server
        print("Incorrect input.", file=stdout)

    raise SwitchError("Exceeded number of input attempts.")