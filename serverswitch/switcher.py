"""Rewriting endpoint addresses in an application configuration file."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlsplit

from serverswitch.products import SwitchError

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
_SPECIAL_SCHEMES = frozenset(_DEFAULT_PORTS) | {"file"}

_MARKUP = re.compile(
    r"""
      (?P<comment><!--.*?-->)
    | (?P<cdata><!\[CDATA\[.*?\]\]>)
    | (?P<pi><\?.*?\?>)
    | (?P<decl><![^>]*>)
    | (?P<end></\s*(?P<end_name>[^\s>]+)\s*>)
    | (?P<tag><(?P<name>[^\s/>!?<]+)(?P<attrs>(?:[^>"']|"[^"]*"|'[^']*')*?)(?P<empty>/?)>)
    """,
    re.S | re.X,
)
_ATTRIBUTE = re.compile(r"""\s*([^\s=/"'<>]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def replace_host(url: str, server_domain: str) -> str:
    """Return ``url`` with its host replaced by ``server_domain``."""
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError as exc:
        raise SwitchError(f"Failed to parse the received url. Info: '{exc}'") from exc

    if not parts.scheme:
        raise SwitchError(
            "Failed to parse the received url. Info: 'relative URL without a base'"
        )
    scheme = parts.scheme.lower()
    special = scheme in _SPECIAL_SCHEMES

    if not parts.netloc:
        if special:
            raise SwitchError("Failed to parse the received url. Info: 'empty host'")
        raise SwitchError(
            "Failed to set host to the received url. Info: 'cannot-be-a-base'"
        )
    if special and not server_domain:
        raise SwitchError("Failed to set host to the received url. Info: 'empty host'")

    userinfo, at, _ = parts.netloc.rpartition("@")
    host = server_domain.lower() if special else server_domain
    netloc = f"{userinfo}{at}{host}"
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc += f":{port}"

    path = parts.path or ("/" if special else "")
    result = f"{scheme}://{netloc}{path}"
    if parts.query:
        result += f"?{parts.query}"
    if parts.fragment:
        result += f"#{parts.fragment}"
    return result


def _attributes(raw: str) -> list[tuple[str, str]]:
    found: list[tuple[str, str]] = []
    seen: set[str] = set()
    pos = 0
    while raw[pos:].strip():
        match = _ATTRIBUTE.match(raw, pos)
        if match is None:
            raise SwitchError(
                "Error during attribute parsing xml. Event: 'Event::Start'. "
                f"Info: 'malformed attribute at position {pos}'"
            )
        key = match.group(1)
        if key in seen:
            raise SwitchError(
                "Error during attribute parsing xml. Event: 'Event::Start'. "
                f"Info: 'duplicated attribute {key}'"
            )
        seen.add(key)
        value = match.group(2) if match.group(2) is not None else match.group(3)
        found.append((key, value))
        pos = match.end()
    return found


def _rewrite_endpoint(raw_attrs: str, server_domain: str) -> str:
    pieces = []
    for key, value in _attributes(raw_attrs):
        if key.split(":", 1)[-1] == "address":
            pieces.append(f' address="{replace_host(value, server_domain)}"')
        else:
            pieces.append(f' {key}="{value}"')
    return "<endpoint" + "".join(pieces) + "/>"


def rewrite_endpoints(xml_text: str, server_domain: str) -> str:
    """Return ``xml_text`` with every empty ``endpoint`` element pointed at the domain."""
    output: list[str] = []
    open_tags: list[str] = []
    pos = 0
    while True:
        start = xml_text.find("<", pos)
        if start < 0:
            output.append(xml_text[pos:])
            break
        output.append(xml_text[pos:start])
        match = _MARKUP.match(xml_text, start)
        if match is None:
            raise SwitchError(
                f"Reading xml error. Error at position {start}: malformed markup"
            )
        if match.group("end"):
            name = match.group("end_name")
            if not open_tags or open_tags.pop() != name:
                raise SwitchError(
                    f"Reading xml error. Error at position {start}: "
                    f"unexpected end tag '{name}'"
                )
            output.append(match.group(0))
        elif match.group("tag"):
            name = match.group("name")
            if not match.group("empty"):
                open_tags.append(name)
                output.append(match.group(0))
            elif name == "endpoint":
                output.append(_rewrite_endpoint(match.group("attrs"), server_domain))
            else:
                output.append(match.group(0))
        else:
            output.append(match.group(0))
        pos = match.end()
    return "".join(output)


def switch_server(
    path: Path | str, server_domain: str, stdout: TextIO | None = None
) -> None:
    """Rewrite the configuration file at ``path`` in place to use ``server_domain``."""
    stdout = stdout if stdout is not None else sys.stdout
    path = Path(path)
    print(f"Changing the server in the configuration file: '{path}'", file=stdout)

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SwitchError(f"Failed to read file contents: '{path}'. Info: {exc}") from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SwitchError(
            f"Failed to convert the created xml to a string. Info: '{exc}'"
        ) from exc

    new_text = rewrite_endpoints(text, server_domain)

    try:
        path.write_bytes(new_text.encode("utf-8"))
    except OSError as exc:
        raise SwitchError(f"File emptying '{path}' failed. Info: '{exc}'") from exc
    print(f"Configuration file: '{path}' has been modified.\n", file=stdout)