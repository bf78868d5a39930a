"""Reads ``.env/<name>.env`` files into a dict for ``--env-file``.

Each non-blank, non-``#`` line is ``KEY=VALUE``, optionally prefixed with
``export`` so the same file can be sourced by a shell. One layer of matching
single or double quotes around the value is removed; anything after the
value, including ``#``, is kept verbatim.
"""

from __future__ import annotations

from pathlib import Path


def load_env_file(env_name: str = "local", project_root: Path | None = None) -> dict[str, str]:
    """Values from ``<project_root>/.env/<env_name>.env``; ``{}`` if there is no such file.

    *project_root* defaults to the working directory.
    """
    path = (project_root or Path.cwd()) / ".env" / f"{env_name}.env"
    if not path.is_file():
        return {}
    return dict(_pairs(path.read_text().splitlines()))


def _pairs(lines: list[str]):
    for raw in lines:
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        yield key.strip(), _unquote(value.strip())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value
