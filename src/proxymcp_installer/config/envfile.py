"""Line-oriented KEY=VALUE file handling for the service's .env"""

import re
from pathlib import Path
from typing import Dict, List

# Non-UTF-8 bytes in operator lines round-trip unchanged
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def _key_pattern(key: str) -> "re.Pattern[str]":
    return re.compile(rf"^{re.escape(key)}=")


def read_env_file(path: Path) -> Dict[str, str]:
    """Read KEY=VALUE pairs, ignoring comments and blank lines"""
    values: Dict[str, str] = {}
    if not path.exists():
        return values

    for line in path.read_text(encoding=ENCODING, errors=ERRORS).splitlines():
        if not line.strip() or line.lstrip().startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip()] = value
    return values


def set_env_value(path: Path, key: str, value: str) -> bool:
    """Set ``key`` in place, appending it when absent.

    The first line starting with ``KEY=`` is replaced and any later duplicates
    are dropped; every other line is written back untouched. Returns True if
    the key already existed.
    """
    pattern = _key_pattern(key)
    new_line = f"{key}={value}"
    lines: List[str] = path.read_text(encoding=ENCODING, errors=ERRORS).splitlines() if path.exists() else []

    merged: List[str] = []
    found = False
    for line in lines:
        if pattern.match(line):
            if not found:
                merged.append(new_line)
                found = True
            continue
        merged.append(line)

    if not found:
        merged.append(new_line)

    path.write_text("\n".join(merged) + "\n", encoding=ENCODING, errors=ERRORS)
    return found
