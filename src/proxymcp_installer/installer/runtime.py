"""Python runtime selection.

Candidates are tried in the order of the priority table and the first one
whose ``major.minor`` meets the floor is used, even if a later candidate is
newer. A candidate that is missing, fails to report a version, or is too old
is skipped.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from packaging.version import InvalidVersion, Version

from .errors import NoAcceptableRuntimeError
from .shell import Shell

logger = logging.getLogger(__name__)

VERSION_QUERY = "import sys; v=sys.version_info; print(f'{v.major}.{v.minor}')"


@dataclass(frozen=True)
class RuntimeCandidate:
    """An interpreter that passed the version check"""

    name: str
    executable_path: str
    version: Tuple[int, ...]

    @property
    def version_string(self) -> str:
        return ".".join(str(part) for part in self.version)


def query_version(shell: Shell, executable: str) -> Optional[Version]:
    """Ask an interpreter for its ``major.minor`` release"""
    result = shell.run([executable, "-c", VERSION_QUERY], check=False)
    if result.returncode != 0:
        return None
    try:
        return Version((result.stdout or "").strip())
    except InvalidVersion:
        return None


def locate_runtime(
    shell: Shell,
    candidates: Sequence[str],
    floor: str = "3.10",
) -> RuntimeCandidate:
    """Return the first candidate at or above ``floor``"""
    minimum = Version(floor)

    for name in candidates:
        path = shell.which(name)
        if not path:
            logger.debug("Runtime candidate %s not found", name)
            continue

        version = query_version(shell, path)
        if version is None:
            logger.debug("Runtime candidate %s did not report a version", path)
            continue
        if version < minimum:
            logger.debug("Runtime candidate %s is %s, below %s", path, version, floor)
            continue

        return RuntimeCandidate(name=name, executable_path=path, version=version.release)

    raise NoAcceptableRuntimeError(floor)
