"""Subprocess adapter used by every provisioning stage."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import CommandError

logger = logging.getLogger(__name__)


class Shell:
    """Run host commands and resolve executables on an explicit search path"""

    def __init__(self, extra_path: Iterable[str] = (), base_path: Optional[str] = None):
        if base_path is None:
            base_path = os.environ.get("PATH", os.defpath)
        parts: List[str] = []
        for entry in [*extra_path, *base_path.split(os.pathsep)]:
            if entry and entry not in parts:
                parts.append(entry)
        self.search_path = os.pathsep.join(parts)

    def which(self, name: str) -> Optional[str]:
        """Resolve a command name (or absolute path) to an executable path"""
        return shutil.which(name, path=self.search_path)

    def run(
        self,
        cmd: List[str],
        cwd: Optional[Path] = None,
        check: bool = True,
        interactive: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run a command and return the result.

        Interactive commands inherit the terminal so the operator can answer
        prompts; their output is not captured.
        """
        logger.debug("Running: %s", " ".join(cmd))
        env = dict(os.environ, PATH=self.search_path)

        try:
            if interactive:
                result = subprocess.run(cmd, cwd=cwd, env=env, check=False)
            else:
                result = subprocess.run(
                    cmd, cwd=cwd, env=env, capture_output=True, text=True, check=False
                )
        except OSError as e:
            # shell conventions: 127 not found, 126 found but not executable
            returncode = 127 if isinstance(e, FileNotFoundError) else 126
            if not check:
                return subprocess.CompletedProcess(cmd, returncode, "", str(e))
            raise CommandError(cmd, returncode, str(e)) from e

        if check and result.returncode != 0:
            raise CommandError(cmd, result.returncode, result.stderr)

        return result
