"""Shared fixtures: a simulated host behind the Shell interface"""

import io
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from proxymcp_installer.config.settings import InstallerSettings
from proxymcp_installer.installer.errors import CommandError
from proxymcp_installer.installer.runtime import VERSION_QUERY

MUTATING_COMMANDS = {"groupadd", "useradd", "usermod", "chmod", "chown", "bash"}


class FakeShell:
    """Records commands and simulates users, groups, interpreters and systemd"""

    def __init__(
        self,
        executables: Optional[Dict[str, str]] = None,
        versions: Optional[Dict[str, str]] = None,
    ):
        self.executables = dict(executables or {})
        self.versions = dict(versions or {})
        self.groups = set()
        self.users = set()
        self.memberships: Dict[str, set] = {}
        self.service_state = "active"
        self.failures: Dict[str, int] = {}
        self.commands: List[List[str]] = []
        self.interactive_commands: List[List[str]] = []

    def which(self, name: str) -> Optional[str]:
        return self.executables.get(name)

    def run(self, cmd, cwd=None, check=True, interactive=False):
        cmd = list(cmd)
        self.commands.append(cmd)
        if interactive:
            self.interactive_commands.append(cmd)

        returncode, stdout = self._dispatch(cmd, cwd)
        if check and returncode != 0:
            raise CommandError(cmd, returncode, "simulated failure")
        return subprocess.CompletedProcess(cmd, returncode, stdout, "")

    def named(self, program: str) -> List[List[str]]:
        """Commands whose executable basename is ``program``"""
        return [c for c in self.commands if Path(c[0]).name == program]

    @property
    def mutations(self) -> List[List[str]]:
        return [c for c in self.commands if Path(c[0]).name in MUTATING_COMMANDS]

    def _dispatch(self, cmd, cwd):
        program = Path(cmd[0]).name
        if program in self.failures:
            return self.failures[program], ""

        if program == "getent":
            table = self.groups if cmd[1] == "group" else self.users
            return (0, f"{cmd[2]}:x:999:\n") if cmd[2] in table else (2, "")
        if program == "id":
            user = cmd[-1]
            if user not in self.users:
                return 1, ""
            return 0, " ".join(sorted(self.memberships.get(user, ()))) + "\n"
        if program == "groupadd":
            self.groups.add(cmd[-1])
        elif program == "useradd":
            user = cmd[-1]
            self.users.add(user)
            self.memberships.setdefault(user, set()).add(cmd[cmd.index("-g") + 1])
        elif program == "usermod":
            self.memberships.setdefault(cmd[-1], set()).add(cmd[cmd.index("-G") + 1])
        elif cmd[1:] == ["-c", VERSION_QUERY]:
            version = self.versions.get(cmd[0])
            return (0, version + "\n") if version else (1, "")
        elif program == "proxy-mcp-unpack-data":
            scripts = Path(cwd) / "scripts"
            scripts.mkdir(parents=True, exist_ok=True)
            (scripts / "install.sh").write_text("#!/bin/bash\n")
        elif program == "proxy-mcp-configure-env" and "--auto" in cmd:
            env_file = Path(cwd) / ".env"
            if env_file.is_dir():
                return 0, ""
            existing = env_file.read_text(encoding="utf-8", errors="surrogateescape") if env_file.exists() else ""
            if "API_KEY=" not in existing:
                env_file.write_text(
                    existing + "API_KEY=generated-secret\nSERVER_HOST=0.0.0.0\n",
                    encoding="utf-8",
                    errors="surrogateescape",
                )
        elif program == "systemctl" and cmd[1] == "is-active":
            return (0 if self.service_state == "active" else 3), self.service_state + "\n"
        return 0, ""


def host_tools() -> Dict[str, str]:
    return {
        "curl": "/usr/bin/curl",
        "unzip": "/usr/bin/unzip",
        "systemctl": "/usr/bin/systemctl",
    }


@pytest.fixture
def settings(tmp_path):
    return InstallerSettings(install_dir=tmp_path / "opt" / "ProxyMcp")


@pytest.fixture
def fake_shell():
    executables = host_tools()
    executables["python3.11"] = "/usr/bin/python3.11"
    executables["python3"] = "/usr/bin/python3"
    return FakeShell(
        executables=executables,
        versions={"/usr/bin/python3.11": "3.11", "/usr/bin/python3": "3.9"},
    )


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, record=True, color_system=None)


@pytest.fixture
def host_root(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def shell_factory():
    return FakeShell
