"""System user and group provisioning"""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .shell import Shell


@dataclass(frozen=True)
class SystemIdentity:
    """The service account Proxy MCP runs as"""

    user_name: str
    group_name: str
    home_directory: Path


def group_exists(shell: Shell, group: str) -> bool:
    return shell.run(["getent", "group", group], check=False).returncode == 0


def user_exists(shell: Shell, user: str) -> bool:
    return shell.run(["getent", "passwd", user], check=False).returncode == 0


def user_in_group(shell: Shell, user: str, group: str) -> bool:
    result = shell.run(["id", "-nG", user], check=False)
    return result.returncode == 0 and group in (result.stdout or "").split()


def ensure_identity(
    shell: Shell,
    identity: SystemIdentity,
    console: Console,
    login_shell: str = "/bin/bash",
) -> SystemIdentity:
    """Create the group, the user and the membership if any is missing"""
    group = identity.group_name
    user = identity.user_name

    if not group_exists(shell, group):
        console.print(f"Creating group '{group}'...")
        shell.run(["groupadd", "--system", group])
    else:
        console.print(f"Group '{group}' already exists.")

    if not user_exists(shell, user):
        console.print(f"Creating user '{user}'...")
        shell.run([
            "useradd", "--system",
            "-g", group,
            "--home-dir", str(identity.home_directory),
            "--shell", login_shell,
            "--create-home",
            user,
        ])
    else:
        console.print(f"User '{user}' already exists.")

    if not user_in_group(shell, user, group):
        console.print(f"Adding user '{user}' to group '{group}'...")
        shell.run(["usermod", "-a", "-G", group, user])
    else:
        console.print(f"User '{user}' is already a member of '{group}'.")

    return identity
