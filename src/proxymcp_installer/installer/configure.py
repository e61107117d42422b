"""Service configuration (.env) generation"""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config.envfile import set_env_value
from .errors import ProvisioningError
from .shell import Shell

CONFIGURE_COMMAND = "proxy-mcp-configure-env"
PORT_KEY = "SERVER_PORT"


def auto_configure(shell: Shell, venv_bin: Path, install_dir: Path) -> None:
    """Fill in generated secrets and defaults without prompting"""
    shell.run([str(venv_bin / CONFIGURE_COMMAND), "--auto"], cwd=install_dir)


def apply_port_override(env_file: Path, port: Optional[int], console: Console) -> None:
    if port is None:
        return
    try:
        existed = set_env_value(env_file, PORT_KEY, str(port))
    except OSError as e:
        raise ProvisioningError(f"Could not update {env_file}: {e}") from e
    verb = "Updated" if existed else "Added"
    console.print(f"{verb} {PORT_KEY}={port} in {env_file}")


def interactive_configure(shell: Shell, venv_bin: Path, install_dir: Path, console: Console) -> None:
    """Let the operator review every setting; blocks on input"""
    console.print()
    console.print("[bold]============================================[/bold]")
    console.print("[bold] Configure Proxy MCP settings[/bold]")
    console.print(" (Press Enter to keep the current value)")
    console.print("[bold]============================================[/bold]")
    shell.run([str(venv_bin / CONFIGURE_COMMAND)], cwd=install_dir, interactive=True)
