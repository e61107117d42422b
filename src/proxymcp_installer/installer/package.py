"""Proxy MCP package installation"""

from pathlib import Path

from .shell import Shell


def install_package(
    shell: Shell,
    venv_bin: Path,
    package: str,
    index_url: str,
    trusted_host: str,
) -> None:
    """Upgrade pip, then reinstall ``package`` from the extra index without the cache"""
    python = str(venv_bin / "python")
    shell.run([python, "-m", "pip", "install", "-U", "pip"])
    shell.run([
        python, "-m", "pip", "install",
        "--no-cache-dir",
        "--force-reinstall",
        "--extra-index-url", index_url,
        "--trusted-host", trusted_host,
        package,
    ])


def unpack_data(shell: Shell, venv_bin: Path, install_dir: Path) -> None:
    """Unpack the scripts and data files shipped inside the package"""
    shell.run([str(venv_bin / "proxy-mcp-unpack-data")], cwd=install_dir)
