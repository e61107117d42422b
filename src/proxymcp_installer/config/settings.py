"""Installer settings"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

DEFAULT_RUNTIME_CANDIDATES: Tuple[str, ...] = (
    "python3.12",
    "python3.11",
    "python311",
    "/opt/alt/python311/bin/python3",
    "python3.10",
    "python3",
)

# (command, package that provides it)
DEFAULT_REQUIRED_TOOLS: Tuple[Tuple[str, str], ...] = (
    ("curl", "curl"),
    ("unzip", "unzip"),
    ("systemctl", "systemd"),
)


@dataclass(frozen=True)
class InstallerSettings:
    """Fixed values the pipeline provisions against"""

    install_dir: Path = Path("/opt/ProxyMcp")
    user_name: str = "proxy-mcp"
    group_name: str = "proxy-mcp"
    login_shell: str = "/bin/bash"
    service_name: str = "proxy-mcp.service"
    package_name: str = "ProxyMcp"
    index_url: str = "http://repo.konrado.ai:3141/konrado/dev/"
    trusted_host: str = "repo.konrado.ai"
    min_runtime: str = "3.10"
    runtime_candidates: Tuple[str, ...] = DEFAULT_RUNTIME_CANDIDATES
    required_tools: Tuple[Tuple[str, str], ...] = DEFAULT_REQUIRED_TOOLS
    extra_search_path: Tuple[str, ...] = ("/usr/local/bin",)
    request_timeout: float = 30.0
    env_file_name: str = ".env"
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def venv_dir(self) -> Path:
        return self.install_dir / ".venv"

    @property
    def venv_bin(self) -> Path:
        return self.venv_dir / "bin"

    @property
    def env_file(self) -> Path:
        return self.install_dir / self.env_file_name

    @property
    def service_script(self) -> Path:
        return self.install_dir / "scripts" / "install.sh"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InstallerSettings":
        """Build settings from a flat mapping, keeping unknown keys in ``extra``"""
        known = {name for name in cls.__dataclass_fields__ if name != "extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                extra[key] = value
            elif key == "install_dir":
                kwargs[key] = Path(value)
            elif key in ("runtime_candidates", "extra_search_path"):
                kwargs[key] = tuple(str(v) for v in value)
            elif key == "required_tools":
                kwargs[key] = tuple((str(cmd), str(pkg)) for cmd, pkg in value)
            elif key == "min_runtime":
                # YAML reads an unquoted 3.10 as the float 3.1
                if isinstance(value, float):
                    raise ValueError("min_runtime must be a quoted string such as '3.10'")
                kwargs[key] = str(value)
            elif key == "request_timeout":
                kwargs[key] = float(value)
            else:
                kwargs[key] = value

        return cls(extra=extra, **kwargs)
