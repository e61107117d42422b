"""Configuration management for the installer"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .settings import InstallerSettings

DEFAULT_CONFIG_PATH = Path("/etc/proxy-mcp/installer.yaml")

ENV_OVERRIDES = {
    "PROXY_MCP_INSTALL_DIR": "install_dir",
    "PROXY_MCP_INDEX_URL": "index_url",
    "PROXY_MCP_TRUSTED_HOST": "trusted_host",
    "PROXY_MCP_PACKAGE": "package_name",
}


class ConfigManager:
    """Manage installer configuration"""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, environ: Optional[Mapping[str, str]] = None):
        self.config_path = config_path
        self.environ = os.environ if environ is None else environ

    def load(self) -> InstallerSettings:
        """Load settings from defaults, file and environment"""
        config: Dict[str, Any] = {}

        # Load from file if exists
        if self.config_path.exists():
            with open(self.config_path) as f:
                try:
                    file_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ValueError(f"{self.config_path}: {e}") from e
            if not isinstance(file_config, dict):
                raise ValueError(f"{self.config_path}: expected a mapping at top level")
            config = dict(file_config)

        # Override with environment variables
        config = self._apply_env_overrides(config)

        return InstallerSettings.from_dict(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        for env_name, key in ENV_OVERRIDES.items():
            if value := self.environ.get(env_name):
                config[key] = value

        return config
