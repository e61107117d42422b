"""Installer configuration"""

from .envfile import read_env_file, set_env_value
from .manager import ConfigManager
from .settings import InstallerSettings

__all__ = ["ConfigManager", "InstallerSettings", "read_env_file", "set_env_value"]
