"""systemd service installation and status"""

from pathlib import Path

from .errors import ProvisioningError
from .shell import Shell

UNKNOWN_STATUS = "unknown"


def install_service(shell: Shell, script: Path) -> None:
    """Run the unit install script shipped with the package"""
    if not script.is_file():
        raise ProvisioningError(f"Service install script not found: {script}")
    shell.run(["bash", str(script)])


def service_status(shell: Shell, service_name: str) -> str:
    """Return the unit's active state, or ``unknown`` if it cannot be read"""
    try:
        result = shell.run(["systemctl", "is-active", service_name], check=False)
    except OSError:
        return UNKNOWN_STATUS
    # is-active exits non-zero for inactive/failed units but still names the state
    status = (result.stdout or "").strip()
    return status or UNKNOWN_STATUS
