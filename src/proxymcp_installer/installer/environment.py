"""Virtual environment creation for the service"""

from pathlib import Path

from .errors import ProvisioningError
from .identity import SystemIdentity
from .runtime import RuntimeCandidate
from .shell import Shell

INSTALL_DIR_MODE = "750"


def build_environment(
    shell: Shell,
    runtime: RuntimeCandidate,
    install_dir: Path,
    venv_dir: Path,
    identity: SystemIdentity,
) -> Path:
    """Create the venv and hand the install directory to the service account"""
    try:
        install_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ProvisioningError(f"Could not create {install_dir}: {e}") from e
    shell.run([runtime.executable_path, "-m", "venv", str(venv_dir)])
    shell.run(["chmod", "-R", INSTALL_DIR_MODE, str(install_dir)])
    shell.run(["chown", "-R", f"{identity.user_name}:{identity.group_name}", str(install_dir)])
    return venv_dir
