"""Installer error types"""

from typing import List, Optional


class InstallerError(Exception):
    """Base exception for installer failures"""

    exit_code = 1


class MissingDependencyError(InstallerError):
    """A required external tool is not on the search path"""

    def __init__(self, tool: str, package: str):
        self.tool = tool
        self.package = package
        super().__init__(f"{package} is not installed. Please install {package} and try again.")


class InvalidArgumentsError(InstallerError):
    """Required parameters are missing or malformed"""

    def __init__(self, message: str, usage: str = ""):
        self.usage = usage
        super().__init__(message)


class NoAcceptableRuntimeError(InstallerError):
    """No Python interpreter meets the minimum version"""

    def __init__(self, floor: str):
        self.floor = floor
        super().__init__(f"Python {floor} or newer is required.")


class ProvisioningError(InstallerError):
    """A local provisioning step failed"""

    pass


class CommandError(ProvisioningError):
    """A subprocess exited with a non-zero status"""

    def __init__(self, cmd: List[str], returncode: int, stderr: Optional[str] = None):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"Command failed with code {returncode}: {' '.join(cmd)}"
        if self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        super().__init__(message)


class RegistrationError(InstallerError):
    """The control plane rejected or never received the registration"""

    pass
