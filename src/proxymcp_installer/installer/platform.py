"""Hosting control panel detection"""

import enum
from pathlib import Path
from typing import Tuple


class PlatformKind(enum.Enum):
    PLESK = "plesk"
    DIRECTADMIN = "directadmin"
    CPANEL = "cpanel"
    GENERIC_LINUX = "linux"


# Checked in order; the first marker present wins.
PLATFORM_MARKERS: Tuple[Tuple[PlatformKind, str, str], ...] = (
    (PlatformKind.PLESK, "usr/sbin/plesk", "file"),
    (PlatformKind.DIRECTADMIN, "usr/local/directadmin", "dir"),
    (PlatformKind.CPANEL, "usr/local/cpanel", "dir"),
)


def detect_platform(root: Path = Path("/")) -> PlatformKind:
    """Classify the host by control panel markers under ``root``"""
    for kind, marker, marker_type in PLATFORM_MARKERS:
        path = root / marker
        try:
            present = path.is_file() if marker_type == "file" else path.is_dir()
        except OSError:
            present = False
        if present:
            return kind
    return PlatformKind.GENERIC_LINUX
