"""Tests for control panel detection"""

from proxymcp_installer.installer.platform import PlatformKind, detect_platform


def _mark(root, plesk=False, directadmin=False, cpanel=False):
    if plesk:
        (root / "usr" / "sbin").mkdir(parents=True, exist_ok=True)
        (root / "usr" / "sbin" / "plesk").write_text("")
    if directadmin:
        (root / "usr" / "local" / "directadmin").mkdir(parents=True, exist_ok=True)
    if cpanel:
        (root / "usr" / "local" / "cpanel").mkdir(parents=True, exist_ok=True)


def test_generic_linux_when_no_markers(host_root):
    assert detect_platform(host_root) is PlatformKind.GENERIC_LINUX


def test_plesk_wins_over_other_markers(host_root):
    _mark(host_root, plesk=True, directadmin=True, cpanel=True)
    assert detect_platform(host_root) is PlatformKind.PLESK


def test_directadmin_before_cpanel(host_root):
    _mark(host_root, directadmin=True, cpanel=True)
    assert detect_platform(host_root) is PlatformKind.DIRECTADMIN


def test_cpanel(host_root):
    _mark(host_root, cpanel=True)
    assert detect_platform(host_root) is PlatformKind.CPANEL


def test_plesk_marker_must_be_a_file(host_root):
    (host_root / "usr" / "sbin" / "plesk").mkdir(parents=True)
    assert detect_platform(host_root) is PlatformKind.GENERIC_LINUX


def test_missing_root_is_not_an_error(tmp_path):
    assert detect_platform(tmp_path / "does-not-exist") is PlatformKind.GENERIC_LINUX


def test_platform_values():
    assert [k.value for k in PlatformKind] == ["plesk", "directadmin", "cpanel", "linux"]
