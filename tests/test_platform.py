import pytest

from detectde import detect
from detectde.constants import DesktopEnvironment, Platform
from detectde.system.macos import macos_desktop_environment
from detectde.system.windows import windows_desktop_environment

Desktop = {
    "XDG_CURRENT_DESKTOP": "KDE",
    "KDE_FULL_SESSION": "true",
    "GNOME_DESKTOP_SESSION_ID": "this-is-deprecated",
    "DESKTOP_SESSION": "xfce",
}


@pytest.mark.parametrize(
    "system, platform, desktop",
    [
        ("Windows", Platform.windows, DesktopEnvironment.windows),
        ("Darwin", Platform.macos, DesktopEnvironment.macos),
    ],
)
def test_platform_ignores_environment(
    platform_system, monkeypatch, system, platform, desktop
):
    module = platform_system(system)
    assert module.current_platform == platform

    assert detect() == desktop
    for variable, value in Desktop.items():
        monkeypatch.setenv(variable, value)
    assert detect() == desktop


@pytest.mark.parametrize("system", ["Linux", "FreeBSD", "OpenBSD", "SunOS", ""])
def test_posix_like(platform_system, monkeypatch, system):
    module = platform_system(system)
    assert module.current_platform == Platform.posix
    assert detect() is None

    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "LXQt")
    assert detect() == DesktopEnvironment.lxqt


def test_platform_functions():
    assert windows_desktop_environment() == DesktopEnvironment.windows
    assert macos_desktop_environment() == DesktopEnvironment.macos
