import importlib
import platform

import pytest

import detectde.system

Variables = (
    "XDG_CURRENT_DESKTOP",
    "GNOME_DESKTOP_SESSION_ID",
    "KDE_FULL_SESSION",
    "MATE_DESKTOP_SESSION_ID",
    "TDE_FULL_SESSION",
    "CINNAMON_VERSION",
    "HYPRLAND_INSTANCE_SIGNATURE",
    "SWAYSOCK",
    "E_START",
    "XDG_SESSION_DESKTOP",
    "DESKTOP_SESSION",
    "KDE_SESSION_VERSION",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove every variable the detector looks at, whatever desktop runs the tests"""
    for variable in Variables:
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def platform_system(monkeypatch):
    """
    Reload detectde.system as if running on another operating system.

    Usage: platform_system("Windows")
    """

    def select(name):
        monkeypatch.setattr(platform, "system", lambda: name)
        importlib.reload(detectde.system)
        return detectde.system

    yield select

    monkeypatch.undo()
    importlib.reload(detectde.system)


@pytest.fixture
def posix(platform_system):
    return platform_system("Linux")
