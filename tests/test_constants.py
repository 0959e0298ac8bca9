import doctest

import pytest

import detectde.constants
from detectde.constants import (
    DesktopEnvironment,
    DesktopEnvironmentHumanize,
    XdgRegisteredName,
)


def test_doctests():
    failures, tests = doctest.testmod(detectde.constants)
    assert tests > 0
    assert failures == 0


def test_order_follows_declaration():
    members = list(DesktopEnvironment)
    assert sorted(reversed(members)) == members
    assert DesktopEnvironment.cinnamon < DesktopEnvironment.gnome
    assert DesktopEnvironment.xfce > DesktopEnvironment.windows
    assert DesktopEnvironment.kde <= DesktopEnvironment.kde
    assert DesktopEnvironment.kde >= DesktopEnvironment.kde


def test_order_with_other_types():
    with pytest.raises(TypeError):
        DesktopEnvironment.gnome < 3  # noqa: B015
    assert DesktopEnvironment.gnome != 7


def test_hashable():
    counts = {DesktopEnvironment.gnome: 1}
    counts[DesktopEnvironment.gnome] += 1
    assert counts == {DesktopEnvironment.gnome: 2}
    assert len({DesktopEnvironment.kde, DesktopEnvironment.kde}) == 1


@pytest.mark.parametrize(
    "desktop",
    [
        DesktopEnvironment.cinnamon,
        DesktopEnvironment.cosmic,
        DesktopEnvironment.gnome,
        DesktopEnvironment.lxde,
        DesktopEnvironment.mate,
        DesktopEnvironment.unity,
        DesktopEnvironment.xfce,
    ],
)
def test_gtk(desktop):
    assert desktop.gtk()
    assert not desktop.qt()


@pytest.mark.parametrize(
    "desktop", [DesktopEnvironment.kde, DesktopEnvironment.lxqt, DesktopEnvironment.tde]
)
def test_qt(desktop):
    assert desktop.qt()
    assert not desktop.gtk()


@pytest.mark.parametrize(
    "desktop",
    [
        DesktopEnvironment.windows,
        DesktopEnvironment.macos,
        DesktopEnvironment.sway,
        DesktopEnvironment.hyprland,
        DesktopEnvironment.enlightenment,
    ],
)
def test_neither_gtk_nor_qt(desktop):
    assert not desktop.gtk()
    assert not desktop.qt()


def test_every_desktop_has_a_human_name():
    assert set(DesktopEnvironmentHumanize) == {d.name for d in DesktopEnvironment}


def test_xdg_names():
    assert DesktopEnvironment.gnome.xdg_name == "GNOME"
    assert DesktopEnvironment.lxqt.xdg_name == "LXQt"
    assert DesktopEnvironment.windows.xdg_name is None
    assert set(XdgRegisteredName) == {
        d.name
        for d in DesktopEnvironment
        if d not in (DesktopEnvironment.windows, DesktopEnvironment.macos)
    }
