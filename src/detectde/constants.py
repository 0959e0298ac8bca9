# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

import functools
from enum import Enum
from typing import Optional


@functools.total_ordering
class DesktopEnvironment(Enum):
    """
    Desktop environments that can be detected.

    Members compare equal only to themselves, hash like any other Enum member, and
    sort in declaration order, so they can be used as dictionary keys and sorted.

    The set of members is not closed. New desktop environments are added in minor
    releases, so code that dispatches on a member must always keep a fallback
    branch:

    >>> def file_dialog(desktop):
    ...     if desktop.gtk():
    ...         return "gtk"
    ...     elif desktop.qt():
    ...         return "qt"
    ...     return "native"
    >>> file_dialog(DesktopEnvironment.xfce)
    'gtk'
    >>> file_dialog(DesktopEnvironment.windows)
    'native'
    >>> sorted([DesktopEnvironment.xfce, DesktopEnvironment.cinnamon])
    [<DesktopEnvironment.cinnamon: 1>, <DesktopEnvironment.xfce: 22>]
    """

    cinnamon = 1
    cosmic = 2
    dde = 3  # Deepin
    ede = 4
    endless = 5
    enlightenment = 6
    gnome = 7  # includes GNOME Classic and GNOME Flashback
    hyprland = 8
    kde = 9
    lxde = 10
    lxqt = 11
    macos = 12
    mate = 13
    old = 14  # legacy menu systems
    pantheon = 15
    razor = 16
    rox = 17
    sway = 18
    tde = 19  # Trinity
    unity = 20
    windows = 21
    xfce = 22

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented

    def gtk(self) -> bool:
        """
        Test if the desktop environment is based on the GTK toolkit

        See https://en.wikipedia.org/wiki/Category:Desktop_environments_based_on_GTK

        >>> DesktopEnvironment.cinnamon.gtk()
        True
        >>> DesktopEnvironment.gnome.gtk()
        True
        >>> DesktopEnvironment.kde.gtk()
        False
        >>> DesktopEnvironment.windows.gtk()
        False
        """

        return self in _gtk_desktops

    def qt(self) -> bool:
        """
        Test if the desktop environment is based on the Qt toolkit

        >>> DesktopEnvironment.kde.qt()
        True
        >>> DesktopEnvironment.lxqt.qt()
        True
        >>> DesktopEnvironment.gnome.qt()
        False
        >>> DesktopEnvironment.macos.qt()
        False
        """

        return self in _qt_desktops

    @property
    def xdg_name(self) -> Optional[str]:
        """
        Name registered for the desktop in the freedesktop.org menu specification,
        as used in XDG_CURRENT_DESKTOP and the OnlyShowIn / NotShowIn keys of
        desktop entries.

        >>> DesktopEnvironment.cinnamon.xdg_name
        'X-Cinnamon'
        >>> DesktopEnvironment.macos.xdg_name is None
        True
        """

        return XdgRegisteredName.get(self.name)


_gtk_desktops = frozenset(
    (
        DesktopEnvironment.cinnamon,
        DesktopEnvironment.cosmic,
        DesktopEnvironment.endless,
        DesktopEnvironment.gnome,
        DesktopEnvironment.lxde,
        DesktopEnvironment.mate,
        DesktopEnvironment.pantheon,
        DesktopEnvironment.rox,
        DesktopEnvironment.unity,
        DesktopEnvironment.xfce,
    )
)

_qt_desktops = frozenset(
    (
        DesktopEnvironment.dde,
        DesktopEnvironment.kde,
        DesktopEnvironment.lxqt,
        DesktopEnvironment.razor,
        DesktopEnvironment.tde,
    )
)


XdgRegisteredName = dict(
    cinnamon="X-Cinnamon",
    cosmic="COSMIC",
    dde="DDE",
    ede="EDE",
    endless="Endless",
    enlightenment="ENLIGHTENMENT",
    gnome="GNOME",
    hyprland="Hyprland",
    kde="KDE",
    lxde="LXDE",
    lxqt="LXQt",
    mate="MATE",
    old="Old",
    pantheon="Pantheon",
    razor="Razor",
    rox="ROX",
    sway="sway",
    tde="TDE",
    unity="Unity",
    xfce="XFCE",
)


DesktopEnvironmentHumanize = dict(
    cinnamon="Cinnamon",
    cosmic="COSMIC",
    dde="Deepin",
    ede="EDE",
    endless="Endless",
    enlightenment="Enlightenment",
    gnome="Gnome",
    hyprland="Hyprland",
    kde="KDE",
    lxde="LXDE",
    lxqt="LxQt",
    macos="macOS",
    mate="Mate",
    old="Legacy",
    pantheon="Pantheon",
    razor="Razor-qt",
    rox="ROX",
    sway="Sway",
    tde="Trinity",
    unity="Unity",
    windows="Windows",
    xfce="XFCE",
)


class Platform(Enum):
    windows = 1
    posix = 2
    macos = 3
