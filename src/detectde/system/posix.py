# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

"""
Desktop environment detection for Linux, the BSDs and other POSIX-like systems.

Only environment variables are examined. The rules are tried in this order, and
the first one to match wins:

1. XDG_CURRENT_DESKTOP, a colon separated list of desktop names ordered from the
   most to the least specific
2. legacy variables whose presence alone identifies a desktop
3. the session name in XDG_SESSION_DESKTOP, then DESKTOP_SESSION
"""

import logging
import os
from typing import Mapping, Optional, Tuple

from ..constants import DesktopEnvironment

logger = logging.getLogger(__name__)


# Names are lower case. Keys are tried as-is, then without any leading "x-".
XdgDesktopNames = {
    "cinnamon": DesktopEnvironment.cinnamon,
    "cosmic": DesktopEnvironment.cosmic,
    "dde": DesktopEnvironment.dde,
    "deepin": DesktopEnvironment.dde,
    "ede": DesktopEnvironment.ede,
    "endless": DesktopEnvironment.endless,
    "enlightenment": DesktopEnvironment.enlightenment,
    "gnome": DesktopEnvironment.gnome,
    "gnome-classic": DesktopEnvironment.gnome,
    "gnome-flashback": DesktopEnvironment.gnome,
    "hyprland": DesktopEnvironment.hyprland,
    "kde": DesktopEnvironment.kde,
    "lxde": DesktopEnvironment.lxde,
    "lxqt": DesktopEnvironment.lxqt,
    "mate": DesktopEnvironment.mate,
    "old": DesktopEnvironment.old,
    "pantheon": DesktopEnvironment.pantheon,
    "razor": DesktopEnvironment.razor,
    "rox": DesktopEnvironment.rox,
    "sway": DesktopEnvironment.sway,
    "tde": DesktopEnvironment.tde,
    "unity": DesktopEnvironment.unity,
    "xfce": DesktopEnvironment.xfce,
}


# Order matters: some sessions export more than one of these.
SessionMarkers: Tuple[Tuple[str, DesktopEnvironment], ...] = (
    ("GNOME_DESKTOP_SESSION_ID", DesktopEnvironment.gnome),
    ("KDE_FULL_SESSION", DesktopEnvironment.kde),
    ("MATE_DESKTOP_SESSION_ID", DesktopEnvironment.mate),
    ("TDE_FULL_SESSION", DesktopEnvironment.tde),
    ("CINNAMON_VERSION", DesktopEnvironment.cinnamon),
    ("HYPRLAND_INSTANCE_SIGNATURE", DesktopEnvironment.hyprland),
    ("SWAYSOCK", DesktopEnvironment.sway),
    ("E_START", DesktopEnvironment.enlightenment),
)


SessionVariables: Tuple[str, ...] = ("XDG_SESSION_DESKTOP", "DESKTOP_SESSION")


SessionDesktopNames = {
    "cinnamon": DesktopEnvironment.cinnamon,
    "cinnamon2d": DesktopEnvironment.cinnamon,
    "cinnamon-wayland": DesktopEnvironment.cinnamon,
    "cosmic": DesktopEnvironment.cosmic,
    "deepin": DesktopEnvironment.dde,
    "ede": DesktopEnvironment.ede,
    "enlightenment": DesktopEnvironment.enlightenment,
    "gnome": DesktopEnvironment.gnome,
    "gnome-classic": DesktopEnvironment.gnome,
    "gnome-flashback": DesktopEnvironment.gnome,
    "gnome-wayland": DesktopEnvironment.gnome,
    "gnome-xorg": DesktopEnvironment.gnome,
    "ubuntu": DesktopEnvironment.gnome,
    "ubuntu-wayland": DesktopEnvironment.gnome,
    "pop": DesktopEnvironment.gnome,
    "hyprland": DesktopEnvironment.hyprland,
    "kde": DesktopEnvironment.kde,
    "kde-plasma": DesktopEnvironment.kde,
    "plasma": DesktopEnvironment.kde,
    "plasma5": DesktopEnvironment.kde,
    "plasmawayland": DesktopEnvironment.kde,
    "plasmax11": DesktopEnvironment.kde,
    "lxde": DesktopEnvironment.lxde,
    "lubuntu": DesktopEnvironment.lxde,
    "lxqt": DesktopEnvironment.lxqt,
    "mate": DesktopEnvironment.mate,
    "pantheon": DesktopEnvironment.pantheon,
    "sway": DesktopEnvironment.sway,
    "tde": DesktopEnvironment.tde,
    "trinity": DesktopEnvironment.tde,
    "unity": DesktopEnvironment.unity,
    "xfce": DesktopEnvironment.xfce,
    "xfce4": DesktopEnvironment.xfce,
    "xfce session": DesktopEnvironment.xfce,
    "xubuntu": DesktopEnvironment.xfce,
}


def _value(environ: Mapping[str, str], variable: str) -> str:
    """
    Get the value of an environment variable, with surrounding whitespace removed

    :return: the value, or an empty string if the variable is not set
    """

    return (environ.get(variable) or "").strip()


def xdg_desktop_name(token: str) -> Optional[DesktopEnvironment]:
    """
    Match a single entry from XDG_CURRENT_DESKTOP.

    >>> xdg_desktop_name(" GNOME-Classic ")
    <DesktopEnvironment.gnome: 7>
    >>> xdg_desktop_name("X-Cinnamon")
    <DesktopEnvironment.cinnamon: 1>
    >>> xdg_desktop_name("X-Generic") is None
    True

    :param token: a desktop name
    :return: the desktop, or None if the name is not recognized
    """

    name = token.strip().lower()
    desktop = XdgDesktopNames.get(name)
    if desktop is None and name.startswith("x-"):
        desktop = XdgDesktopNames.get(name[2:])
    return desktop


def session_desktop_name(session: str) -> Optional[DesktopEnvironment]:
    """
    Match a session name, as found in DESKTOP_SESSION or XDG_SESSION_DESKTOP.

    Some display managers export the path of the session file rather than its
    name, e.g. /usr/share/xsessions/plasma5

    >>> session_desktop_name("/usr/share/xsessions/plasma5")
    <DesktopEnvironment.kde: 9>
    >>> session_desktop_name("Xfce Session")
    <DesktopEnvironment.xfce: 22>
    """

    name = session.strip().rstrip("/").rsplit("/", 1)[-1].strip().lower()
    return SessionDesktopNames.get(name)


def posix_desktop_environment(
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[DesktopEnvironment]:
    """
    Determine the desktop environment from the environment variables.

    Values are compared case-insensitively with surrounding whitespace ignored.
    A variable set to an empty string is treated as unset. Values that are not
    recognized are skipped. No exceptions are raised.

    :param environ: environment to examine. Defaults to the environment of
     this process, read afresh on every call.
    :return: the desktop environment, or None if it cannot be determined
    """

    if environ is None:
        environ = os.environ

    current_desktop = _value(environ, "XDG_CURRENT_DESKTOP")
    if current_desktop:
        for token in current_desktop.split(":"):
            desktop = xdg_desktop_name(token)
            if desktop is not None:
                logger.debug(
                    "XDG_CURRENT_DESKTOP entry %r identifies %s", token, desktop.name
                )
                return desktop
        logger.debug("No entry recognized in XDG_CURRENT_DESKTOP=%r", current_desktop)

    for variable, desktop in SessionMarkers:
        if _value(environ, variable):
            logger.debug("%s is set, identifying %s", variable, desktop.name)
            return desktop

    for variable in SessionVariables:
        session = _value(environ, variable)
        if not session:
            continue
        desktop = session_desktop_name(session)
        if desktop is not None:
            logger.debug("%s=%r identifies %s", variable, session, desktop.name)
            return desktop
        logger.debug("Session %s=%r is unknown", variable, session)

    logger.debug("Could not determine the desktop environment")
    return None


def examined_variables() -> Tuple[str, ...]:
    """
    Names of the environment variables used to detect the desktop, in the order
    they are examined
    """

    return (
        ("XDG_CURRENT_DESKTOP",)
        + tuple(variable for variable, _ in SessionMarkers)
        + SessionVariables
    )
