# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

"""
Detect Desktop Environment

Determine which desktop environment the current process is running under, using
only the process environment.
"""

import os
import re
import sys
from typing import Optional, Sequence

import packaging.version

try:
    import xdg.Exceptions  # type: ignore
    from xdg.DesktopEntry import DesktopEntry  # type: ignore

    have_xdg = True
except ImportError:
    have_xdg = False

from detectde import system
from detectde.argumentsparse import get_parser
from detectde.constants import DesktopEnvironment, DesktopEnvironmentHumanize, Platform
from detectde.logger import setup_logging


SessionVersionVariables = dict(
    kde="KDE_SESSION_VERSION",
    cinnamon="CINNAMON_VERSION",
)


def detect() -> Optional[DesktopEnvironment]:
    """
    Detect the current desktop environment.

    On Windows and macOS the platform alone determines the result. Elsewhere the
    environment variables of this process are examined, afresh on every call.

    No exceptions are raised.

    :return: the desktop environment, or None if it cannot be determined
    """

    return system.desktop_environment()


def desktop_environment_humanize(desktop: DesktopEnvironment) -> str:
    """
    Make DesktopEnvironment name human readable.
    :return: desktop name spelled out
    """

    return DesktopEnvironmentHumanize.get(desktop.name, desktop.name)


def session_version(
    desktop: Optional[DesktopEnvironment] = None,
) -> Optional[packaging.version.Version]:
    """
    Get the version of the desktop session, for those desktops that export it in
    an environment variable (KDE and Cinnamon).

    :param desktop: desktop to get the version of. If not specified, detect() is
     called.
    :return: parsed version, or None if it is unavailable
    """

    if desktop is None:
        desktop = detect()
    if desktop is None:
        return None

    variable = SessionVersionVariables.get(desktop.name)
    if variable is None:
        return None

    version_string = (os.getenv(variable) or "").strip()
    result = re.search(r"\d", version_string)
    if result is None:
        return None

    try:
        return packaging.version.parse(version_string[result.start() :])
    except packaging.version.InvalidVersion:
        return None


def _xdg_key(name: str) -> str:
    name = name.strip().lower()
    return name[2:] if name.startswith("x-") else name


def desktop_entry_shown(
    path: str, desktop: Optional[DesktopEnvironment] = None
) -> bool:
    """
    Determine if a desktop entry should be shown in the desktop environment,
    according to its OnlyShowIn and NotShowIn keys.

    Desktop names are compared case-insensitively, ignoring any X- prefix.

    Exceptions are raised if the python binding for xdg is not installed, or the
    desktop entry cannot be parsed.

    :param path: path of the .desktop file
    :param desktop: desktop environment to test against. If not specified,
     detect() is called.
    :return: True if the entry should be shown, else False
    """

    if not have_xdg:
        raise Exception("The python binding for xdg is not installed")

    if not os.path.isfile(path):
        raise Exception(f"There is no desktop entry at {path}")

    desktop_entry = DesktopEntry()
    try:
        desktop_entry.parse(path)
    except xdg.Exceptions.ParsingError:
        raise Exception(f"Could not parse desktop entry at {path}")
    except Exception:
        raise Exception(f"Desktop entry at {path} might be malformed")

    if desktop is None:
        desktop = detect()

    name = desktop.xdg_name if desktop is not None else None
    key = _xdg_key(name) if name else None

    only_show_in = [_xdg_key(n) for n in desktop_entry.getOnlyShowIn() if n.strip()]
    if only_show_in:
        return key is not None and key in only_show_in

    not_show_in = [_xdg_key(n) for n in desktop_entry.getNotShowIn() if n.strip()]
    return key not in not_show_in


def examined_variables() -> Sequence[str]:
    """
    Names of the environment variables examined on this platform

    :return: the variables, empty on Windows and macOS
    """

    if system.current_platform == Platform.posix:
        from detectde.system import posix

        return posix.examined_variables()
    return ()


class Diagnostics:
    """
    Collect basic diagnostics information for this package.
    """

    def __init__(self) -> None:
        self.platform = system.current_platform
        self.desktop = detect()
        self.version = session_version(self.desktop)
        self.variables = {
            variable: os.getenv(variable) for variable in examined_variables()
        }

        if self.desktop is None:
            self.toolkit = ""
        elif self.desktop.gtk():
            self.toolkit = "GTK"
        elif self.desktop.qt():
            self.toolkit = "Qt"
        else:
            self.toolkit = "Other"

    def __str__(self) -> str:
        platform = f"Platform: {self.platform.name}\n"
        if self.desktop is None:
            desktop = "Desktop: Unknown\n"
        else:
            desktop = f"Desktop: {self.desktop.name}\n"
        toolkit = f"Toolkit: {self.toolkit}\n" if self.toolkit else ""
        version = f"Session version: {self.version}\n" if self.version else ""
        variables = "".join(
            f"{variable}: {value}\n"
            for variable, value in self.variables.items()
            if value is not None
        )
        return (platform + desktop + toolkit + version + variables).rstrip("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = get_parser()

    args = parser.parse_args(argv)

    verbose = args.verbose
    debug = args.debug
    if debug:
        setup_logging(debug=True)
        print(Diagnostics())
        verbose = True

    desktop = None
    try:
        desktop = detect()

        if verbose:
            if system.current_platform == Platform.posix:
                for variable in examined_variables():
                    print(f"{variable}={os.getenv(variable, '')}")
            else:
                print(f"Environment not examined on {system.current_platform.name}")

        if desktop is None:
            print("Unknown")
        elif args.xdg_name:
            print(desktop.xdg_name or desktop_environment_humanize(desktop))
        elif args.toolkit:
            if desktop.gtk():
                print("gtk")
            elif desktop.qt():
                print("qt")
            else:
                print("other")
        else:
            print(desktop_environment_humanize(desktop))
    except Exception as e:
        sys.stderr.write(str(e))
        if args.debug:
            raise
        return 1

    return 0 if desktop is not None else 1
