# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

from ..constants import DesktopEnvironment


def windows_desktop_environment() -> DesktopEnvironment:
    """
    Windows has only the one desktop. Environment variables are not examined.
    """

    return DesktopEnvironment.windows
