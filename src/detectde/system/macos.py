# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

from ..constants import DesktopEnvironment


def macos_desktop_environment() -> DesktopEnvironment:
    return DesktopEnvironment.macos
