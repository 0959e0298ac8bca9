# SPDX-FileCopyrightText: Copyright 2021-2024 Damon Lynch
# SPDX-License-Identifier: MIT

# Exactly one platform module is imported. The modules for the other platforms,
# and their variable tables, are never loaded.

import platform
from typing import Callable, Optional

from ..constants import DesktopEnvironment, Platform

current_platform: Platform
desktop_environment: Callable[[], Optional[DesktopEnvironment]]
system = platform.system()
if system == "Windows":
    from .windows import windows_desktop_environment as desktop_environment

    current_platform = Platform.windows
elif system == "Darwin":
    from .macos import macos_desktop_environment as desktop_environment

    current_platform = Platform.macos
else:
    from .posix import posix_desktop_environment as desktop_environment

    current_platform = Platform.posix
