# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

# ruff: noqa: F401

from detectde.constants import DesktopEnvironment, Platform
from detectde.detectde import (
    desktop_entry_shown,
    desktop_environment_humanize,
    detect,
    session_version,
)
from detectde.system import current_platform
