#!/usr/bin/python3
# SPDX-FileCopyrightText: 2024 Damon Lynch <damonlynch@gmail.com>
# SPDX-License-Identifier: MIT

__author__ = "Damon Lynch"
__copyright__ = "Copyright 2024, Damon Lynch"

import sys

from detectde.detectde import main

if __name__ == "__main__":
    sys.exit(main())
