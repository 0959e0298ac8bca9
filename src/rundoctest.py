#!/usr/bin/python3
# Copyright (c) 2024 Damon Lynch
# SPDX - License - Identifier: MIT

__author__ = "Damon Lynch"
__copyright__ = "Copyright 2024, Damon Lynch"

import doctest

import detectde.constants
import detectde.system.posix

if __name__ == "__main__":
    for module in (detectde.constants, detectde.system.posix):
        doctest.testmod(module, verbose=False)
