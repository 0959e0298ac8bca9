# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

from setuptools import setup

if __name__ == "__main__":
    setup()
