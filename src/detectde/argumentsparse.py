# Copyright (c) 2016-2024 Damon Lynch
# SPDX - License - Identifier: MIT

"""
Parse command line arguments
"""

import importlib.metadata
from argparse import ArgumentParser, HelpFormatter


def package_metadata():
    """
    Get Python package metadata

    :return: version number and package summary
    """

    try:
        version = importlib.metadata.version("detect-desktop-environment")
    except Exception:
        version = "Unknown version"
        summary = (
            "Detect the desktop environment the current process is running under "
            "using only its environment variables"
        )

    else:
        metadata = importlib.metadata.metadata("detect-desktop-environment")
        summary = metadata["summary"]

    return version, summary


def get_parser(formatter_class=HelpFormatter) -> ArgumentParser:
    """
    Parse command line options for this script

    :param formatter_class: one of 4 argparse formatting classes
    :return: argparse.ArgumentParser
    """

    version, summary = package_metadata()

    parser = ArgumentParser(
        prog="detectde", description=summary, formatter_class=formatter_class
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {version}")

    output = parser.add_mutually_exclusive_group()

    output.add_argument(
        "--xdg-name",
        action="store_true",
        help="output the name registered with freedesktop.org, e.g. X-Cinnamon",
    )

    output.add_argument(
        "--toolkit",
        action="store_true",
        help="output the toolkit family of the desktop: gtk, qt or other",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="display the environment variables examined to stdout",
    )

    parser.add_argument(
        "--debug", action="store_true", help="output debugging information to stdout"
    )

    return parser
