# SPDX-FileCopyrightText: Copyright 2024 Damon Lynch
# SPDX-License-Identifier: MIT

import logging
import sys

APP_NAME = "detectde"


def setup_logging(debug: bool = False) -> None:
    """
    Send log records to stdout.

    The library itself never installs a handler. This is only called by the
    command line program.

    :param debug: log debug records, else only warnings and above
    """

    log_formatter = logging.Formatter(
        f"%(asctime)s - [%(levelname)-5s] - [{APP_NAME}] - %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(log_formatter)

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(handler)
