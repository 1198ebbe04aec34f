# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Logging setup for scripts and notebooks driving the solver."""

import logging
import os


def configure_logging(outdir=None, name="secondorder", level=logging.INFO):
    """Set up console (+ optional file) logging on the 'secondorder' logger.

    Args:
        outdir: directory for ``<name>.log``; no file handler when None.
        name: used in the log filename.
        level: level for the logger and its handlers.

    Returns:
        the configured logger.
    """
    logger = logging.getLogger("secondorder")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if outdir is not None:
        os.makedirs(outdir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(outdir, f"{name}.log"))
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger
