"""Console logging shared by the sync scripts.

Inside GitHub Actions, sections are folded with ``::group::`` workflow
commands and failures are raised as ``::error::`` annotations.
"""

import logging
import os
import sys
from contextlib import contextmanager

import config

_LOGGER_NAME = "issues_sync"


def get_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO))
    return logger


def _in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def debug(msg: str) -> None:
    get_logger().debug(msg)


def info(msg: str) -> None:
    get_logger().info(msg)


def ok(msg: str) -> None:
    get_logger().info(f"[OK] {msg}")


def warn(msg: str) -> None:
    get_logger().warning(f"[WARN] {msg}")


def error(msg: str) -> None:
    if _in_actions():
        # workflow commands take a single line
        msg = msg.replace("\n", "%0A")
        get_logger().error(f"::error::{msg}")
    else:
        get_logger().error(f"[ERROR] {msg}")


def bullet(msg: str) -> None:
    info(f"{config.LOG_BULLET_ITEM} {msg}")


@contextmanager
def group(title: str):
    if _in_actions():
        get_logger().info(f"::group::{title}")
    else:
        get_logger().info(f"=== {title} ===")
    try:
        yield
    finally:
        if _in_actions():
            get_logger().info("::endgroup::")
