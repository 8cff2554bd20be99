r"""Blocking sleep between retry attempts.

The retry engine suspends in exactly one place, the wait before a retry.
Keeping it in its own function makes it easy to patch in tests.
"""

from __future__ import annotations

__all__ = ["sleep"]

import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def sleep(seconds: float) -> None:
    """Block the calling thread for the given number of seconds.

    Args:
        seconds: The wait duration. Values <= 0 return immediately.

    Example:
        ```pycon
        >>> from arequest.utils.sleep import sleep
        >>> sleep(0.0)

        ```
    """
    if seconds <= 0:
        return
    logger.debug(f"Sleeping {seconds:.6f}s before next attempt")
    time.sleep(seconds)
