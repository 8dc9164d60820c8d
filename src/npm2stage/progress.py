"""Progress reporting."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def emit(progress: ProgressCallback | None, message: str) -> None:
    """Send a progress message to the callback, if there is one.

    Every message is also logged at DEBUG level.
    """
    logger.debug(message)
    if progress is not None:
        progress(message)
