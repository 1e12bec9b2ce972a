from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"


def load_env() -> Path | None:
    """Load the nearest ``.env`` file, searching from the working directory upwards.

    The first file found wins and the search stops there. The search ends below
    the filesystem root, so a .env file at the root is ignored. Variables already present
    in the process environment are not overridden. Failures are logged as warnings
    and never raised.

    Returns:
        Path of the ``.env`` file that was loaded, or None if nothing was loaded.
    """
    try:
        cwd = Path(os.getcwd())
    except OSError as e:
        logger.warning("Could not get working directory: %s", e)
        return None

    directory = cwd
    # The filesystem root itself is never searched
    while directory != directory.parent:
        env_path = directory / ENV_FILE_NAME
        directory = directory.parent
        if not env_path.exists():
            continue
        if not env_path.is_file():
            logger.warning("Could not load .env file from %s: not a regular file", env_path)
            return None
        try:
            load_dotenv(env_path, override=False)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load .env file from %s: %s", env_path, e)
            return None
        logger.debug("Loaded environment from %s", env_path)
        return env_path

    logger.debug("No %s file found above %s", ENV_FILE_NAME, cwd)
    return None
