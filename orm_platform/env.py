"""Environment variable access and dotenv file loading."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env_file(path: str | os.PathLike[str]) -> None:
    """Load KEY=value pairs from a dotenv file into os.environ.

    Variables already set in the process environment keep their values.

    Raises:
        FileNotFoundError: The file does not exist
        PermissionError: The file cannot be read
    """
    env_path = Path(path)
    with env_path.open(encoding="utf-8") as stream:
        load_dotenv(stream=stream, override=False)
    logger.debug(f"Loaded environment from {env_path}")


def get_var(name: str) -> str | None:
    """Return an environment variable, or None when unset."""
    return os.environ.get(name)
