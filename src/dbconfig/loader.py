"""
Entry point: resolve database configuration from a file, falling back to the environment.
"""
import logging
import os
from typing import Mapping, Optional, Union

from .env_resolver import resolve_from_env
from .exceptions import ConfigFileNotFound
from .file_resolver import resolve_from_file, search_config_file
from .schemas import Config

logger = logging.getLogger(__name__)


def load_config(
    directory: Union[str, os.PathLike],
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Load database settings.

    Looks for a ``dbconfig.<ext>`` file in ``directory``. If none exists, the
    configuration is read from ``DB_*`` environment variables. Any other
    error while searching or parsing the file is raised without falling back.
    """
    try:
        config_file, _ = search_config_file(directory)
    except ConfigFileNotFound:
        logger.debug(f"No configuration file in {directory}, using environment variables")
        return resolve_from_env(environ)

    return resolve_from_file(config_file)
