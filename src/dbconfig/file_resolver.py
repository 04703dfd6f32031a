"""
Database configuration resolution from ``dbconfig.<ext>`` files.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple, Union

from pydantic import ValidationError

from .constants import CONFIG_FILE_BASENAME
from .exceptions import ConfigFileNotFound, ConfigFileNotLoaded, ConfigFileParseError
from .schemas import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigFormat:
    """A supported config file format: file extension plus decoder."""
    extension: str
    decode: Callable[[bytes], Config]


# Searched in order; the first existing file wins.
CONFIG_FORMATS: Tuple[ConfigFormat, ...] = (
    ConfigFormat(extension="json", decode=Config.from_json),
)


def _format_for(path: Path) -> ConfigFormat:
    suffix = path.suffix.lstrip(".").lower()
    for fmt in CONFIG_FORMATS:
        if fmt.extension == suffix:
            return fmt
    supported = ", ".join(fmt.extension for fmt in CONFIG_FORMATS)
    raise ConfigFileParseError(f"Unsupported configuration file format \"{path.suffix}\" (supported: {supported})")


def search_config_file(directory: Union[str, os.PathLike]) -> Tuple[Path, ConfigFormat]:
    """
    Find the first ``dbconfig.<ext>`` file in ``directory``.

    Raises:
        ConfigFileNotFound: no candidate exists.
        ConfigFileNotLoaded: a candidate could not be checked (e.g. permission denied).
    """
    for fmt in CONFIG_FORMATS:
        candidate = Path(directory) / f"{CONFIG_FILE_BASENAME}.{fmt.extension}"
        try:
            os.stat(candidate)
        except (FileNotFoundError, NotADirectoryError):
            continue
        except OSError as e:
            raise ConfigFileNotLoaded(str(e)) from e
        logger.debug(f"Found configuration file: {candidate}")
        return candidate, fmt

    raise ConfigFileNotFound(f"No {CONFIG_FILE_BASENAME} file found in {directory}")


def resolve_from_file(path: Union[str, os.PathLike]) -> Config:
    """
    Read and parse a configuration file.

    Raises:
        ConfigFileNotLoaded: the file cannot be read.
        ConfigFileParseError: the content is malformed or fails validation.
    """
    path = Path(path)
    fmt = _format_for(path)

    try:
        content = path.read_bytes()
    except OSError as e:
        raise ConfigFileNotLoaded(str(e)) from e

    try:
        config = fmt.decode(content)
    except ValidationError as e:
        raise ConfigFileParseError(str(e)) from e

    logger.debug(f"Loaded {config.type} configuration from {path} (ssl mode: {config.ssl_mode})")
    return config
