"""
Database configuration resolution from environment variables.
"""
import logging
from typing import Mapping, Optional

from .constants import (
    DEFAULT_PORT,
    DEFAULT_SSL_MODE,
    ENV_DB_DATABASE,
    ENV_DB_HOST,
    ENV_DB_PASSWORD,
    ENV_DB_PORT,
    ENV_DB_SSL_CA,
    ENV_DB_SSL_CERT,
    ENV_DB_SSL_KEY,
    ENV_DB_SSL_MODE,
    ENV_DB_TYPE,
    ENV_DB_USER,
)
from .env_resolve import lookup, lookup_int
from .exceptions import DbConfigError, EnvConfigNotLoaded, EnvConfigParseError
from .schemas import Config, SSLConfig, VerifyCASSLConfig, VerifyFullSSLConfig
from .types import SSLMode, parse_db_type, parse_ssl_mode

logger = logging.getLogger(__name__)


def _require(key: str, environ: Optional[Mapping[str, str]]) -> str:
    val, present = lookup(key, environ)
    if not present:
        raise EnvConfigNotLoaded(f"{key} environment variable not found")
    return val


def resolve_from_env(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from DB_* environment variables.

    Variables are read in a fixed order and the first failure is raised:
    DB_TYPE, DB_HOST, DB_PORT, DB_DATABASE, DB_USER, DB_PASSWORD, DB_SSL_MODE,
    then the SSL credential paths the resolved mode requires.

    Raises:
        EnvConfigNotLoaded: a required variable is missing or empty.
        EnvConfigParseError: a variable is present but invalid.
    """
    logger.debug("Resolving database configuration from environment variables")

    raw_type = _require(ENV_DB_TYPE, environ)
    try:
        db_type = parse_db_type(raw_type)
    except DbConfigError as e:
        raise EnvConfigParseError(str(e)) from e

    host = _require(ENV_DB_HOST, environ)

    try:
        port = lookup_int(ENV_DB_PORT, DEFAULT_PORT, environ)
    except ValueError as e:
        raise EnvConfigParseError(str(e)) from e
    if not 1 <= port <= 65535:
        raise EnvConfigParseError(f"{ENV_DB_PORT} environment variable value {port} is out of range")

    database = _require(ENV_DB_DATABASE, environ)
    user = _require(ENV_DB_USER, environ)
    password = _require(ENV_DB_PASSWORD, environ)

    ssl = _resolve_ssl(environ)

    config = Config(
        type=db_type,
        host=host,
        port=port,
        user=user,
        password=password,
        database=database,
        ssl=ssl,
    )
    logger.debug(f"Resolved {config.type} configuration for {host}:{port}/{database} (ssl mode: {config.ssl_mode})")
    return config


def _resolve_ssl(environ: Optional[Mapping[str, str]]) -> Optional[SSLConfig]:
    raw_mode, present = lookup(ENV_DB_SSL_MODE, environ)
    if not present:
        raw_mode = DEFAULT_SSL_MODE
    try:
        mode = parse_ssl_mode(raw_mode)
    except DbConfigError as e:
        raise EnvConfigParseError(str(e)) from e

    if mode is SSLMode.VERIFY_FULL:
        cert = _require(ENV_DB_SSL_CERT, environ)
        key = _require(ENV_DB_SSL_KEY, environ)
        ca = _require(ENV_DB_SSL_CA, environ)
        return VerifyFullSSLConfig(ca=ca, cert=cert, key=key)

    if mode is SSLMode.VERIFY_CA:
        return VerifyCASSLConfig(ca=_require(ENV_DB_SSL_CA, environ))

    return None
