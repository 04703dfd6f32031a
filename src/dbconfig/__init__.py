from .types import DbType, SSLMode, parse_db_type, parse_ssl_mode
from .schemas import Config, SSLConfig, VerifyCASSLConfig, VerifyFullSSLConfig
from .exceptions import (
    ERROR_CODES,
    ERROR_CODE_DB_TYPE_PARSE_ERROR,
    ERROR_CODE_SSL_MODE_PARSE_ERROR,
    ERROR_CODE_CONFIG_FILE_NOT_FOUND,
    ERROR_CODE_CONFIG_FILE_NOT_LOADED,
    ERROR_CODE_ENV_CONFIG_NOT_LOADED,
    ERROR_CODE_CONFIG_FILE_PARSE_ERROR,
    ERROR_CODE_ENV_CONFIG_PARSE_ERROR,
    DbConfigError,
    DbTypeParseError,
    SSLModeParseError,
    ConfigFileNotFound,
    ConfigFileNotLoaded,
    ConfigFileParseError,
    EnvConfigNotLoaded,
    EnvConfigParseError,
    describe_error_code,
    is_error_code,
)
from .file_resolver import CONFIG_FORMATS, ConfigFormat, resolve_from_file, search_config_file
from .env_resolver import resolve_from_env
from .loader import load_config

__all__ = [
    "DbType",
    "SSLMode",
    "parse_db_type",
    "parse_ssl_mode",
    "Config",
    "SSLConfig",
    "VerifyCASSLConfig",
    "VerifyFullSSLConfig",
    "ERROR_CODES",
    "ERROR_CODE_DB_TYPE_PARSE_ERROR",
    "ERROR_CODE_SSL_MODE_PARSE_ERROR",
    "ERROR_CODE_CONFIG_FILE_NOT_FOUND",
    "ERROR_CODE_CONFIG_FILE_NOT_LOADED",
    "ERROR_CODE_ENV_CONFIG_NOT_LOADED",
    "ERROR_CODE_CONFIG_FILE_PARSE_ERROR",
    "ERROR_CODE_ENV_CONFIG_PARSE_ERROR",
    "DbConfigError",
    "DbTypeParseError",
    "SSLModeParseError",
    "ConfigFileNotFound",
    "ConfigFileNotLoaded",
    "ConfigFileParseError",
    "EnvConfigNotLoaded",
    "EnvConfigParseError",
    "describe_error_code",
    "is_error_code",
    "CONFIG_FORMATS",
    "ConfigFormat",
    "resolve_from_file",
    "search_config_file",
    "resolve_from_env",
    "load_config",
]
