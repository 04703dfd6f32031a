"""
Error codes and exceptions for database configuration loading.

Every exception carries a stable ``code``, a short ``message`` and a
free-text ``detail`` naming the offending input.
"""
from types import MappingProxyType
from typing import Mapping, Optional

ERROR_CODE_DB_TYPE_PARSE_ERROR = "DBCONFIG-1001"
ERROR_CODE_SSL_MODE_PARSE_ERROR = "DBCONFIG-1005"
ERROR_CODE_CONFIG_FILE_NOT_FOUND = "DBCONFIG-1011"
ERROR_CODE_CONFIG_FILE_NOT_LOADED = "DBCONFIG-1012"
ERROR_CODE_ENV_CONFIG_NOT_LOADED = "DBCONFIG-1013"
ERROR_CODE_CONFIG_FILE_PARSE_ERROR = "DBCONFIG-1014"
ERROR_CODE_ENV_CONFIG_PARSE_ERROR = "DBCONFIG-1015"

ERROR_CODES: Mapping[str, str] = MappingProxyType({
    ERROR_CODE_DB_TYPE_PARSE_ERROR: "DbType parse error",
    ERROR_CODE_SSL_MODE_PARSE_ERROR: "SSLMode parse error",
    ERROR_CODE_CONFIG_FILE_NOT_FOUND: "Configuration file not found",
    ERROR_CODE_CONFIG_FILE_NOT_LOADED: "Configuration file not loaded",
    ERROR_CODE_ENV_CONFIG_NOT_LOADED: "Environment configuration not loaded",
    ERROR_CODE_ENV_CONFIG_PARSE_ERROR: "Environment configuration cannot be parsed",
    ERROR_CODE_CONFIG_FILE_PARSE_ERROR: "Configuration file parse error",
})


def describe_error_code(code: str) -> str:
    """Return the registered description for an error code."""
    try:
        return ERROR_CODES[code]
    except KeyError:
        raise KeyError(f"Unknown error code: {code}") from None


class DbConfigError(ValueError):
    """Base exception for configuration resolution errors."""
    code: str = ""
    message: str = "Database configuration error"

    def __init__(self, detail: str = "", message: Optional[str] = None):
        if message is not None:
            self.message = message
        self.detail = detail
        text = f"[{self.code}] {self.message}"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


class DbTypeParseError(DbConfigError):
    code = ERROR_CODE_DB_TYPE_PARSE_ERROR
    message = "DbType parse error"


class SSLModeParseError(DbConfigError):
    code = ERROR_CODE_SSL_MODE_PARSE_ERROR
    message = "SSLMode parse error"


class ConfigFileNotFound(DbConfigError):
    """Raised when no supported config file exists in the searched directory."""
    code = ERROR_CODE_CONFIG_FILE_NOT_FOUND
    message = "Configuration file not found"


class ConfigFileNotLoaded(DbConfigError):
    """Raised when a config file exists but cannot be read."""
    code = ERROR_CODE_CONFIG_FILE_NOT_LOADED
    message = "Configuration file not loaded"


class ConfigFileParseError(DbConfigError):
    code = ERROR_CODE_CONFIG_FILE_PARSE_ERROR
    message = "Configuration file parse error"


class EnvConfigNotLoaded(DbConfigError):
    """Raised when a required environment variable is absent."""
    code = ERROR_CODE_ENV_CONFIG_NOT_LOADED
    message = "Environment configuration not loaded"


class EnvConfigParseError(DbConfigError):
    code = ERROR_CODE_ENV_CONFIG_PARSE_ERROR
    message = "Environment configuration parse error"


def is_error_code(exc: BaseException, code: str) -> bool:
    """Check whether an exception is a DbConfigError with the given code."""
    return isinstance(exc, DbConfigError) and exc.code == code
