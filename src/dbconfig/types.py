from enum import Enum

from .exceptions import DbTypeParseError, SSLModeParseError


class DbType(str, Enum):
    MYSQL = "MYSQL"
    POSTGRESQL = "POSTGRESQL"
    COCKROACHDB = "COCKROACHDB"

    def __str__(self) -> str:
        return self.value


class SSLMode(str, Enum):
    DISABLE = "disable"
    ALLOW = "allow"
    PREFER = "prefer"
    REQUIRE = "require"
    VERIFY_CA = "verify-ca"
    VERIFY_FULL = "verify-full"

    def __str__(self) -> str:
        return self.value

    @property
    def requires_ca(self) -> bool:
        return self in (SSLMode.VERIFY_CA, SSLMode.VERIFY_FULL)

    @property
    def requires_client_cert(self) -> bool:
        return self is SSLMode.VERIFY_FULL


def parse_db_type(value: str) -> DbType:
    """Parse a canonical uppercase token (e.g. ``POSTGRESQL``) into a DbType."""
    if isinstance(value, DbType):
        return value
    try:
        return DbType(value)
    except ValueError:
        raise DbTypeParseError(f'"{value}" value for DbType is invalid') from None


def parse_ssl_mode(value: str) -> SSLMode:
    """Parse a canonical lowercase token (e.g. ``verify-full``) into an SSLMode."""
    if isinstance(value, SSLMode):
        return value
    try:
        return SSLMode(value)
    except ValueError:
        raise SSLModeParseError(f'"{value}" value for SSLMode is invalid') from None
