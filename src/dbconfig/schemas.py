"""
Configuration models for database connections.

``Config`` is the resolved, immutable value returned by the loaders. The SSL
section is a tagged variant keyed by ``mode``: only ``verify-ca`` and
``verify-full`` carry credential paths, every other mode resolves to
``ssl=None``.
"""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import DbType, SSLMode, parse_db_type, parse_ssl_mode


class VerifyCASSLConfig(BaseModel):
    """SSL settings for ``verify-ca``: the server certificate is checked against ``ca``."""
    model_config = ConfigDict(frozen=True)

    mode: Literal[SSLMode.VERIFY_CA] = SSLMode.VERIFY_CA
    ca: str = Field(min_length=1)


class VerifyFullSSLConfig(BaseModel):
    """SSL settings for ``verify-full``: CA check, hostname check and client certificate."""
    model_config = ConfigDict(frozen=True)

    mode: Literal[SSLMode.VERIFY_FULL] = SSLMode.VERIFY_FULL
    ca: str = Field(min_length=1)
    cert: str = Field(min_length=1)
    key: str = Field(min_length=1)


SSLConfig = Union[VerifyCASSLConfig, VerifyFullSSLConfig]


class Config(BaseModel):
    """Resolved database connection configuration."""
    model_config = ConfigDict(frozen=True)

    type: DbType
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535, strict=True)
    user: str = Field(min_length=1)
    password: str = Field(min_length=1)
    database: str = Field(min_length=1)
    ssl: Optional[SSLConfig] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> DbType:
        return parse_db_type(value)

    @field_validator("ssl", mode="before")
    @classmethod
    def route_ssl(cls, value: Any) -> Any:
        """Select the SSL variant from ``mode``; modes without credentials drop the section."""
        if value is None or isinstance(value, (VerifyCASSLConfig, VerifyFullSSLConfig)):
            return value
        if not isinstance(value, dict):
            return value

        mode = parse_ssl_mode(value.get("mode", SSLMode.DISABLE.value))
        if not mode.requires_ca:
            return None
        return {**value, "mode": mode}

    @property
    def ssl_mode(self) -> SSLMode:
        """Resolved SSL mode; ``disable`` when no SSL section is present."""
        if self.ssl is None:
            return SSLMode.DISABLE
        return self.ssl.mode

    def to_json(self, **kwargs: Any) -> str:
        """Encode as a ``dbconfig.json`` document."""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Config":
        """Decode a ``dbconfig.json`` document."""
        return cls.model_validate_json(data)
