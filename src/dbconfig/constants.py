"""
Environment variable names, file names and defaults used by dbconfig.
"""

# Environment variables
ENV_DB_TYPE = "DB_TYPE"
ENV_DB_HOST = "DB_HOST"
ENV_DB_PORT = "DB_PORT"
ENV_DB_DATABASE = "DB_DATABASE"
ENV_DB_USER = "DB_USER"
ENV_DB_PASSWORD = "DB_PASSWORD"
ENV_DB_SSL_MODE = "DB_SSL_MODE"
ENV_DB_SSL_CA = "DB_SSL_CA"
ENV_DB_SSL_CERT = "DB_SSL_CERT"
ENV_DB_SSL_KEY = "DB_SSL_KEY"

ENV_VARS = (
    ENV_DB_TYPE,
    ENV_DB_HOST,
    ENV_DB_PORT,
    ENV_DB_DATABASE,
    ENV_DB_USER,
    ENV_DB_PASSWORD,
    ENV_DB_SSL_MODE,
    ENV_DB_SSL_CA,
    ENV_DB_SSL_CERT,
    ENV_DB_SSL_KEY,
)

# Defaults
DEFAULT_PORT = 5432
DEFAULT_SSL_MODE = "disable"

# Config file is searched as <directory>/dbconfig.<extension>
CONFIG_FILE_BASENAME = "dbconfig"
