import pytest

from dbconfig import (
    ConfigFileNotLoaded,
    ConfigFileParseError,
    DbType,
    EnvConfigNotLoaded,
    EnvConfigParseError,
    SSLMode,
    load_config,
)

FILE_CONFIG = """{
    "type": "POSTGRESQL",
    "host": "localhost",
    "port": 5432,
    "user": "postgres",
    "password": "postgres",
    "database": "postgres",
    "ssl": {
        "mode": "verify-full",
        "ca": "ca.crt",
        "key": "client.key",
        "cert": "client.crt"
    }
}"""


class TestLoadConfig:
    def test_missing_file_and_environment(self, tmp_path):
        with pytest.raises(EnvConfigNotLoaded) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code == "DBCONFIG-1013"
        assert exc_info.value.detail == "DB_TYPE environment variable not found"

    def test_json_file(self, tmp_path, write_config):
        write_config(FILE_CONFIG)
        config = load_config(tmp_path)
        assert config.type is DbType.POSTGRESQL
        assert config.host == "localhost"
        assert config.port == 5432
        assert config.user == "postgres"
        assert config.password == "postgres"
        assert config.database == "postgres"
        assert config.ssl.mode is SSLMode.VERIFY_FULL
        assert config.ssl.ca == "ca.crt"
        assert config.ssl.cert == "client.crt"
        assert config.ssl.key == "client.key"

    def test_file_takes_precedence_over_environment(self, tmp_path, write_config, base_env, monkeypatch):
        monkeypatch.setenv("DB_HOST", "env-host")
        write_config(FILE_CONFIG)
        assert load_config(tmp_path).host == "localhost"

    def test_environment_fallback(self, tmp_path, base_env, monkeypatch):
        monkeypatch.setenv("DB_SSL_MODE", "disable")
        config = load_config(tmp_path)
        assert config.port == 5432
        assert config.ssl is None

    def test_environment_verify_ca(self, tmp_path, base_env, monkeypatch):
        monkeypatch.setenv("DB_SSL_MODE", "verify-ca")
        monkeypatch.setenv("DB_SSL_CA", "ca.crt")
        config = load_config(tmp_path)
        assert config.ssl.mode is SSLMode.VERIFY_CA
        assert config.ssl.ca == "ca.crt"

    def test_environment_verify_ca_missing_ca(self, tmp_path, base_env, monkeypatch):
        monkeypatch.setenv("DB_SSL_MODE", "verify-ca")
        with pytest.raises(EnvConfigNotLoaded, match="DB_SSL_CA"):
            load_config(tmp_path)

    def test_environment_verify_full_missing_key(self, tmp_path, base_env, monkeypatch):
        monkeypatch.setenv("DB_SSL_MODE", "verify-full")
        monkeypatch.setenv("DB_SSL_CA", "ca.crt")
        monkeypatch.setenv("DB_SSL_CERT", "client.crt")
        with pytest.raises(EnvConfigNotLoaded) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.detail == "DB_SSL_KEY environment variable not found"

    def test_environment_invalid_db_type(self, tmp_path, base_env, monkeypatch):
        monkeypatch.setenv("DB_TYPE", "INVALID")
        monkeypatch.setenv("DB_PORT", "5432")
        monkeypatch.setenv("DB_SSL_MODE", "disable")
        with pytest.raises(EnvConfigParseError) as exc_info:
            load_config(tmp_path)
        assert "INVALID" in exc_info.value.detail

    def test_malformed_file_does_not_fall_back(self, tmp_path, write_config, base_env):
        write_config('{"type": "POSTGRESQL",')
        with pytest.raises(ConfigFileParseError):
            load_config(tmp_path)

    def test_invalid_file_does_not_fall_back(self, tmp_path, write_config, base_env):
        write_config(FILE_CONFIG.replace("POSTGRESQL", "invalid"))
        with pytest.raises(ConfigFileParseError):
            load_config(tmp_path)

    def test_unreadable_file_does_not_fall_back(self, tmp_path, base_env):
        (tmp_path / "dbconfig.json").mkdir()
        with pytest.raises(ConfigFileNotLoaded):
            load_config(tmp_path)

    def test_explicit_environ(self, tmp_path):
        config = load_config(tmp_path, environ={
            "DB_TYPE": "MYSQL",
            "DB_HOST": "mysql",
            "DB_PORT": "3306",
            "DB_DATABASE": "app",
            "DB_USER": "app",
            "DB_PASSWORD": "secret",
        })
        assert config.type is DbType.MYSQL
        assert config.port == 3306
