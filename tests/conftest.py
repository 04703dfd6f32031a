import json

import pytest

from dbconfig.constants import ENV_VARS


@pytest.fixture(autouse=True)
def clean_db_env(monkeypatch):
    """Start every test without any DB_* variables set."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def base_env(monkeypatch):
    """Minimal valid environment for a PostgreSQL connection without SSL."""
    values = {
        "DB_TYPE": "POSTGRESQL",
        "DB_HOST": "localhost",
        "DB_USER": "postgres",
        "DB_PASSWORD": "postgres",
        "DB_DATABASE": "postgres",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values


@pytest.fixture
def write_config(tmp_path):
    """Write a dbconfig.json into tmp_path from a dict or raw string."""
    def _write(content, name="dbconfig.json"):
        if not isinstance(content, str):
            content = json.dumps(content)
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
