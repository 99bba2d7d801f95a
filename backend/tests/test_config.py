import json

from core.config import AppConfig


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "missing.json"))
    config = AppConfig.load()

    assert config.database.host == "localhost"
    assert config.session.expire_minutes == 480
    assert config.log_level == "INFO"


def test_load_from_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "database": {"host": "db", "name": "contacts", "user": "app", "password": "pw"},
                "session": {"expire_minutes": 30, "secure_cookie": False},
                "log_level": "debug",
            }
        )
    )
    monkeypatch.setenv("CONFIG_FILE", str(path))

    config = AppConfig.load()

    assert config.database.conninfo == "host=db port=5432 dbname=contacts user=app password=pw"
    assert config.session.expire_minutes == 30
    assert config.session.secure_cookie is False
    assert config.log_level == "debug"
