from roomlog.core.settings import RoomLogSettings, get_roomlog_config, reset_roomlog_config


def test_defaults():
    settings = RoomLogSettings(_env_file=None)

    assert settings.MONGO_URI == "mongodb://localhost:27017"
    assert settings.MONGO_DB == "roomlog"
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.SECRET_KEY_BYTES == 32
    assert settings.TYPED_ERROR_STATUS is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("ROOMLOG__MONGO_DB", "roomlog_test")
    monkeypatch.setenv("ROOMLOG__TYPED_ERROR_STATUS", "true")

    settings = RoomLogSettings(_env_file=None)

    assert settings.MONGO_DB == "roomlog_test"
    assert settings.TYPED_ERROR_STATUS is True


def test_config_is_cached_until_reset(monkeypatch):
    reset_roomlog_config()
    first = get_roomlog_config()
    assert get_roomlog_config() is first

    monkeypatch.setenv("ROOMLOG__MONGO_DB", "other")
    assert get_roomlog_config().MONGO_DB == first.MONGO_DB

    reset_roomlog_config()
    assert get_roomlog_config().MONGO_DB == "other"
    reset_roomlog_config()
