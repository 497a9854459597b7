from activity_journal.config import Config, get_config


def test_from_env_defaults(monkeypatch):
    for name in ("AJ_DATA_DIR", "AJ_LOG_LEVEL", "AJ_DEFAULT_DURATION_HOURS"):
        monkeypatch.delenv(name, raising=False)
    assert Config.from_env() == Config()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("AJ_DATA_DIR", "/tmp/journal")
    monkeypatch.setenv("AJ_LOG_LEVEL", "debug")
    monkeypatch.setenv("AJ_DEFAULT_DURATION_HOURS", "not-a-number")
    config = get_config(force_reload=True)
    assert config.data_dir == "/tmp/journal"
    assert config.log_level == "DEBUG"
    assert config.default_duration_hours == 1.0
    monkeypatch.delenv("AJ_DATA_DIR")
    get_config(force_reload=True)
