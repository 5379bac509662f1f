import logging

from property_attributes.config import Settings, configure_logging


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_EXTRACTIONS", "CACHE_MAX_SIZE"):
        monkeypatch.delenv(f"PROPERTY_ATTRIBUTES_{name}", raising=False)

    config = Settings(_env_file=None)

    assert config.log_level == "INFO"
    assert config.log_extractions is False
    assert config.cache_max_size == 1024


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROPERTY_ATTRIBUTES_LOG_EXTRACTIONS", "true")
    monkeypatch.setenv("PROPERTY_ATTRIBUTES_CACHE_MAX_SIZE", "8")

    config = Settings(_env_file=None)

    assert config.log_extractions is True
    assert config.cache_max_size == 8


def test_configure_logging_sets_root_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging("INFO")
    assert logging.getLogger().level == logging.INFO
