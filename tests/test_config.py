import logging
from pathlib import Path

from budget_core.config import DATA_DIR_ENV, LOG_LEVEL_ENV, configure_logging, load_settings


def test_defaults_without_environment():
    settings = load_settings(environ={})

    assert settings.data_dir == Path("data")
    assert settings.data_file == Path("data") / "transactions.json"
    assert settings.log_level == "WARNING"


def test_environment_overrides_defaults():
    settings = load_settings(environ={DATA_DIR_ENV: "/tmp/ledger", LOG_LEVEL_ENV: "debug"})

    assert settings.data_dir == Path("/tmp/ledger")
    assert settings.log_level == "DEBUG"


def test_flags_override_environment(tmp_path):
    settings = load_settings(tmp_path, "info", environ={DATA_DIR_ENV: "/elsewhere", LOG_LEVEL_ENV: "debug"})

    assert settings.data_dir == tmp_path
    assert settings.log_level == "INFO"


def test_configure_logging_sets_root_level():
    configure_logging("ERROR")
    assert logging.getLogger().level == logging.ERROR

    configure_logging("bogus")
    assert logging.getLogger().level == logging.WARNING
