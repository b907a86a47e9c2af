import logging

from mkproject.modules.scaffolding.domain.value_objects import Toolchain
from mkproject.modules.scaffolding.infrastructure.config import (
    Settings,
    parse_log_level,
)


def test_settings_defaults_from_empty_env():
    settings = Settings.from_env({})

    assert settings.log_level == logging.WARNING
    assert settings.toolchain == Toolchain()
    assert settings.pretty_events is False


def test_settings_overrides_from_env():
    settings = Settings.from_env(
        {
            "MKPROJECT_LOG_LEVEL": "debug",
            "MKPROJECT_PYTHON": "/usr/bin/python3.12",
            "MKPROJECT_CARGO": "/opt/cargo/bin/cargo",
            "MKPROJECT_SHELL_PACKAGE": "ptpython",
        }
    )

    assert settings.log_level == logging.DEBUG
    assert settings.toolchain == Toolchain(
        python="/usr/bin/python3.12",
        cargo="/opt/cargo/bin/cargo",
        shell_package="ptpython",
    )


def test_log_format_pretty_enables_indented_events():
    assert Settings.from_env({"LOG_FORMAT": "PRETTY"}).pretty_events is True
    assert Settings.from_env({"LOG_FORMAT": "json"}).pretty_events is False


def test_empty_env_values_fall_back_to_defaults():
    settings = Settings.from_env({"MKPROJECT_CARGO": "", "MKPROJECT_PYTHON": ""})

    assert settings.toolchain.cargo == "cargo"
    assert settings.toolchain.python == "python3"


def test_parse_log_level_variants():
    assert parse_log_level(None) == logging.WARNING
    assert parse_log_level("INFO") == logging.INFO
    assert parse_log_level(" error ") == logging.ERROR
    assert parse_log_level("10") == 10
    assert parse_log_level("verbosísimo") == logging.WARNING
