from unittest import mock

from activeresource import log_config


def test_logger_config_env_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_ACTIVERESOURCE_SORTING", "warning")
    assert log_config.logger_config("activeresource.sorting") == (
        "activeresource.sorting",
        {"level": "WARNING", "propagate": True},
    )
    assert log_config.logger_config("activeresource", default_level="debug") == (
        "activeresource",
        {"level": "DEBUG", "propagate": True},
    )


def test_get_logger_overrides():
    overrides = log_config.get_logger_overrides("ERROR")
    assert set(overrides) == {"activeresource", "activeresource.sorting"}


@mock.patch.object(log_config, "initialise_logging")
def test_setup_logging(initialise_logging):
    log_config.setup_logging({"httpx": {"level": "WARNING", "propagate": True}})
    loggers = initialise_logging.call_args.kwargs["additional_loggers"]
    assert loggers["httpx"] == {"level": "WARNING", "propagate": True}
    assert "activeresource.sorting" in loggers
