import io
import logging

import pytest

from log_suppression import (
    ORIGIN_ATTR,
    RecordFilter,
    SuppressionConfig,
    get_logger,
    install,
    origin_context,
    set_default_config,
    uninstall,
)

NOISY = "Cannot load configuration from stream"


class ConfigUtils:
    """Stand-in for the configuration loader that emits the noisy warning"""

    def load(self, logger, source="plugin.yml"):
        logger.warning(NOISY + " %s", source)


def emit_from_elsewhere(logger):
    logger.warning(NOISY + " %s", "plugin.yml")


@pytest.fixture
def target_logger():
    logger = logging.getLogger("test_suppression_target")
    logger.setLevel(logging.INFO)
    yield logger
    uninstall(logger)


def test_install_returns_filter_on_target(target_logger):
    record_filter = install(target_logger)

    assert isinstance(record_filter, RecordFilter)
    assert record_filter in target_logger.filters


def test_install_echoes_for_config_loader(target_logger, capsys, caplog):
    install(target_logger)

    with caplog.at_level(logging.INFO, logger="test_suppression_target"):
        ConfigUtils().load(target_logger)
        target_logger.info("still visible")

    assert capsys.readouterr().out == "[plugin.yml]\n"
    assert [
        r.getMessage() for r in caplog.records if r.name == "test_suppression_target"
    ] == ["still visible"]


def test_install_suppresses_silently_for_other_callers(target_logger, capsys, caplog):
    install(target_logger)

    with caplog.at_level(logging.INFO, logger="test_suppression_target"):
        emit_from_elsewhere(target_logger)

    assert capsys.readouterr().out == ""
    assert not [r for r in caplog.records if r.name == "test_suppression_target"]


def test_origin_tag_replaces_stack_walking(target_logger, capsys):
    install(target_logger)

    with origin_context("app.config.ConfigUtils"):
        emit_from_elsewhere(target_logger)
    target_logger.warning(NOISY + " %s", "extra.yml", extra={ORIGIN_ATTR: "ConfigUtils"})

    assert capsys.readouterr().out == "[plugin.yml]\n[extra.yml]\n"


def test_install_twice_replaces_previous(target_logger):
    first = install(target_logger)
    second = install(target_logger)

    assert first not in target_logger.filters
    assert [f for f in target_logger.filters if isinstance(f, RecordFilter)] == [second]


def test_install_injected_filter(target_logger):
    stream = io.StringIO()
    record_filter = RecordFilter(stream=stream)

    assert install(target_logger, record_filter=record_filter) is record_filter
    ConfigUtils().load(target_logger, "injected.yml")
    assert stream.getvalue() == "[injected.yml]\n"


def test_install_uses_config(target_logger):
    config = SuppressionConfig(message_substring="deprecated", caller_substring="Legacy")
    record_filter = install(target_logger, config)

    assert record_filter.rule.message_substring == "deprecated"
    assert record_filter.rule.caller_substring == "Legacy"


def test_install_disabled_config(target_logger):
    assert install(target_logger, SuppressionConfig(enabled=False)) is None
    assert target_logger.filters == []


def test_install_defaults_to_root_logger():
    set_default_config(SuppressionConfig())
    root = logging.getLogger()
    try:
        record_filter = install()
        assert record_filter in root.filters
    finally:
        assert uninstall() == 1
    assert not any(isinstance(f, RecordFilter) for f in root.filters)


def test_uninstall_without_filters(target_logger):
    assert uninstall(target_logger) == 0


def test_get_logger_attaches_filtered_console_handler(capsys):
    config = SuppressionConfig(log_level="DEBUG", include_timestamp=False)
    logger = get_logger("test_suppression_console", config)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert any(isinstance(f, RecordFilter) for f in handler.filters)

        logger.info("plugins loaded")
        ConfigUtils().load(logger)

        out = capsys.readouterr().out
        assert "INFO test_suppression_console plugins loaded" in out
        assert "[plugin.yml]" in out
        assert NOISY not in out
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_get_logger_filters_child_records(capsys):
    config = SuppressionConfig(include_timestamp=False)
    logger = get_logger("test_suppression_parent", config)
    try:
        child = logging.getLogger("test_suppression_parent.child")
        emit_from_elsewhere(child)
        child.warning("visible warning")

        out = capsys.readouterr().out
        assert NOISY not in out
        assert "WARNING test_suppression_parent.child visible warning" in out
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_get_logger_reuses_existing_handlers():
    logger = get_logger("test_suppression_reuse", SuppressionConfig())
    try:
        assert get_logger("test_suppression_reuse") is logger
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
