import logging
import pytest

from viewplay.core.config import PlaygroundConfig, DEFAULT_CONFIG


def test_defaults():
    assert DEFAULT_CONFIG.combinator_for("blur") == "sum"
    assert DEFAULT_CONFIG.combinator_for("opacity") == "product"
    assert DEFAULT_CONFIG.combinator_for("unknown") == "latest"
    assert DEFAULT_CONFIG.emit_reuse


def test_unknown_combinator_rejected():
    with pytest.raises(ValueError):
        PlaygroundConfig(combinators={"blur": "average"})
    with pytest.raises(ValueError):
        PlaygroundConfig(default_combinator="average")


def test_with_combinator_returns_new_config():
    config = DEFAULT_CONFIG.with_combinator("blur", "max")
    assert config.combinator_for("blur") == "max"
    assert DEFAULT_CONFIG.combinator_for("blur") == "sum"


def test_from_env():
    config = PlaygroundConfig.from_env({"VIEWPLAY_LOG_LEVEL": "debug", "VIEWPLAY_EMIT_REUSE": "off"})
    assert config.logging_level == logging.DEBUG
    assert not config.emit_reuse


def test_bad_log_level_falls_back():
    assert PlaygroundConfig(log_level="chatty").logging_level == logging.WARNING
