#!/usr/bin/env python3
"""Tests for configuration building and logging setup.

Run with ``python test_config.py`` or via ``pytest``.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

from lazyseq import chain
from lazyseq.config.defaults import DEFAULT_LOG_FORMAT, build_config, get_config, reset_config
from lazyseq.core import logging as lazyseq_logging
from lazyseq.core.errors import ConfigurationError
from lazyseq.core.logging import configure_logging, get_logger

ENV_VARS = ("LAZYSEQ_LOG_LEVEL", "LAZYSEQ_LOG_FORMAT", "LAZYSEQ_LOG_FILE", "LAZYSEQ_TRACE_CHAIN")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("lazyseq")
    lazyseq_logging._is_configured = False


# ---------------------------------------------------------------------------
# build_config
# ---------------------------------------------------------------------------

def test_defaults():
    config = build_config()
    assert config["log"] == {"level": "WARNING", "format": DEFAULT_LOG_FORMAT, "file": None}
    assert config["chain"] == {"trace": False}


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("LAZYSEQ_LOG_LEVEL", "debug")
    monkeypatch.setenv("LAZYSEQ_LOG_FILE", "/tmp/lazyseq/run.log")
    monkeypatch.setenv("LAZYSEQ_TRACE_CHAIN", "true")

    config = build_config()
    assert config["log"]["level"] == "DEBUG"
    assert config["log"]["file"] == Path("/tmp/lazyseq/run.log")
    assert config["chain"]["trace"] is True


def test_env_file(tmp_path):
    env_file = tmp_path / "lazyseq.env"
    env_file.write_text("LAZYSEQ_LOG_LEVEL=INFO\nLAZYSEQ_TRACE_CHAIN=1\n")

    config = build_config(env_file=str(env_file))
    assert config["log"]["level"] == "INFO"
    assert config["chain"]["trace"] is True


def test_overrides_are_deep_merged():
    config = build_config({"log": {"level": "ERROR"}})
    assert config["log"]["level"] == "ERROR"
    assert config["log"]["format"] == DEFAULT_LOG_FORMAT
    assert config["chain"]["trace"] is False


def test_unknown_level_rejected(monkeypatch):
    monkeypatch.setenv("LAZYSEQ_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        build_config()


def test_get_config_is_cached(monkeypatch):
    first = get_config()
    monkeypatch.setenv("LAZYSEQ_TRACE_CHAIN", "true")
    assert get_config() is first

    reset_config()
    assert get_config()["chain"]["trace"] is True


def test_chain_trace_default_follows_config(monkeypatch):
    monkeypatch.setenv("LAZYSEQ_TRACE_CHAIN", "yes")
    reset_config()
    assert chain([]).trace is True
    assert chain([], trace=False).trace is False


def test_bad_log_level_does_not_break_chains(monkeypatch):
    """Only the trace flag is read for chains; log settings are not validated"""
    monkeypatch.setenv("LAZYSEQ_LOG_LEVEL", "verbose")
    reset_config()

    assert chain([1]).first().value == 1
    assert list(chain([1, 2, 3]).map(str)) == ["1", "2", "3"]
    with pytest.raises(ConfigurationError):
        get_config()


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------

def test_configure_logging_writes_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "lazyseq.log"
    config = build_config({"log": {"level": "DEBUG", "file": log_file}})

    configure_logging(config["log"], force=True)
    chain([1, 2, 3], trace=True).take(2).first()

    assert log_file.exists()
    content = log_file.read_text()
    assert "chain.take()" in content
    assert "chain.first() -> terminal" in content


def test_configure_logging_is_idempotent(tmp_path, restore_logging):
    config = build_config({"log": {"file": tmp_path / "a.log"}})
    configure_logging(config["log"], force=True)
    handlers = list(lazyseq_logging._handler_ids)

    configure_logging(build_config({"log": {"file": tmp_path / "b.log"}})["log"])
    assert lazyseq_logging._handler_ids == handlers
    assert not (tmp_path / "b.log").exists()


def test_get_logger_binds_name():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    try:
        get_logger("lazyseq.tests").info("hello")
    finally:
        logger.remove(handler_id)

    assert records[0]["extra"]["name"] == "lazyseq.tests"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
