import logging

import pytest

from config import DEFAULT_CONFIG, EQUATION_PRECISION, load_config, log_level
from logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_load_config_returns_copy():
    config = load_config()
    config['points'].append((5.0, 5.0))
    assert len(DEFAULT_CONFIG['points']) == 2
    assert config['equation_precision'] == EQUATION_PRECISION


def test_overrides(monkeypatch):
    monkeypatch.delenv('INTERP_PRECISION', raising=False)
    config = load_config({'method': 'lagrange', 'equation_precision': 3})
    assert config['method'] == 'lagrange'
    assert config['equation_precision'] == 3


def test_unknown_override():
    with pytest.raises(KeyError):
        load_config({'colour': 'blue'})


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('INTERP_LOG_LEVEL', 'debug')
    monkeypatch.setenv('INTERP_PRECISION', '5')
    config = load_config()
    assert config['log_level'] == 'DEBUG'
    assert config['equation_precision'] == 5
    assert log_level(config) == logging.DEBUG


def test_log_level_falls_back_to_info():
    assert log_level({'log_level': 'chatty'}) == logging.INFO


def test_setup_logging_does_not_duplicate_handlers(restore_root_logger, tmp_path):
    log_file = tmp_path / "lab.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("newton_gregory").debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding='utf-8')


def test_invalid_environment_precision_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv('INTERP_PRECISION', 'abc')
    with caplog.at_level(logging.WARNING, logger='config'):
        config = load_config()
    assert config['equation_precision'] == EQUATION_PRECISION
    assert "INTERP_PRECISION" in caplog.text
