import logging

import pytest

from valuestore_lib.config.config import load_server_config
from valuestore_lib.logging_config import configure_logging


def test_missing_config_is_empty(tmp_path):
    assert load_server_config(tmp_path / 'nope.yml') == {}


def test_empty_config_is_empty(tmp_path):
    cfg = tmp_path / 'cfg.yml'
    cfg.write_text('', encoding='utf-8')
    assert load_server_config(cfg) == {}


def test_config_must_be_mapping(tmp_path):
    cfg = tmp_path / 'cfg.yml'
    cfg.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_server_config(cfg)


def test_initial_values_must_be_mapping(tmp_path):
    cfg = tmp_path / 'cfg.yml'
    cfg.write_text('initial_values: [1, 2]\n', encoding='utf-8')
    with pytest.raises(ValueError):
        load_server_config(cfg)


def test_configure_logging_uses_level_from_config(tmp_path):
    cfg = tmp_path / 'cfg.yml'
    cfg.write_text('log_level: debug\n', encoding='utf-8')
    logger = configure_logging(cfg)
    assert isinstance(logger, logging.Logger)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_defaults_to_warning(tmp_path):
    configure_logging(tmp_path / 'missing.yml')
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_survives_bad_config(tmp_path):
    cfg = tmp_path / 'cfg.yml'
    cfg.write_text('just a string', encoding='utf-8')
    configure_logging(cfg)
    assert logging.getLogger().level == logging.WARNING
