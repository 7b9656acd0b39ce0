"""
Test script for configuration system and logging setup.
"""
import json
import logging
import os

import pytest

from reversi.config import Config, get_default_config
from reversi.logger import LOGGER_NAME, Logger


def test_config_creation():
    """Test creating a default config."""
    config = get_default_config()

    assert config.project_name == "Reversi"
    assert config.search.depth == 3
    assert config.search.workers == 1
    assert config.display.clear_screen
    assert config.arena.rounds == 2
    assert config.logging.log_level == "INFO"
    assert config.validate() is config


def test_save_and_load(tmp_path):
    """Test saving and loading."""
    config = get_default_config()
    config.search.depth = 5
    config.arena.depth_b = 4

    test_path = os.path.join(tmp_path, "configs", "test_config.json")
    config.save(test_path)

    loaded_config = Config.load(test_path)
    assert config.to_dict() == loaded_config.to_dict()
    assert loaded_config.search.depth == 5


def test_partial_config_file(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"search": {"depth": 2}}))

    config = Config.load(str(path))

    assert config.search.depth == 2
    assert config.search.workers == 1
    assert config.arena.rounds == 2


def test_unknown_key_is_rejected():
    with pytest.raises(TypeError):
        Config.from_dict({"search": {"dept": 2}})


@pytest.mark.parametrize("section, key, value", [
    ("search", "depth", 0),
    ("search", "workers", 0),
    ("arena", "rounds", 0),
    ("arena", "depth_a", 0),
    ("logging", "log_level", "LOUD"),
])
def test_validate_rejects(section, key, value):
    config = get_default_config()
    setattr(getattr(config, section), key, value)
    with pytest.raises(ValueError):
        config.validate()


def test_deep_search_only_warns(caplog):
    config = get_default_config()
    config.search.depth = 9
    with caplog.at_level(logging.WARNING):
        config.validate()
    assert "recommended maximum" in caplog.text


def test_logger_writes_run_directory(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_level = "debug"

    metrics = Logger(config, log_dir=str(tmp_path))
    try:
        metrics.log_metrics({'result': 'Draw', 'ratio': 0.5}, 1, prefix='arena/')
        assert os.path.exists(os.path.join(metrics.run_dir, 'config.json'))
        log_path = os.path.join(metrics.run_dir, 'reversi.log')
    finally:
        metrics.close()

    with open(log_path) as f:
        text = f.read()
    assert "Step 1: arena/result=Draw arena/ratio=0.5000" in text


def test_logger_close_removes_handlers():
    package_logger = logging.getLogger(LOGGER_NAME)
    before = list(package_logger.handlers)

    metrics = Logger(get_default_config())
    assert len(package_logger.handlers) == len(before) + 1
    assert metrics.run_dir is None

    metrics.close()
    assert package_logger.handlers == before


if __name__ == "__main__":
    test_config_creation()
    print("Config test completed successfully!")
